"""Tab 1: Member Stats for one member's time present over the selected period."""

import streamlit as st

from data.session_store import get_active_events, get_calendar_policy, get_member_names, is_data_loaded
from components.metrics_cards import render_stats_row
from components.charts import daily_minutes_bar, weekday_weekend_donut, bucket_trend_line
from components.tables import stats_to_df, render_styled_table
from engine.aggregator import calculate_stats
from engine.rollup import calculate_period_stats
from engine.records import get_recent_records


def render(sidebar_state):
    """Render the Member Stats tab."""
    st.header("Member Stats")

    if not is_data_loaded():
        st.info("No data loaded. Please upload events in the Records tab.")
        return
    if sidebar_state.member_id is None:
        st.info("No members found in the loaded events.")
        return

    member_id = sidebar_state.member_id
    name = get_member_names().get(member_id, member_id)
    events = [e for e in get_active_events() if e.member_id == member_id]

    period = calculate_period_stats(
        events, sidebar_state.start, sidebar_state.end, get_calendar_policy()
    )

    st.subheader(f"{name}: {sidebar_state.start:%Y-%m-%d} to {sidebar_state.end:%Y-%m-%d}")
    render_stats_row(period.total)

    if period.total.days_present == 0:
        st.info("No stays recorded in this period.")
    else:
        col1, col2 = st.columns([3, 2])
        with col1:
            st.plotly_chart(daily_minutes_bar(period.daily), use_container_width=True)
        with col2:
            st.plotly_chart(weekday_weekend_donut(period.weekday, period.weekend), use_container_width=True)

        st.divider()
        col1, col2 = st.columns(2)
        with col1:
            st.markdown("**Weekdays**")
            render_stats_row(period.weekday)
        with col2:
            st.markdown("**Weekends**")
            render_stats_row(period.weekend)

        st.divider()
        if len(period.weekly) > 1:
            st.plotly_chart(bucket_trend_line(period.weekly, "Weekly Trend", "Week"), use_container_width=True)
        render_styled_table(stats_to_df(period.weekly, "Week"), title="Weekly")
        render_styled_table(stats_to_df(period.monthly, "Month"), title="Monthly")

    st.divider()
    st.subheader("All-Time")
    render_stats_row(calculate_stats(events))

    with st.expander("Recent records (last 7 days)"):
        recent = get_recent_records(events, member_id)
        if recent:
            st.dataframe(
                [
                    {"Type": e.type, "Timestamp": e.timestamp, "Duration (min)": e.duration}
                    for e in recent
                ],
                use_container_width=True,
                hide_index=True,
            )
        else:
            st.caption("No records in the last 7 days.")
