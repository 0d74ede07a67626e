"""Tab 2: Comparison, all members ranked by time present in the period."""

import streamlit as st
import pandas as pd

from data.session_store import get_active_events, get_member_names, is_data_loaded
from components.charts import member_comparison_bar
from components.metrics_cards import format_minutes
from engine.aggregator import build_daily_minutes, summarize
from engine.comparator import compare_members_stats
from engine.intervals import group_by_member


def render(sidebar_state):
    """Render the Comparison tab."""
    st.header("Member Comparison")

    if not is_data_loaded():
        st.info("No data loaded. Please upload events in the Records tab.")
        return

    start, end = sidebar_state.start, sidebar_state.end
    members_stats = {
        member_id: summarize(build_daily_minutes(
            member_events,
            check_out_filter=lambda e: start <= e.timestamp <= end,
        ))
        for member_id, member_events in group_by_member(get_active_events()).items()
    }
    ranking = compare_members_stats(members_stats, get_member_names())

    if not ranking:
        st.info("No members to compare.")
        return

    st.caption(f"Check-outs from {start:%Y-%m-%d} to {end:%Y-%m-%d}")
    st.plotly_chart(member_comparison_bar(ranking), use_container_width=True)

    st.dataframe(
        pd.DataFrame([
            {"Rank": i, "Member": row["name"], "Total Time": format_minutes(row["total_time"])}
            for i, row in enumerate(ranking, start=1)
        ]),
        use_container_width=True,
        hide_index=True,
    )
