"""Global sidebar controls for member and reporting period selection."""

import streamlit as st
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from data.session_store import get_members, get_member_names, get_calendar_policy, is_data_loaded
from engine.periods import week_range, month_range, day_bounds
from config.defaults import PERIOD_TYPES, DEFAULT_PERIOD_TYPE


@dataclass
class SidebarState:
    member_id: Optional[str]
    period_type: str
    start: datetime
    end: datetime


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    policy = get_calendar_policy()
    with st.sidebar:
        st.title("Attendance Tracker")
        st.divider()

        members = get_members()
        names = get_member_names()
        member_id = st.selectbox(
            "Member",
            options=members,
            format_func=lambda m: names.get(m, m),
            key="sidebar_member",
        ) if members else None

        period_type = st.radio(
            "Period",
            options=PERIOD_TYPES,
            index=PERIOD_TYPES.index(DEFAULT_PERIOD_TYPE),
            horizontal=True,
            key="sidebar_period_type",
        )

        if period_type == "Week":
            anchor = st.date_input("Week containing", value=date.today(), key="sidebar_week_anchor")
            start, end = week_range(anchor, policy)
        elif period_type == "Month":
            anchor = st.date_input("Month containing", value=date.today(), key="sidebar_month_anchor")
            start, end = month_range(anchor)
        else:
            first = st.date_input("From", value=date.today() - timedelta(days=29), key="sidebar_from")
            last = st.date_input("To", value=date.today(), key="sidebar_to")
            if last < first:
                st.error("'To' must not be before 'From'.")
                last = first
            start, end = day_bounds(first, last)

        st.caption(f"{start:%Y-%m-%d} to {end:%Y-%m-%d}")
        st.divider()

        if is_data_loaded():
            st.success("Data loaded")
        else:
            st.warning("No data loaded. Go to the Records tab")

    return SidebarState(
        member_id=member_id,
        period_type=period_type,
        start=start,
        end=end,
    )
