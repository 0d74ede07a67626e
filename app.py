"""Attendance Tracker - Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.logging_setup import configure_logging
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_member_stats,
    tab_comparison,
    tab_records,
)


def main():
    st.set_page_config(
        page_title="Attendance Tracker",
        page_icon="🕒",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "📊 Member Stats",
        "🏆 Comparison",
        "🗂️ Records",
    ])

    with tab1:
        tab_member_stats.render(sidebar_state)
    with tab2:
        tab_comparison.render(sidebar_state)
    with tab3:
        tab_records.render(sidebar_state)


if __name__ == "__main__":
    main()
