"""Dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Mapping, Optional

from models.stats import Stats
from components.metrics_cards import format_minutes


def stats_to_df(buckets: Mapping[str, Stats], key_label: str) -> pd.DataFrame:
    """One row per bucket, sorted by key."""
    return pd.DataFrame(
        [
            {
                key_label: key,
                "Total": format_minutes(s.total_time),
                "Average / Day": format_minutes(s.average_time),
                "Days Present": s.days_present,
            }
            for key, s in sorted(buckets.items())
        ],
        columns=[key_label, "Total", "Average / Day", "Days Present"],
    )


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
):
    """Render a non-editable dataframe."""
    if title:
        st.subheader(title)
    if df.empty:
        st.caption("No data for this selection.")
        return
    st.dataframe(df, height=height, use_container_width=True, hide_index=True)


def render_events_table(df: pd.DataFrame):
    """Events table with soft-deleted rows greyed out."""
    def grey_deleted(row):
        style = "color: #999999; text-decoration: line-through" if row.get("Deleted") else ""
        return [style] * len(row)

    if df.empty:
        st.caption("No records.")
        return
    st.dataframe(df.style.apply(grey_deleted, axis=1), use_container_width=True, hide_index=True)
