"""Reusable KPI metric card widgets."""

import streamlit as st

from models.stats import Stats


def format_minutes(minutes: float) -> str:
    """'3h 05m' style label for a minute count."""
    total = int(round(minutes))
    return f"{total // 60}h {total % 60:02d}m"


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_stats_row(stats: Stats, prefix: str = ""):
    """Total / average / days present for one Stats record."""
    render_metric_row([
        {"label": f"{prefix}Total Time", "value": format_minutes(stats.total_time)},
        {"label": f"{prefix}Average per Day", "value": format_minutes(stats.average_time)},
        {"label": f"{prefix}Days Present", "value": str(stats.days_present)},
    ])
