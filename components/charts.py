"""Plotly chart builders for the Attendance Tracker."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List, Dict, Mapping

from models.stats import Stats


def daily_minutes_bar(
    daily: Mapping[str, Stats],
    title: str = "Time Present by Day",
) -> go.Figure:
    """Bar chart of hours present per day."""
    df = pd.DataFrame(
        [{"day": day, "hours": s.total_time / 60} for day, s in sorted(daily.items())],
        columns=["day", "hours"],
    )
    fig = px.bar(
        df, x="day", y="hours",
        labels={"day": "Day", "hours": "Hours"},
        title=title,
        color_discrete_sequence=["#4A90D9"],
    )
    fig.update_layout(height=380, xaxis_type="category")
    return fig


def weekday_weekend_donut(weekday: Stats, weekend: Stats, title: str = "Weekday vs Weekend") -> go.Figure:
    """Donut chart splitting total time between weekdays and weekends."""
    total = weekday.total_time + weekend.total_time
    fig = go.Figure(data=[go.Pie(
        labels=["Weekday", "Weekend"],
        values=[weekday.total_time, weekend.total_time],
        hole=0.6,
        marker_colors=["#4A90D9", "#E8734A"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{total / 60:.1f} h", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def bucket_trend_line(
    buckets: Mapping[str, Stats],
    title: str,
    x_label: str,
) -> go.Figure:
    """Total and average hours per week or month."""
    df = pd.DataFrame(
        [
            {"bucket": key, "Total hours": s.total_time / 60, "Average hours/day": s.average_time / 60}
            for key, s in sorted(buckets.items())
        ],
        columns=["bucket", "Total hours", "Average hours/day"],
    )
    fig = px.line(
        df, x="bucket", y=["Total hours", "Average hours/day"],
        markers=True,
        labels={"bucket": x_label, "value": "Hours", "variable": ""},
        title=title,
    )
    fig.update_layout(legend_title_text="", height=380, xaxis_type="category")
    return fig


def member_comparison_bar(ranking: List[Dict], title: str = "Members by Total Time") -> go.Figure:
    """Horizontal bar chart of the comparator output, longest on top."""
    df = pd.DataFrame(ranking, columns=["name", "total_time"])
    df["hours"] = df["total_time"] / 60
    fig = go.Figure(data=go.Bar(
        x=df["hours"][::-1],
        y=df["name"][::-1],
        orientation="h",
        marker_color="#4A90D9",
        hovertemplate="%{y}: %{x:.1f} h<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Hours",
        yaxis_title="Member",
        height=max(300, len(df) * 40),
    )
    return fig
