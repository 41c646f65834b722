"""
Frame building for the live AQI chart.

Plotly figure for the Streamlit dashboard, one-line text frame for the
terminal loop. No state lives here; everything is read off a WindowedSeries.
"""

from __future__ import annotations

from typing import List

import numpy as np
import plotly.graph_objects as go

from air_quality_live.aqi import PM25_BREAKPOINTS
from air_quality_live.series import WindowBounds, WindowedSeries


# Band colours per breakpoint row, good -> hazardous
_BAND_COLORS = (
    "#2ecc71",
    "#f1c40f",
    "#e67e22",
    "#e74c3c",
    "#8e44ad",
    "#7b241c",
    "#7b241c",
)


def x_labels(bounds: WindowBounds) -> List[str]:
    """Lower, midpoint and upper x-axis labels."""
    return [f"{v:g}" for v in np.linspace(bounds.lower, bounds.upper, 3)]


def category_for_aqi(aqi: float) -> str:
    for row in PM25_BREAKPOINTS:
        if aqi <= row.index_high:
            return row.category_label
    return PM25_BREAKPOINTS[-1].category_label


def build_figure(series: WindowedSeries, title: str = "Air Quality Index (PM 2.5)") -> go.Figure:
    bounds = series.bounds
    y_lo, y_hi = series.y_domain

    fig = go.Figure()
    for row, color in zip(PM25_BREAKPOINTS, _BAND_COLORS):
        fig.add_hrect(
            y0=row.index_low,
            y1=row.index_high,
            fillcolor=color,
            opacity=0.12,
            line_width=0,
        )
    fig.add_trace(
        go.Scatter(
            x=series.xs(),
            y=series.ys(),
            name="AQI",
            mode="lines+markers",
            line=dict(color="#f1c40f", width=2),
        )
    )

    tickvals = np.linspace(bounds.lower, bounds.upper, 3).tolist()
    fig.update_layout(
        title=title,
        height=360,
        margin=dict(l=10, r=10, t=40, b=10),
        showlegend=False,
        xaxis=dict(range=bounds.as_list(), tickvals=tickvals, ticktext=x_labels(bounds)),
        yaxis=dict(range=[y_lo, y_hi], title="AQI"),
    )
    return fig


def format_frame(series: WindowedSeries) -> str:
    bounds = series.bounds
    lo, mid, hi = x_labels(bounds)
    if len(series) == 0:
        return f"window=[{lo} .. {mid} .. {hi}] | no samples yet"
    latest = series.points[-1]
    return (
        f"window=[{lo} .. {mid} .. {hi}] | points={len(series)}/{series.capacity} "
        f"| latest AQI={latest.y:.0f} ({category_for_aqi(latest.y)})"
    )
