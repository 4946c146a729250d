"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from kpi_dashboard.data.scaling import SCALE_MAX
from kpi_dashboard.ui.components.formatting import axis_tick_format, format_tick_label


DEFAULT_TEMPLATE = "plotly_white"
BAR_COLOR = "#84bd00"
RADAR_LINE_COLOR = "#00a3e0"
RADAR_FILL_COLOR = "rgba(0, 163, 224, 0.2)"
TITLE_COLOR = "#002b5c"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    unit: str = "",
) -> go.Figure:
    if title and subtitle:
        title_text = f"{title}<br><sup><i>{subtitle}</i></sup>"
    else:
        title_text = title
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=dict(text=title_text, font=dict(color=TITLE_COLOR)) if title_text else None,
        margin=dict(l=40, r=20, t=70, b=40),
        showlegend=False,
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    tick_settings = axis_tick_format(unit)
    if tick_settings:
        fig.update_yaxes(**tick_settings)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True, rangemode="tozero")
    return fig


def render_plotly(fig: go.Figure, key: Optional[str] = None) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False}, key=key)


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    unit: str = "",
    category_orders: Optional[List[str]] = None,
) -> go.Figure:
    working = df.assign(_label=[format_tick_label(v, unit) for v in df[y]])
    fig = px.bar(
        working,
        x=x,
        y=y,
        category_orders={x: category_orders} if category_orders else None,
        color_discrete_sequence=[BAR_COLOR],
        custom_data=["_label"],
    )
    fig = _configure_layout(fig, title=title, subtitle=unit or None, yaxis_title=unit or None, unit=unit)
    fig.update_xaxes(title=None)
    fig.update_traces(hovertemplate="<b>%{x}</b><br>%{customdata[0]}<extra></extra>")
    return fig


def radar_chart(
    axis_labels: Sequence[str],
    values: Sequence[float],
    name: str,
) -> go.Figure:
    """Closed polygon of 1-10 scaled values, one axis per KPI."""
    labels = list(axis_labels)
    r = list(values)
    fig = go.Figure()
    if labels:
        fig.add_trace(
            go.Scatterpolar(
                r=r + r[:1],
                theta=labels + labels[:1],
                name=name,
                mode="lines+markers",
                fill="toself",
                fillcolor=RADAR_FILL_COLOR,
                line=dict(color=RADAR_LINE_COLOR, width=2),
                marker=dict(color=BAR_COLOR, size=7),
                hovertemplate="<b>%{theta}</b><br>%{r:.1f} / 10<extra>%{fullData.name}</extra>",
            )
        )
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        showlegend=False,
        margin=dict(l=60, r=60, t=40, b=40),
        polar=dict(
            radialaxis=dict(range=[0, SCALE_MAX], dtick=1, gridcolor="#ccc"),
            angularaxis=dict(gridcolor="#ddd", tickfont=dict(color=TITLE_COLOR, size=12)),
        ),
    )
    return fig
