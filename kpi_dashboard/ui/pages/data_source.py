from __future__ import annotations

import pandas as pd
import streamlit as st

from kpi_dashboard.state import DashboardState
from kpi_dashboard.ui.components.formatting import format_kpi_value
from kpi_dashboard.ui.components.tables import render_table
from kpi_dashboard.ui.pages.context import PageContext


def _kpi_summary(state: DashboardState) -> pd.DataFrame:
    records = []
    for descriptor in state.catalog.kpis():
        scale = state.scale_ranges.get(descriptor.name)
        records.append(
            {
                "KPI": descriptor.title,
                "Unit": descriptor.unit,
                "Source Column": descriptor.source_column,
                "Aggregate": format_kpi_value(state.aggregates.get(descriptor.name), descriptor.unit),
                "Min": scale.min if scale else None,
                "Max": scale.max if scale else None,
            }
        )
    return pd.DataFrame(records)


def render(df: pd.DataFrame, context: PageContext) -> None:
    state = context.state
    st.subheader("Source Data")

    st.markdown("#### KPI Catalog")
    render_table(_kpi_summary(state), height=260, export_file_name="kpi_catalog.csv")

    st.markdown("#### Organization Values")
    st.caption(f"{len(df):,} of {len(state.rows):,} organizations shown.")
    unit_formats = {d.source_column: d.unit for d in state.catalog.kpis() if d.source_column}
    render_table(df, unit_formats=unit_formats, height=420, export_file_name="kpi_values.csv")
