from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from kpi_dashboard.config import ORGANIZATION_COLUMN
from kpi_dashboard.data.filters import organization_names
from kpi_dashboard.data.metadata import KpiDescriptor
from kpi_dashboard.data.scaling import column_display_values
from kpi_dashboard.ui.components.charts import bar_chart, render_plotly
from kpi_dashboard.ui.components.kpi import cards_from_catalog, render_kpi_cards
from kpi_dashboard.ui.pages.context import PageContext

CHART_COLUMNS = 2


def _bar_data(df: pd.DataFrame, descriptor: KpiDescriptor) -> pd.DataFrame:
    if ORGANIZATION_COLUMN not in df.columns:
        return pd.DataFrame(columns=["Organization", "Value"])
    return pd.DataFrame(
        {
            "Organization": df[ORGANIZATION_COLUMN].astype(str).str.strip().tolist(),
            "Value": column_display_values(
                df, descriptor.source_column, percent=descriptor.is_percent
            ).tolist(),
        }
    )


def render(df: pd.DataFrame, context: PageContext) -> None:
    state = context.state
    st.subheader("Network KPIs")
    st.caption("Totals across all organizations; percentage KPIs are averaged.")
    render_kpi_cards(cards_from_catalog(state.catalog, state.aggregates), columns=4)

    st.markdown("### KPI by Organization")
    if df.empty:
        st.info("No organizations match the current selection.")
        return

    order: List[str] = organization_names(df)
    kpis = state.catalog.kpis()
    for idx in range(0, len(kpis), CHART_COLUMNS):
        row_kpis = kpis[idx: idx + CHART_COLUMNS]
        cols = st.columns(CHART_COLUMNS)
        for col, descriptor in zip(cols, row_kpis):
            with col:
                fig = bar_chart(
                    _bar_data(df, descriptor),
                    x="Organization",
                    y="Value",
                    title=descriptor.title,
                    unit=descriptor.unit,
                    category_orders=order,
                )
                render_plotly(fig, key=f"bar_{descriptor.name}")
                if descriptor.tooltip:
                    st.caption(descriptor.tooltip)
