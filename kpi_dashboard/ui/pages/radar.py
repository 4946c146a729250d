from __future__ import annotations

import pandas as pd
import streamlit as st

from kpi_dashboard.data.filters import resolve_radar_organization
from kpi_dashboard.ui.components.charts import radar_chart, render_plotly
from kpi_dashboard.ui.components.formatting import tooltip_text
from kpi_dashboard.ui.layout import RADAR_SELECT_KEY
from kpi_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    state = context.state
    radar = state.catalog.radar
    st.subheader(radar.title if radar else "Organization Radar")
    if radar:
        st.caption(tooltip_text(radar.unit, radar.tooltip))

    organizations = state.organizations
    if not organizations:
        st.info("The value feed lists no organizations.")
        return

    # Radar compares against every organization, independent of the bar chart filter
    if st.session_state.get(RADAR_SELECT_KEY) not in organizations:
        st.session_state.pop(RADAR_SELECT_KEY, None)
    default_org = resolve_radar_organization(context.selection, organizations)
    organization = st.selectbox(
        "Organization",
        options=organizations,
        index=organizations.index(default_org) if default_org in organizations else 0,
        key=RADAR_SELECT_KEY,
    )
    context.selection.radar_organization = organization

    kpis = state.catalog.kpis()
    fig = radar_chart(
        axis_labels=[d.title for d in kpis],
        values=state.radar_profile(organization),
        name=organization,
    )
    render_plotly(fig, key="radar_chart")
