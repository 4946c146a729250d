"""
Layout helpers for the Streamlit application (page setup, sidebar selection).
"""

from __future__ import annotations

from typing import List

import streamlit as st

from kpi_dashboard.data.filters import Selection

ORG_SELECT_KEY = "kd_organizations"
RADAR_SELECT_KEY = "kd_radar_organization"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Organization KPI Dashboard",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _clear_organizations() -> None:
    st.session_state[ORG_SELECT_KEY] = []


def sidebar_selection_ui(organizations: List[str]) -> Selection:
    """Render the organization multi-select and return the current Selection.

    Stale names from a previous feed snapshot are dropped from the selection.
    """
    current = [org for org in st.session_state.get(ORG_SELECT_KEY, []) if org in organizations]
    st.session_state[ORG_SELECT_KEY] = current

    with st.sidebar.expander("Organizations", expanded=True):
        selected = st.multiselect(
            "Compare organizations",
            options=organizations,
            key=ORG_SELECT_KEY,
            placeholder="Select organizations to compare...",
            help="Leave empty to show every organization.",
        )
        st.button("Clear all", key="kd_clear_all", on_click=_clear_organizations)

    return Selection(
        organizations=list(selected),
        radar_organization=st.session_state.get(RADAR_SELECT_KEY),
    )


def refresh_button() -> bool:
    return st.sidebar.button("🔄 Refresh Data", key="kd_refresh")
