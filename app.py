import kpi_dashboard.bootstrap_env  # must be first to set env/secrets/logging
import logging

import streamlit as st

from kpi_dashboard.config import TABS, load_feed_settings
from kpi_dashboard.data.filters import apply_selection, serialize_selection
from kpi_dashboard.data.loader import clear_feed_cache
from kpi_dashboard.errors import DashboardDataError
from kpi_dashboard.state import load_dashboard_state
from kpi_dashboard.ui.layout import refresh_button, setup_page, sidebar_selection_ui
from kpi_dashboard.ui.pages import data_source, overview, radar
from kpi_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)


PAGE_RENDERERS = {
    "overview": overview.render,
    "radar": radar.render,
    "data_source": data_source.render,
}


def _active_selection_summary(selection, shown: int, total: int) -> None:
    if selection.is_all:
        summary_text = "Showing: All organizations"
    else:
        names = selection.organizations
        summary_text = "Showing: " + ", ".join(names[:5]) + ("…" if len(names) > 5 else "")
    st.markdown(f"**{summary_text}**")
    st.caption(f"{shown:,} of {total:,} organizations in the bar charts.")


def main() -> None:
    setup_page()
    st.title("Organization KPI Dashboard")

    if refresh_button():
        clear_feed_cache()

    try:
        state = load_dashboard_state(load_feed_settings())
    except DashboardDataError as exc:
        logger.exception("Dashboard initialisation failed")
        st.error(f"The dashboard could not be loaded. {exc}")
        return

    selection = sidebar_selection_ui(state.organizations)
    filtered_df = apply_selection(state.rows, selection)
    st.session_state["kd_active_selection"] = serialize_selection(selection)
    logger.debug("Selection changed: %s", st.session_state["kd_active_selection"])

    _active_selection_summary(selection, len(filtered_df), len(state.rows))

    context = PageContext(state=state, selection=selection)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()
