"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import streamlit as st

from kpi_dashboard.data.aggregation import parse_metric_value
from kpi_dashboard.ui.components.formatting import format_kpi_value


def _format_cell(value: Any, unit: str) -> str:
    parsed = parse_metric_value(value, percent="%" in (unit or ""))
    if parsed is None:
        # Blank stays blank, unparseable text is shown as entered
        return "" if value is None else str(value)
    return format_kpi_value(parsed, unit)


def format_table(df: pd.DataFrame, unit_formats: Optional[Dict[str, str]] = None) -> pd.DataFrame:
    """Copy of df where columns listed in unit_formats use the KPI display rules."""
    formatted_df = df.copy()
    for column, unit in (unit_formats or {}).items():
        if column not in formatted_df.columns:
            continue
        formatted_df[column] = formatted_df[column].map(lambda v, u=unit: _format_cell(v, u)).astype(object)
    return formatted_df


def render_table(
    df: pd.DataFrame,
    unit_formats: Optional[Dict[str, str]] = None,
    height: int = 400,
    show_index: bool = False,
    export_file_name: str = "export.csv",
) -> None:
    """Show a dataframe; the CSV download keeps the unformatted values."""
    if df.empty:
        st.info("No rows to display.")
        return

    st.dataframe(
        format_table(df, unit_formats),
        use_container_width=True,
        height=height,
        hide_index=not show_index,
    )

    csv_bytes = df.to_csv(index=show_index).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
        key=f"download_{export_file_name}",
    )
