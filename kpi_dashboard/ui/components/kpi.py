from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import streamlit as st

from kpi_dashboard.data.metadata import KpiCatalog
from kpi_dashboard.ui.components.formatting import format_kpi_value, tooltip_text


@dataclass
class KpiCard:
    key: str
    label: str
    value: Optional[float] = None
    unit: str = ""
    help_text: Optional[str] = None

    @property
    def value_display(self) -> str:
        return format_kpi_value(self.value, self.unit)


def cards_from_catalog(catalog: KpiCatalog, aggregates: Dict[str, float]) -> List[KpiCard]:
    """One card per catalog KPI, in catalog order."""
    return [
        KpiCard(
            key=d.name,
            label=d.title,
            value=aggregates.get(d.name),
            unit=d.unit,
            help_text=tooltip_text(d.unit, d.tooltip),
        )
        for d in catalog.kpis()
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No KPIs defined in the metadata feed.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=card.value_display, help=card.help_text)
                if card.unit:
                    st.caption(card.unit)
