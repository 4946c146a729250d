"""
DashboardState: everything derived from one pair of feed snapshots.

A state is built in one go from the fetched rows and replaced wholesale on
refresh; nothing in it is mutated afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from kpi_dashboard.config import FeedSettings
from kpi_dashboard.data.aggregation import aggregate_kpis
from kpi_dashboard.data.filters import organization_names
from kpi_dashboard.data.loader import load_feeds
from kpi_dashboard.data.metadata import KpiCatalog, build_catalog, default_catalog
from kpi_dashboard.data.scaling import ScaleRange, compute_scale_ranges, radar_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardState:
    catalog: KpiCatalog
    rows: pd.DataFrame
    aggregates: Dict[str, float]
    scale_ranges: Dict[str, ScaleRange]
    organizations: List[str]

    def radar_profile(self, organization: str) -> List[float]:
        return radar_profile(self.rows, self.catalog, organization, self.scale_ranges)


def build_dashboard_state(
    values_rows: pd.DataFrame,
    metadata_rows: Optional[pd.DataFrame] = None,
) -> DashboardState:
    """Derive catalog, aggregates and radar scales from freshly fetched rows.

    Without a metadata feed the built-in catalog is used.
    """
    catalog = build_catalog(metadata_rows) if metadata_rows is not None else default_catalog()
    state = DashboardState(
        catalog=catalog,
        rows=values_rows,
        aggregates=aggregate_kpis(values_rows, catalog),
        scale_ranges=compute_scale_ranges(values_rows, catalog),
        organizations=organization_names(values_rows),
    )
    logger.info(
        "Dashboard built: %d KPIs, %d organizations",
        len(catalog.kpis()),
        len(state.organizations),
    )
    return state


def load_dashboard_state(settings: FeedSettings) -> DashboardState:
    """Fetch both feeds and build the state. Any feed failure propagates."""
    values_rows, metadata_rows = load_feeds(settings)
    return build_dashboard_state(values_rows, metadata_rows)
