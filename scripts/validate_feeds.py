"""Quick validation script for the configured CSV feeds.

Run with `python scripts/validate_feeds.py` to fetch both feeds, build the
dashboard state and check that every catalog KPI has a matching column in
the value feed.
"""

from __future__ import annotations

import kpi_dashboard.bootstrap_env  # noqa: F401  loads .env and logging

from kpi_dashboard.config import ORGANIZATION_COLUMN, load_feed_settings
from kpi_dashboard.data.loader import fetch_feeds
from kpi_dashboard.errors import ConfigurationError
from kpi_dashboard.state import build_dashboard_state
from kpi_dashboard.ui.components.formatting import format_kpi_value


def main() -> None:
    settings = load_feed_settings()
    if not settings.values_url:
        raise ConfigurationError("VALUES_CSV_URL is not set")

    values_df, metadata_df = fetch_feeds(settings.values_url, settings.metadata_url, settings.fetch_timeout)
    state = build_dashboard_state(values_df, metadata_df)

    if ORGANIZATION_COLUMN not in values_df.columns:
        raise SystemExit(f"Value feed has no {ORGANIZATION_COLUMN!r} column")

    missing = [
        d.source_column for d in state.catalog.kpis() if d.source_column not in values_df.columns
    ]
    if missing:
        raise SystemExit(f"Value feed is missing KPI columns: {missing}")

    for descriptor in state.catalog.kpis():
        scale = state.scale_ranges[descriptor.name]
        aggregate = format_kpi_value(state.aggregates[descriptor.name], descriptor.unit)
        print(f"{descriptor.title}: {aggregate} (range {scale.min:g}..{scale.max:g})")

    print("Feed validation passed. Organizations:", len(state.organizations))


if __name__ == "__main__":
    main()
