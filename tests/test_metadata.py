import pandas as pd

from kpi_dashboard.config import RADAR_KEY
from kpi_dashboard.data.metadata import KpiCatalog, build_catalog, default_catalog


def test_catalog_preserves_feed_order_and_appends_radar(metadata_rows):
    catalog = build_catalog(metadata_rows)

    assert list(catalog) == ["Members", "Revenue", "Completion %", "Growth", RADAR_KEY]
    assert [d.name for d in catalog.kpis()] == ["Members", "Revenue", "Completion %", "Growth"]
    radar = catalog[RADAR_KEY]
    assert radar.source_column is None
    assert radar.title == "Organization Radar"
    assert catalog.radar == radar
    assert "4 KPIs" in radar.tooltip


def test_descriptor_fields_come_from_metadata_columns(metadata_rows):
    catalog = build_catalog(metadata_rows)

    members = catalog["Members"]
    assert members.title == "Members"
    assert members.unit == "Count"
    assert members.tooltip == "Active members."
    assert members.source_column == "Members"
    assert catalog["Growth"].tooltip == ""
    assert catalog["Completion %"].is_percent
    assert not members.is_percent


def test_blank_names_are_skipped_and_duplicates_keep_first(caplog):
    rows = pd.DataFrame(
        {
            "KVI": ["Members", "  ", None, "Events", "Members"],
            "Info": ["first", "x", "y", "events", "second"],
            "Unit": ["Count", "", "", "Number of Events", "Other"],
        }
    )

    with caplog.at_level("INFO"):
        catalog = build_catalog(rows)

    assert [d.name for d in catalog.kpis()] == ["Members", "Events"]
    assert catalog["Members"].tooltip == "first"
    assert catalog["Members"].unit == "Count"
    assert "duplicate KPI 'Members'" in caplog.text
    assert "blank KVI" in caplog.text


def test_missing_unit_and_info_columns_default_to_empty():
    catalog = build_catalog(pd.DataFrame({"KVI": ["Members"]}))

    assert catalog["Members"].unit == ""
    assert catalog["Members"].tooltip == ""


def test_missing_name_column_yields_radar_only():
    catalog = build_catalog(pd.DataFrame({"Name": ["Members"], "Unit": ["Count"]}))

    assert catalog.kpis() == []
    assert list(catalog) == [RADAR_KEY]


def test_rebuilding_catalog_is_idempotent(metadata_rows):
    first = build_catalog(metadata_rows)
    second = build_catalog(metadata_rows.copy())

    assert first == second
    assert list(first.items()) == list(second.items())


def test_catalog_equality_is_order_sensitive(metadata_rows):
    forward = build_catalog(metadata_rows)
    backward = build_catalog(metadata_rows.iloc[::-1].reset_index(drop=True))

    assert set(forward) == set(backward)
    assert forward != backward


def test_default_catalog_matches_fixed_dashboard():
    catalog = default_catalog()

    assert isinstance(catalog, KpiCatalog)
    assert len(catalog.kpis()) == 7
    assert list(catalog)[-1] == RADAR_KEY
    assert catalog["Financial Health"].unit == "USD per Member"
    assert catalog["Face-to-Face Meeting Hosting"].source_column == "Member Meeting Hosting"
