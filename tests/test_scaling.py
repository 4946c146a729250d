import pandas as pd
import pytest

from kpi_dashboard.data.metadata import build_catalog
from kpi_dashboard.data.scaling import (
    ScaleRange,
    compute_scale_range,
    compute_scale_ranges,
    display_value,
    radar_profile,
    scale_value,
)


def test_degenerate_range_scales_to_midpoint():
    rows = pd.DataFrame({"Metric": [5, 5, 5]})
    scale_range = compute_scale_range(rows, "Metric")

    assert scale_range == ScaleRange(5.0, 5.0)
    assert all(scale_value(v, scale_range) == 5 for v in [5, 5, 5])


def test_linear_mapping_onto_one_to_ten():
    scale_range = compute_scale_range(pd.DataFrame({"Metric": [0, 100]}), "Metric")

    assert scale_value(0, scale_range) == pytest.approx(1)
    assert scale_value(100, scale_range) == pytest.approx(10)
    assert scale_value(50, scale_range) == pytest.approx(5.5)


def test_non_numeric_cells_count_as_zero_in_range():
    rows = pd.DataFrame({"Metric": [None, "abc", 40, "$60"]}).astype(object)

    assert compute_scale_range(rows, "Metric") == ScaleRange(0.0, 60.0)


def test_missing_column_and_empty_rows():
    assert compute_scale_range(pd.DataFrame({"Other": [3, 4]}), "Metric") == ScaleRange(0.0, 0.0)
    assert compute_scale_range(pd.DataFrame({"Metric": []}), "Metric") == ScaleRange(0.0, 0.0)


@pytest.mark.parametrize(
    "value, expected",
    [(7, 7.0), ("12.5%", 12.5), ("$1,000", 1000.0), ("-3", -3.0), (None, 0.0), ("abc", 0.0), (float("nan"), 0.0)],
)
def test_display_value(value, expected):
    assert display_value(value) == pytest.approx(expected)


def test_radar_profile_follows_catalog_order(metadata_rows, value_rows):
    catalog = build_catalog(metadata_rows)
    ranges = compute_scale_ranges(value_rows, catalog)

    assert list(ranges) == ["Members", "Revenue", "Completion %", "Growth"]
    profile = radar_profile(value_rows, catalog, "Beta", ranges)

    # Members 0..200, Revenue 0..3000 ("abc" -> 0), Completion 0..0.7, Growth 1.5..3.5
    assert profile == pytest.approx([10.0, 1.0, 10.0, 5.5])


def test_radar_profile_unknown_organization_is_all_zeros(metadata_rows, value_rows):
    catalog = build_catalog(metadata_rows)

    assert radar_profile(value_rows, catalog, "Nobody") == [0.0, 0.0, 0.0, 0.0]


def test_ranges_are_recomputed_for_a_new_organization_set(metadata_rows, value_rows):
    catalog = build_catalog(metadata_rows)
    full = compute_scale_ranges(value_rows, catalog)
    subset = compute_scale_ranges(value_rows.iloc[:2], catalog)

    assert full["Revenue"] == ScaleRange(0.0, 3000.0)
    assert subset["Revenue"] == ScaleRange(0.0, 1000.0)


@pytest.mark.parametrize(
    "value, expected",
    [("45%", 0.45), (" 12.5% ", 0.125), (0.3, 0.3), ("60", 60.0), (None, 0.0)],
)
def test_display_value_reads_percent_signs_as_fractions(value, expected):
    assert display_value(value, percent=True) == pytest.approx(expected)


def test_percent_cells_share_one_scale_with_fractions():
    rows = pd.DataFrame({"Completion": ["45%", 0.9, None]}).astype(object)

    assert compute_scale_range(rows, "Completion", percent=True) == ScaleRange(0.0, 0.9)


def test_radar_profile_matches_names_parsed_as_numbers():
    catalog = build_catalog(pd.DataFrame([{"KVI": "Members", "Unit": "Count"}]))
    rows = pd.DataFrame({"Organization Name": [2024, "B"], "Members": [100, 200]}).astype(object)

    assert radar_profile(rows, catalog, "2024") == pytest.approx([1.0])
