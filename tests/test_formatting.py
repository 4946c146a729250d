import pytest

from kpi_dashboard.ui.components.formatting import (
    axis_tick_format,
    format_kpi_value,
    format_tick_label,
    tooltip_text,
)


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (1234567, "Members", "1,234,567"),
        (0.4567, "Completion %", "45.67%"),
        (None, "Members", "--"),
        (float("nan"), "Members", "--"),
        (2.345, "Times Oversubscribed", "2.3x"),
        (3.25, "Number of Representatives", "3.2"),
        (1234.6, "USD per Member", "1,235"),
        (0, "Members", "0"),
    ],
)
def test_format_kpi_value(value, unit, expected):
    assert format_kpi_value(value, unit) == expected


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (0.25, "Rate %", "25.00%"),
        (3, "times", "3.0x"),
        (1500, "Members", "1500"),
        (2.5, "Number of Representatives", "2.5"),
        (None, "Members", "--"),
    ],
)
def test_format_tick_label_uses_reduced_rules(value, unit, expected):
    assert format_tick_label(value, unit) == expected


def test_axis_tick_format():
    assert axis_tick_format("Completion %") == {"tickformat": ".2%"}
    assert axis_tick_format("Times") == {"tickformat": ".1f", "ticksuffix": "x"}
    assert axis_tick_format("Members") == {}


def test_tooltip_text():
    assert tooltip_text("Count", "Active members.") == "Unit: Count\n\nActive members."
    assert tooltip_text("Count", "") == "Unit: Count"
