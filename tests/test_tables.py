import pandas as pd

from kpi_dashboard.ui.components.tables import format_table


def test_kpi_columns_use_card_formatting(value_rows):
    units = {"Members": "Count", "Revenue": "USD", "Completion %": "Completion %", "Growth": "times"}

    table = format_table(value_rows, units)

    assert table["Members"].tolist() == ["100", "200", ""]
    assert table["Revenue"].tolist() == ["1,000", "abc", "3,000"]
    assert table["Completion %"].tolist() == ["50.00%", "70.00%", ""]
    assert table["Growth"].tolist() == ["1.5x", "2.5x", "3.5x"]
    assert table["Organization Name"].tolist() == ["Alpha", "Beta", "Gamma"]


def test_source_frame_is_left_unformatted(value_rows):
    format_table(value_rows, {"Members": "Count", "Unknown Column": "USD"})

    assert value_rows["Members"].tolist()[:2] == [100, 200]


def test_percent_cells_written_with_a_sign():
    rows = pd.DataFrame({"Completion": ["45%", 0.5]}).astype(object)

    assert format_table(rows, {"Completion": "Completion %"})["Completion"].tolist() == ["45.00%", "50.00%"]
