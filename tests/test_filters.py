import pandas as pd

from kpi_dashboard.data.filters import (
    Selection,
    apply_selection,
    organization_names,
    resolve_radar_organization,
    serialize_selection,
)


def test_empty_selection_means_all(value_rows):
    filtered = apply_selection(value_rows, Selection())

    assert filtered["Organization Name"].tolist() == ["Alpha", "Beta", "Gamma"]


def test_selection_keeps_feed_order(value_rows):
    filtered = apply_selection(value_rows, Selection(organizations=["Gamma", "Alpha"]))

    assert filtered["Organization Name"].tolist() == ["Alpha", "Gamma"]


def test_organization_names_drop_blanks_and_duplicates():
    rows = pd.DataFrame({"Organization Name": ["Alpha", None, "Beta", "Alpha", " "]}).astype(object)

    assert organization_names(rows) == ["Alpha", "Beta"]
    assert organization_names(pd.DataFrame({"Other": [1]})) == []


def test_radar_organization_falls_back_to_first():
    organizations = ["Alpha", "Beta"]

    assert resolve_radar_organization(Selection(radar_organization="Beta"), organizations) == "Beta"
    assert resolve_radar_organization(Selection(radar_organization="Gone"), organizations) == "Alpha"
    assert resolve_radar_organization(Selection(), []) is None


def test_serialize_selection():
    selection = Selection(organizations=["Alpha"], radar_organization="Beta")

    assert serialize_selection(selection) == {"organizations": ["Alpha"], "radar_organization": "Beta"}
