"""
Min/max normalisation of KPI values onto the 1-10 radar scale.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

from kpi_dashboard.config import ORGANIZATION_COLUMN
from kpi_dashboard.data.metadata import KpiCatalog

NON_NUMERIC = re.compile(r"[^\d.\-]")

SCALE_MIN = 1.0
SCALE_MAX = 10.0
SCALE_MIDPOINT = 5.0


@dataclass(frozen=True)
class ScaleRange:
    min: float
    max: float

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min


def display_value(value: Any, percent: bool = False) -> float:
    """Lenient coercion used for charts: keep digits, '.' and '-'; otherwise 0.

    Missing and unparseable cells are indistinguishable from a real zero here.
    With ``percent`` set, a `%`-suffixed cell is read as a fraction ("45%" -> 0.45),
    the same reading the aggregation applies.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return 0.0 if pd.isna(value) else float(value)
    text = str(value).strip()
    scale = 0.01 if percent and text.endswith("%") else 1.0
    try:
        return float(NON_NUMERIC.sub("", text)) * scale
    except ValueError:
        return 0.0


def column_display_values(
    rows: pd.DataFrame, column: Optional[str], percent: bool = False
) -> pd.Series:
    if column is None or column not in rows.columns:
        return pd.Series([0.0] * len(rows), index=rows.index, dtype=float)
    return rows[column].map(lambda v: display_value(v, percent=percent)).astype(float)


def compute_scale_range(
    rows: pd.DataFrame, column: Optional[str], percent: bool = False
) -> ScaleRange:
    values = column_display_values(rows, column, percent=percent)
    if values.empty:
        return ScaleRange(0.0, 0.0)
    return ScaleRange(float(values.min()), float(values.max()))


def compute_scale_ranges(rows: pd.DataFrame, catalog: KpiCatalog) -> Dict[str, ScaleRange]:
    return {
        d.name: compute_scale_range(rows, d.source_column, percent=d.is_percent)
        for d in catalog.kpis()
    }


def scale_value(raw: float, scale_range: ScaleRange) -> float:
    if scale_range.is_degenerate:
        return SCALE_MIDPOINT
    span = scale_range.max - scale_range.min
    return ((raw - scale_range.min) * (SCALE_MAX - SCALE_MIN)) / span + SCALE_MIN


def radar_profile(
    rows: pd.DataFrame,
    catalog: KpiCatalog,
    organization: str,
    scale_ranges: Optional[Dict[str, ScaleRange]] = None,
) -> List[float]:
    """Scaled value of every catalog KPI for one organization, in catalog order.

    An organization missing from the rows yields all zeros.
    """
    kpis = catalog.kpis()
    if ORGANIZATION_COLUMN not in rows.columns:
        return [0.0] * len(kpis)
    # Names may have been parsed as numbers ("2024")
    names = rows[ORGANIZATION_COLUMN].astype(str).str.strip()
    matches = rows[names == str(organization).strip()]
    if matches.empty:
        return [0.0] * len(kpis)
    if scale_ranges is None:
        scale_ranges = compute_scale_ranges(rows, catalog)

    org_row = matches.iloc[0]
    profile: List[float] = []
    for descriptor in kpis:
        column = descriptor.source_column
        raw = (
            display_value(org_row[column], percent=descriptor.is_percent)
            if column in rows.columns
            else 0.0
        )
        profile.append(scale_value(raw, scale_ranges[descriptor.name]))
    return profile
