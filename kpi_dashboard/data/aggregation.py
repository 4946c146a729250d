"""
Per-KPI aggregates over all organizations.

Percent KPIs are averaged, everything else is summed. Cells that do not parse
as numbers are left out of both the total and the count.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any, Dict, Optional

import pandas as pd

from kpi_dashboard.data.metadata import KpiCatalog, KpiDescriptor

logger = logging.getLogger(__name__)

CURRENCY_DECORATION = re.compile("[\\s\u200B-\u200D\uFEFF$\u20AC\u00A3\u00A5,]")
STRICT_NUMBER = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")


def parse_metric_value(value: Any, percent: bool = False) -> Optional[float]:
    """Parse one cell for aggregation, returning None when it is not a number.

    Currency symbols and thousands separators are stripped. A trailing `%` is
    only accepted for percent KPIs, where "45%" means the fraction 0.45.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        number = float(value)
        return None if math.isnan(number) else number
    text = CURRENCY_DECORATION.sub("", str(value))
    scale = 1.0
    if percent and text.endswith("%"):
        text = text[:-1]
        scale = 0.01
    if not STRICT_NUMBER.match(text):
        return None
    return float(text) * scale


def aggregate_kpi(rows: pd.DataFrame, descriptor: KpiDescriptor) -> float:
    column = descriptor.source_column
    if column is None:
        raise ValueError(f"{descriptor.name!r} has no source column to aggregate")
    if column not in rows.columns:
        logger.warning("Value feed has no column %r for KPI %r; aggregate is 0", column, descriptor.name)
        return 0.0

    parsed = rows[column].map(lambda v: parse_metric_value(v, percent=descriptor.is_percent))
    valid = pd.to_numeric(parsed, errors="coerce").dropna()
    if valid.empty:
        return 0.0
    if descriptor.is_percent:
        return float(valid.mean())
    return float(valid.sum())


def aggregate_kpis(rows: pd.DataFrame, catalog: KpiCatalog) -> Dict[str, float]:
    """Aggregate every catalog KPI, keyed by KPI name in catalog order."""
    return {descriptor.name: aggregate_kpi(rows, descriptor) for descriptor in catalog.kpis()}
