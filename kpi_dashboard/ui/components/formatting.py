"""
Utility helpers for formatting KPI values for cards and chart axes.

The unit text of a KPI decides its display: "%" means a fraction shown as a
percentage, "time" a multiplier, "representative" a one-decimal number, and
anything else a grouped whole number.
"""

from __future__ import annotations

import math
from typing import Dict, Optional

PLACEHOLDER = "--"


def _is_missing(value: Optional[float]) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True


def format_kpi_value(value: Optional[float], unit: str = "") -> str:
    if _is_missing(value):
        return PLACEHOLDER
    numeric = float(value)  # type: ignore[arg-type]
    unit_lower = (unit or "").lower()
    if "%" in unit_lower:
        return f"{numeric * 100:.2f}%"
    if "time" in unit_lower:
        return f"{numeric:.1f}x"
    if "representative" in unit_lower:
        return f"{numeric:.1f}"
    return f"{numeric:,.0f}"


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_tick_label(value: Optional[float], unit: str = "") -> str:
    """Axis tick text: same "%" and "time" rules as the cards, otherwise the raw number."""
    if _is_missing(value):
        return PLACEHOLDER
    numeric = float(value)  # type: ignore[arg-type]
    unit_lower = (unit or "").lower()
    if "%" in unit_lower:
        return f"{numeric * 100:.2f}%"
    if "time" in unit_lower:
        return f"{numeric:.1f}x"
    return _plain_number(numeric)


def axis_tick_format(unit: str = "") -> Dict[str, str]:
    """Plotly y-axis settings equivalent to format_tick_label."""
    unit_lower = (unit or "").lower()
    if "%" in unit_lower:
        return {"tickformat": ".2%"}
    if "time" in unit_lower:
        return {"tickformat": ".1f", "ticksuffix": "x"}
    return {}


def tooltip_text(unit: str, description: str) -> str:
    return f"Unit: {unit}\n\n{description}" if description else f"Unit: {unit}"
