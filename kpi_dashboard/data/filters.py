"""
Organization selection state and the filter that applies it to the value feed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from kpi_dashboard.config import ORGANIZATION_COLUMN


@dataclass
class Selection:
    organizations: List[str] = field(default_factory=list)
    radar_organization: Optional[str] = None

    @property
    def is_all(self) -> bool:
        return not self.organizations


def organization_names(rows: pd.DataFrame) -> List[str]:
    """Organization names in feed order, blanks dropped, duplicates kept once."""
    if ORGANIZATION_COLUMN not in rows.columns:
        return []
    names = [str(v).strip() for v in rows[ORGANIZATION_COLUMN] if v is not None and not pd.isna(v)]
    return list(dict.fromkeys(n for n in names if n))


def apply_selection(rows: pd.DataFrame, selection: Selection) -> pd.DataFrame:
    """
    Restrict rows to the selected organizations, preserving feed order.

    An empty selection means every organization.
    """
    if rows.empty or selection.is_all or ORGANIZATION_COLUMN not in rows.columns:
        return rows
    mask = rows[ORGANIZATION_COLUMN].astype(str).str.strip().isin(selection.organizations)
    return rows[mask]


def resolve_radar_organization(selection: Selection, organizations: List[str]) -> Optional[str]:
    """Keep the current radar organization if it still exists, else the first one."""
    if selection.radar_organization in organizations:
        return selection.radar_organization
    return organizations[0] if organizations else None


def serialize_selection(selection: Selection) -> Dict[str, Any]:
    """
    JSON-serialisable view of the selection, stored in session_state and
    used for logging.
    """
    return {
        "organizations": list(selection.organizations),
        "radar_organization": selection.radar_organization,
    }
