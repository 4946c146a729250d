"""
KPI catalog construction from the metadata feed.

The catalog is the single source of truth for which KPIs exist, how they are
labelled and the order every surface (cards, tooltips, bar charts, radar
axes) enumerates them in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional

import pandas as pd

from kpi_dashboard.config import (
    METADATA_INFO_COLUMN,
    METADATA_NAME_COLUMN,
    METADATA_UNIT_COLUMN,
    RADAR_KEY,
    RADAR_TITLE,
    RADAR_UNIT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KpiDescriptor:
    name: str
    title: str
    unit: str = ""
    tooltip: str = ""
    source_column: Optional[str] = None

    @property
    def is_radar(self) -> bool:
        return self.source_column is None

    @property
    def is_percent(self) -> bool:
        return "%" in self.unit


class KpiCatalog(Mapping[str, KpiDescriptor]):
    """Ordered, read-only mapping of KPI name to descriptor."""

    def __init__(self, descriptors: List[KpiDescriptor]) -> None:
        self._entries: Dict[str, KpiDescriptor] = {d.name: d for d in descriptors}

    def __getitem__(self, name: str) -> KpiDescriptor:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KpiCatalog):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"KpiCatalog({list(self._entries)!r})"

    def kpis(self) -> List[KpiDescriptor]:
        """Every real KPI in display order; the radar pseudo-entry is excluded."""
        return [d for d in self._entries.values() if not d.is_radar]

    @property
    def radar(self) -> Optional[KpiDescriptor]:
        return next((d for d in self._entries.values() if d.is_radar), None)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).strip()


def radar_descriptor(kpi_count: int) -> KpiDescriptor:
    return KpiDescriptor(
        name=RADAR_KEY,
        title=RADAR_TITLE,
        unit=RADAR_UNIT,
        tooltip=(
            f"This radar chart visualizes the organization's performance across all {kpi_count} KPIs, "
            "scaled from 1 (lowest) to 10 (highest) relative to all other member organizations."
        ),
        source_column=None,
    )


def build_catalog(metadata_rows: pd.DataFrame) -> KpiCatalog:
    """Turn metadata feed rows into a KpiCatalog.

    Rows with a blank KPI name are skipped; the first occurrence of a name
    wins. The radar entry is always appended last.
    """
    descriptors: List[KpiDescriptor] = []
    seen = set()
    if METADATA_NAME_COLUMN not in metadata_rows.columns:
        logger.warning(
            "Metadata feed has no %r column; catalog will only hold the radar entry",
            METADATA_NAME_COLUMN,
        )
        return KpiCatalog([radar_descriptor(0)])

    for idx, row in enumerate(metadata_rows.to_dict("records")):
        name = _text(row.get(METADATA_NAME_COLUMN))
        if not name:
            logger.info("Skipping metadata row %d: blank %s", idx, METADATA_NAME_COLUMN)
            continue
        if name in seen or name == RADAR_KEY:
            logger.warning("Skipping metadata row %d: duplicate KPI %r", idx, name)
            continue
        seen.add(name)
        descriptors.append(
            KpiDescriptor(
                name=name,
                title=name,
                unit=_text(row.get(METADATA_UNIT_COLUMN)),
                tooltip=_text(row.get(METADATA_INFO_COLUMN)),
                source_column=name,
            )
        )

    descriptors.append(radar_descriptor(len(descriptors)))
    return KpiCatalog(descriptors)


DEFAULT_KPIS: List[KpiDescriptor] = [
    KpiDescriptor(
        name="Total Members",
        title="Total Members",
        unit="Members",
        tooltip="Total active members across all member societies.",
        source_column="Total Members",
    ),
    KpiDescriptor(
        name="Financial Health",
        title="Financial Health (USD per Member)",
        unit="USD per Member",
        tooltip="Average financial health per member. Derived from annualized revenue divided by total members.",
        source_column="Financial Health",
    ),
    KpiDescriptor(
        name="Active Projects (IN/IO)",
        title="Active Projects (IN/IO)",
        unit="Number of Projects",
        tooltip="Count of active international and inter-organizational projects.",
        source_column="Active Projects",
    ),
    KpiDescriptor(
        name="Collaboration Agreements",
        title="Collaboration Agreements",
        unit="Number of Agreements",
        tooltip="Total collaboration agreements between member societies within the network.",
        source_column="Collaboration Agreements",
    ),
    KpiDescriptor(
        name="Calendar Events",
        title="Calendar Events",
        unit="Number of Events",
        tooltip="Count of network-branded events on the official calendar per year.",
        source_column="Calendar Events",
    ),
    KpiDescriptor(
        name="Face-to-Face Meeting Hosting",
        title="Face-to-Face Meeting Hosting",
        unit="Hosted F2F Meetings",
        tooltip="Number of face-to-face meetings hosted by each society.",
        source_column="Member Meeting Hosting",
    ),
    KpiDescriptor(
        name="Triplet (3-Year Rolling)",
        title="Triplet (3-Year Rolling)",
        unit="Rolling 3-Year Value",
        tooltip="3-year rolling KPI (current-year value multiplied by 3 or pre-calculated in the sheet).",
        source_column="Triplet",
    ),
]


def default_catalog() -> KpiCatalog:
    """Built-in catalog used when no metadata feed is configured."""
    return KpiCatalog(DEFAULT_KPIS + [radar_descriptor(len(DEFAULT_KPIS))])
