"""
Application-wide configuration constants and helper utilities.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "KPI Overview"),
    TabConfig("radar", "Organization Radar"),
    TabConfig("data_source", "Source Data"),
]

# Metadata feed schema
METADATA_NAME_COLUMN = "KVI"
METADATA_INFO_COLUMN = "Info"
METADATA_UNIT_COLUMN = "Unit"

# Value feed schema
ORGANIZATION_COLUMN = "Organization Name"

RADAR_KEY = "Spider Chart"
RADAR_TITLE = "Organization Radar"
RADAR_UNIT = "1-10 Scale"

DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_CACHE_TTL = 600
DEFAULT_LOG_LEVEL = "INFO"


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val.strip()
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v).strip() if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        pass
    return default


def get_float_setting(name: str, default: float) -> float:
    raw = get_setting(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class FeedSettings:
    values_url: Optional[str]
    metadata_url: Optional[str]
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT


def load_feed_settings() -> FeedSettings:
    return FeedSettings(
        values_url=get_setting("VALUES_CSV_URL"),
        metadata_url=get_setting("METADATA_CSV_URL"),
        fetch_timeout=get_float_setting("FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
    )
