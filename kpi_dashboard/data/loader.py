"""
CSV feed ingestion: fetch published spreadsheet exports and normalise them
into DataFrames of typed scalars.
"""

from __future__ import annotations

import io
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Tuple

import pandas as pd
import requests
import streamlit as st

from kpi_dashboard.config import DEFAULT_CACHE_TTL, FeedSettings, get_float_setting
from kpi_dashboard.errors import ConfigurationError, FetchFailure, ParseFailure

logger = logging.getLogger(__name__)

INVISIBLE_CHARS = re.compile("[\u200B-\u200D\uFEFF]")
CELL_DECORATION = re.compile("[\u200B-\u200D\uFEFF$,]")
NUMERIC_PATTERN = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$")

CACHE_TTL = int(get_float_setting("CACHE_TTL", DEFAULT_CACHE_TTL))


def clean_header(header: Any) -> str:
    return INVISIBLE_CHARS.sub("", str(header)).strip()


def clean_cell(value: Any) -> Any:
    """Strip invisible characters, `$` and thousands commas; blank becomes None.

    Fully numeric strings are converted to int/float so downstream code sees
    the same types a spreadsheet would.
    """
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    if not isinstance(value, str):
        return value
    cleaned = CELL_DECORATION.sub("", value).strip()
    if cleaned == "":
        return None
    if NUMERIC_PATTERN.match(cleaned):
        number = float(cleaned)
        if number.is_integer() and "." not in cleaned and "e" not in cleaned.lower():
            return int(number)
        return number
    return cleaned


def parse_csv(text: str, source: str = "<memory>") -> pd.DataFrame:
    """Parse CSV text into a DataFrame with cleaned headers and cells.

    Raises ParseFailure when the text is not CSV or holds no data rows.
    """
    if not text or not text.strip():
        raise ParseFailure(source, "empty response body")
    try:
        raw = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise ParseFailure(source, str(exc)) from exc

    if raw.empty:
        raise ParseFailure(source, "no data rows")
    raw.columns = [clean_header(col) for col in raw.columns]
    df = raw.apply(lambda col: col.map(clean_cell)).astype(object)
    # Rows that were entirely separators/whitespace
    df = df.dropna(how="all").reset_index(drop=True)
    df = df.where(pd.notna(df), None)
    if df.empty:
        raise ParseFailure(source, "no data rows")
    return df


def fetch_csv_text(url: str, timeout: float) -> str:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchFailure(url, str(exc)) from exc
    if not response.ok:
        raise FetchFailure(url, response.reason or "request failed", status_code=response.status_code)
    response.encoding = response.encoding or "utf-8"
    return response.text


def fetch_csv(url: str, timeout: float) -> pd.DataFrame:
    text = fetch_csv_text(url, timeout)
    df = parse_csv(text, source=url)
    logger.info("Fetched %d rows x %d columns from %s", len(df), len(df.columns), url)
    return df


def fetch_feeds(
    values_url: str,
    metadata_url: Optional[str],
    timeout: float,
) -> Tuple[pd.DataFrame, Optional[pd.DataFrame]]:
    """Fetch the value and metadata feeds concurrently.

    Both fetches must succeed; the first failure propagates and no partial
    result is returned.
    """
    with ThreadPoolExecutor(max_workers=2) as executor:
        values_future = executor.submit(fetch_csv, values_url, timeout)
        metadata_future = executor.submit(fetch_csv, metadata_url, timeout) if metadata_url else None
        values_df = values_future.result()
        metadata_df = metadata_future.result() if metadata_future is not None else None
    return values_df, metadata_df


def load_feeds(settings: FeedSettings) -> Tuple[pd.DataFrame, Optional[pd.DataFrame]]:
    """Wrapper that validates config and calls the cached implementation."""
    if not settings.values_url:
        raise ConfigurationError(
            "VALUES_CSV_URL missing (env, .env or secrets). "
            "Set it to the published CSV export of the KPI value sheet."
        )
    return _load_feeds_impl(settings.values_url, settings.metadata_url, settings.fetch_timeout)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL)
def _load_feeds_impl(
    values_url: str,
    metadata_url: Optional[str],
    timeout: float,
) -> Tuple[pd.DataFrame, Optional[pd.DataFrame]]:
    """Cached by both feed URLs and the timeout."""
    return fetch_feeds(values_url, metadata_url, timeout)


def clear_feed_cache() -> None:
    _load_feeds_impl.clear()  # type: ignore[attr-defined]
