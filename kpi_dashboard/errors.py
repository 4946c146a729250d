"""
Exceptions raised while loading the dashboard feeds.

Anything raised from here is fatal to dashboard initialisation. Missing
columns and unparseable cells are not errors; they degrade to null/0.
"""

from __future__ import annotations

from typing import Optional


class DashboardDataError(RuntimeError):
    """Base class for failures that prevent the dashboard from being built."""


class ConfigurationError(DashboardDataError):
    pass


class FetchFailure(DashboardDataError):
    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        detail = f"HTTP {status_code}: {message}" if status_code is not None else message
        super().__init__(f"Failed to fetch {url} ({detail})")


class ParseFailure(DashboardDataError):
    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Failed to parse CSV from {source}: {message}")
