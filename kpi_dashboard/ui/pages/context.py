from __future__ import annotations

from dataclasses import dataclass

from kpi_dashboard.data.filters import Selection
from kpi_dashboard.state import DashboardState


@dataclass
class PageContext:
    state: DashboardState
    selection: Selection
