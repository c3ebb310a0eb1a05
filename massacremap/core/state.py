"""
Dashboard state: the loaded dataset plus the active governor selection
and search query.

State is immutable. Each transition returns a new DashboardState that
shares the loaded records; nothing is filtered in place.
"""

from dataclasses import dataclass, replace
from functools import cached_property

from massacremap.analysis.filters import filter_by_governor, search
from massacremap.analysis.statistics import IncidentStatistics, compute_statistics
from massacremap.core.config import ALL_GOVERNORS
from massacremap.data.records import IncidentRecord


@dataclass(frozen=True)
class DashboardState:
    records: tuple[IncidentRecord, ...] = ()
    governor: str = ALL_GOVERNORS
    query: str = ""

    @cached_property
    def visible(self) -> tuple[IncidentRecord, ...]:
        """Records passing the governor filter and then the search."""
        return search(filter_by_governor(self.records, self.governor), self.query)

    @cached_property
    def statistics(self) -> IncidentStatistics:
        return compute_statistics(self.visible)


def initial_state(records) -> DashboardState:
    return DashboardState(records=tuple(records))


def select_governor(state: DashboardState, governor: str) -> DashboardState:
    """Switch the governor selection.

    A blank selector (the cleared dropdown or an empty query parameter) is
    read as ALL_GOVERNORS, not as an exact match on an empty governor.
    Call filter_by_governor directly to select records with no governor.
    """
    return replace(state, governor=governor or ALL_GOVERNORS)


def apply_search(state: DashboardState, query: str) -> DashboardState:
    return replace(state, query=query or "")
