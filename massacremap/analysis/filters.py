"""
Filter and search over record collections.

All functions take a collection and return a new tuple; the input is
never modified and source order is preserved.
"""

from typing import Iterable

from massacremap.core.config import ALL_GOVERNORS
from massacremap.data.records import IncidentRecord


def filter_by_governor(records: Iterable[IncidentRecord],
                       selector: str) -> tuple[IncidentRecord, ...]:
    """Records whose governor equals `selector` exactly.

    ALL_GOVERNORS returns the whole collection.
    """
    records = tuple(records)
    if selector == ALL_GOVERNORS:
        return records
    return tuple(r for r in records if r.governor == selector)


def search(records: Iterable[IncidentRecord], query: str) -> tuple[IncidentRecord, ...]:
    """Case-insensitive substring match on name, governor and location."""
    records = tuple(records)
    if not query:
        return records
    needle = query.lower()
    return tuple(
        r for r in records
        if needle in r.name.lower()
        or needle in r.governor.lower()
        or needle in r.location.lower()
    )


def list_governors(records: Iterable[IncidentRecord]) -> list[str]:
    """Distinct non-empty governors, sorted, for the selector options."""
    return sorted({r.governor for r in records if r.governor})


def with_coordinates(records: Iterable[IncidentRecord]) -> tuple[IncidentRecord, ...]:
    """Records that can be placed on the map."""
    return tuple(r for r in records if r.has_coordinates)
