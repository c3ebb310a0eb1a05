"""
Summary statistics over a record collection.

Statistics are recomputed from whatever collection is currently visible
and are never stored.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Iterable

from massacremap.data.records import IncidentRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncidentStatistics:
    total_massacres: int = 0
    total_victims: int = 0
    minor_victims: int = 0
    avg_victims_per_incident: int = 0
    years_covered: int = 0
    governors_involved: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, 3.5 -> 4)."""
    return int(math.floor(value + 0.5))


def compute_statistics(records: Iterable[IncidentRecord]) -> IncidentStatistics:
    """
    Aggregate a collection into IncidentStatistics.

    An empty collection gives all-zero statistics. The average only counts
    state-action and militia victims; police and disappearance counts are
    part of total_victims but not of the average.
    """
    records = tuple(records)
    if not records:
        return IncidentStatistics()

    total = len(records)
    total_victims = sum(r.total_victims for r in records)
    minor_victims = sum(r.minors for r in records)
    averaged = sum(r.state_action + r.militia for r in records)

    years = [y for y in (r.year for r in records) if y is not None]
    if len(years) < total:
        logger.debug(f"{total - len(years)} incidents have unparsable dates")
    years_covered = max(years) - min(years) if years else 0

    governors = {r.governor for r in records if r.governor}

    return IncidentStatistics(
        total_massacres=total,
        total_victims=total_victims,
        minor_victims=minor_victims,
        avg_victims_per_incident=round_half_up(averaged / total),
        years_covered=years_covered,
        governors_involved=len(governors),
    )
