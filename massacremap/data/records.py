"""
Record types for the massacre dataset.

Each source row becomes one immutable IncidentRecord. Filtering and
aggregation select records, they never edit them.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from dateutil import parser as dateparser

from massacremap.core.config import DATE_DAYFIRST, VICTIM_CATEGORIES

# Fills date parts missing from the text; a result still in year 1 had no year.
_NO_DATE = datetime(1, 1, 1)

# Coordinate value for cells that could not be parsed. Distinct from 0.0,
# which is a legitimate coordinate.
INVALID_COORDINATE = float("nan")


def is_valid_coordinate(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


@dataclass(frozen=True)
class IncidentRecord:
    """One massacre as recorded in the source dataset."""

    row: int
    name: str = ""
    location: str = ""
    lat: float = INVALID_COORDINATE
    lon: float = INVALID_COORDINATE
    date: str = ""
    governor: str = ""
    minors: int = 0
    disappearances: int = 0
    state_action: int = 0
    militia: int = 0
    police: int = 0
    names: str = ""
    notes: str = ""
    link: str = ""

    @property
    def has_coordinates(self) -> bool:
        return is_valid_coordinate(self.lat) and is_valid_coordinate(self.lon)

    @property
    def parsed_date(self) -> Optional[datetime]:
        """The source date as a datetime, or None when it cannot be read.

        Text without a year (e.g. "15/03") counts as unreadable.
        """
        if not self.date.strip():
            return None
        try:
            parsed = dateparser.parse(self.date, dayfirst=DATE_DAYFIRST, default=_NO_DATE)
        except (ValueError, OverflowError):
            return None
        if parsed.year == _NO_DATE.year:
            return None
        return parsed

    @property
    def year(self) -> Optional[int]:
        parsed = self.parsed_date
        return parsed.year if parsed else None

    @property
    def total_victims(self) -> int:
        return self.state_action + self.militia + self.police + self.disappearances

    def category_count(self, category: str) -> int:
        """Victim count for one of the VICTIM_CATEGORIES keys."""
        if category not in VICTIM_CATEGORIES:
            raise ValueError(
                f"Unknown victim category: {category!r}. "
                f"Expected one of {sorted(VICTIM_CATEGORIES)}"
            )
        return getattr(self, category)
