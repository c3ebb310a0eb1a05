"""
Chart feeds for the dashboard: the stacked yearly timeline and the
per-incident tooltip payload.
"""

from dataclasses import asdict
from typing import Iterable

import pandas as pd

from massacremap.core.config import VICTIM_CATEGORIES
from massacremap.data.records import IncidentRecord

FRAME_COLUMNS = [
    "row", "name", "location", "lat", "lon", "date", "governor",
    "minors", "disappearances", "state_action", "militia", "police",
    "names", "notes", "link", "year",
]


def records_to_dataframe(records: Iterable[IncidentRecord]) -> pd.DataFrame:
    """One DataFrame row per record, with the calendar year added."""
    rows = [{**asdict(r), "year": r.year} for r in records]
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def yearly_timeline(records: Iterable[IncidentRecord]) -> list[dict]:
    """
    Victims per year, split by category, for the stacked bar chart.

    Records whose date cannot be parsed have no year and are left out.
    """
    df = records_to_dataframe(records)
    df = df.dropna(subset=["year"])
    if df.empty:
        return []

    df = df.astype({"year": int})
    aggregations = {"incidents": ("row", "count")}
    aggregations.update({category: (category, "sum") for category in VICTIM_CATEGORIES})

    yearly = df.groupby("year").agg(**aggregations).reset_index().sort_values("year")
    return [
        {key: int(value) for key, value in entry.items()}
        for entry in yearly.to_dict(orient="records")
    ]


def incident_detail(record: IncidentRecord, category: str) -> dict:
    """Tooltip contents for one record, highlighting one victim category."""
    count = record.category_count(category)
    return {
        "row": record.row,
        "name": record.name,
        "date": record.date,
        "location": record.location,
        "governor": record.governor,
        "category": category,
        "category_label": VICTIM_CATEGORIES[category],
        "count": count,
        "total_victims": record.total_victims,
        "minors": record.minors,
        "names": record.names,
        "notes": record.notes,
        "link": record.link,
    }
