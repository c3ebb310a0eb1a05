"""
Record parser: turns the raw massacre CSV into IncidentRecord tuples.

Parsing is lenient: every source row yields
exactly one record, malformed counts become 0 and malformed coordinates
become INVALID_COORDINATE.
"""

import io
import logging
import math
import re
from pathlib import Path
from typing import Optional

import pandas as pd

from massacremap.core import config
from massacremap.core.config import COORDINATE_FIELDS, COUNT_FIELDS, SOURCE_COLUMNS
from massacremap.data.records import INVALID_COORDINATE, IncidentRecord

logger = logging.getLogger(__name__)

_LEADING_COUNT = re.compile(r"^\+?(\d+)")
_LEADING_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def read_source_text(path: str | Path) -> Optional[str]:
    """Read the whole source file in one go. Returns None on failure."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read source data from {path}: {e}")
        return None


def parse_incidents(raw_text: Optional[str]) -> tuple[IncidentRecord, ...]:
    """Parse delimited text into records, in source row order."""
    if raw_text is None or not raw_text.strip():
        logger.warning("Source text is empty, no incidents parsed")
        return ()

    df = _read_frame(raw_text.lstrip("\ufeff"))
    if df is None:
        return ()

    columns = _resolve_columns(df.columns)
    records = []
    for row, values in enumerate(df.to_dict(orient="records")):
        fields = {}
        for field, column in columns.items():
            value = values.get(column) if column else None
            if field in COUNT_FIELDS:
                fields[field] = _to_count(value)
            elif field in COORDINATE_FIELDS:
                fields[field] = _to_coordinate(value)
            else:
                fields[field] = _to_str(value)
        records.append(IncidentRecord(row=row, **fields))

    logger.info(f"Parsed {len(records)} incidents")
    return tuple(records)


def load_incidents(path: Optional[str | Path] = None) -> tuple[IncidentRecord, ...]:
    """Retrieve and parse the source dataset. Never raises; failures give ()."""
    path = path or config.DATA_PATH
    raw_text = read_source_text(path)
    if raw_text is None:
        return ()
    return parse_incidents(raw_text)


def _read_frame(raw_text: str) -> Optional[pd.DataFrame]:
    try:
        width = len(pd.read_csv(io.StringIO(raw_text), nrows=0).columns)
        df = pd.read_csv(
            io.StringIO(raw_text),
            dtype=str,
            keep_default_na=False,
            engine="python",
            # Rows with extra cells are kept, truncated to the header width,
            # and never shift into an implicit index column
            index_col=False,
            on_bad_lines=lambda cells: cells[:width],
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.error(f"Could not parse source text: {e}")
        return None
    df.columns = [str(c).strip() for c in df.columns]
    return df


def _resolve_columns(available) -> dict[str, Optional[str]]:
    """Map each record field to the first matching source header."""
    available = set(available)
    columns = {}
    for field, candidates in SOURCE_COLUMNS.items():
        column = next((c for c in candidates if c in available), None)
        if column is None:
            logger.warning(f"Source has no column for '{field}' (tried {candidates}), using defaults")
        columns[field] = column
    return columns


def _to_str(value) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value).strip()


def _to_count(value) -> int:
    """Leading unsigned integer of the cell, 0 for anything else."""
    match = _LEADING_COUNT.match(_to_str(value))
    if match is None:
        return 0
    return int(match.group(1))


def _to_coordinate(value) -> float:
    """Leading decimal number of the cell ('-22.9068 S' -> -22.9068), NaN otherwise."""
    text = _to_str(value)
    if "," in text and "." not in text:
        text = text.replace(",", ".")
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return INVALID_COORDINATE
    number = float(match.group(0))
    return number if math.isfinite(number) else INVALID_COORDINATE
