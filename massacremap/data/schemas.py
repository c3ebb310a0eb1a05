"""
Pydantic schemas for API responses and geocoding results.
"""

from typing import Optional

from pydantic import BaseModel

from massacremap.analysis.statistics import IncidentStatistics
from massacremap.data.records import IncidentRecord, is_valid_coordinate


class IncidentResponse(BaseModel):
    """Schema for returning one incident. Invalid coordinates become null."""

    row: int
    name: str
    location: str
    lat: Optional[float] = None
    lon: Optional[float] = None
    date: str
    year: Optional[int] = None
    governor: str
    minors: int = 0
    disappearances: int = 0
    state_action: int = 0
    militia: int = 0
    police: int = 0
    total_victims: int = 0
    names: str = ""
    notes: str = ""
    link: str = ""

    @classmethod
    def from_record(cls, record: IncidentRecord) -> "IncidentResponse":
        return cls(
            row=record.row,
            name=record.name,
            location=record.location,
            lat=record.lat if is_valid_coordinate(record.lat) else None,
            lon=record.lon if is_valid_coordinate(record.lon) else None,
            date=record.date,
            year=record.year,
            governor=record.governor,
            minors=record.minors,
            disappearances=record.disappearances,
            state_action=record.state_action,
            militia=record.militia,
            police=record.police,
            total_victims=record.total_victims,
            names=record.names,
            notes=record.notes,
            link=record.link,
        )


class StatisticsResponse(BaseModel):
    """Schema for the summary statistics panel."""

    total_massacres: int = 0
    total_victims: int = 0
    minor_victims: int = 0
    avg_victims_per_incident: int = 0
    years_covered: int = 0
    governors_involved: int = 0

    @classmethod
    def from_statistics(cls, stats: IncidentStatistics) -> "StatisticsResponse":
        return cls(**stats.to_dict())


class MapPoint(BaseModel):
    """Schema for one proportional symbol on the map."""

    row: int
    name: str
    lat: float
    lon: float
    total_victims: int


class GeocodeResult(BaseModel):
    """A successful address-to-coordinate lookup."""

    address: str
    lat: float
    lon: float
    provider: str
    display_name: Optional[str] = None
