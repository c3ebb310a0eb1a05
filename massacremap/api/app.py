"""
FastAPI application serving the massacre dataset to the dashboard.

The dataset is read once at startup. Every request builds its own
DashboardState from the `governor` and `q` query parameters, so requests
never share mutable state.
"""

import logging

from fastapi import FastAPI, HTTPException, Query

from massacremap.analysis.filters import list_governors, with_coordinates
from massacremap.analysis.timeline import incident_detail, yearly_timeline
from massacremap.core.config import ALL_GOVERNORS, VICTIM_CATEGORIES
from massacremap.core.state import DashboardState, apply_search, initial_state, select_governor
from massacremap.data.parser import load_incidents
from massacremap.data.schemas import IncidentResponse, MapPoint, StatisticsResponse
from massacremap.geo.geocoding import get_geocoder

logger = logging.getLogger(__name__)

app = FastAPI(
    title="MassacreMap",
    description="Data backend for the massacre map and timeline dashboard.",
    version="0.1.0",
)


@app.on_event("startup")
def startup():
    app.state.records = load_incidents()
    logger.info(f"Dashboard ready with {len(app.state.records)} incidents")


def _state(governor: str, q: str) -> DashboardState:
    state = initial_state(getattr(app.state, "records", ()))
    return apply_search(select_governor(state, governor), q)


# --- Incidents ---

@app.get("/api/incidents", tags=["Incidents"])
def list_incidents(governor: str = ALL_GOVERNORS, q: str = ""):
    """Incidents passing the governor filter and search, with their statistics."""
    state = _state(governor, q)
    return {
        "incidents": [IncidentResponse.from_record(r).model_dump() for r in state.visible],
        "total": len(state.visible),
        "statistics": StatisticsResponse.from_statistics(state.statistics).model_dump(),
    }


@app.get("/api/incidents/{row}/detail", tags=["Incidents"])
def get_incident_detail(row: int, category: str = Query(default="state_action")):
    """Tooltip payload for one incident and victim category."""
    record = next((r for r in getattr(app.state, "records", ()) if r.row == row), None)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Incident {row} not found")
    try:
        return incident_detail(record, category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# --- Aggregates ---

@app.get("/api/statistics", tags=["Analysis"])
def get_statistics(governor: str = ALL_GOVERNORS, q: str = ""):
    state = _state(governor, q)
    return StatisticsResponse.from_statistics(state.statistics).model_dump()


@app.get("/api/governors", tags=["Analysis"])
def get_governors():
    """Options for the governor selector."""
    return {"governors": list_governors(getattr(app.state, "records", ()))}


@app.get("/api/timeline", tags=["Analysis"])
def get_timeline(governor: str = ALL_GOVERNORS, q: str = ""):
    """Yearly victim counts per category for the stacked bar chart."""
    state = _state(governor, q)
    return {"timeline": yearly_timeline(state.visible), "categories": VICTIM_CATEGORIES}


@app.get("/api/map", tags=["Analysis"])
def get_map_points(governor: str = ALL_GOVERNORS, q: str = ""):
    """Map symbols; incidents without valid coordinates are left out."""
    state = _state(governor, q)
    points = [
        MapPoint(row=r.row, name=r.name, lat=r.lat, lon=r.lon,
                 total_victims=r.total_victims).model_dump()
        for r in with_coordinates(state.visible)
    ]
    return {"points": points, "excluded": len(state.visible) - len(points)}


# --- Geocoding ---

@app.get("/api/geocode", tags=["Geocoding"])
def geocode_address(address: str, provider: str = "nominatim"):
    try:
        geocoder = get_geocoder(provider)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result = geocoder.geocode(address)
    return {"result": result.model_dump() if result else None}
