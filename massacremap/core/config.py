"""
Central configuration for the MassacreMap dashboard backend.
"""

import os
from pathlib import Path

# Base paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent
DATA_DIR = BASE_DIR / "data"

# Source dataset (the only setting the data path depends on)
DATA_PATH = Path(os.getenv("MASSACREMAP_DATA_PATH", str(DATA_DIR / "massacres.csv")))

# Governor selector value meaning "no filter"
ALL_GOVERNORS = "all"

# Record field -> accepted source column headers, first match wins
SOURCE_COLUMNS = {
    "name": ("Massacre Name",),
    "location": ("Location (Google Maps)",),
    "lat": ("Latitude",),
    "lon": ("Longitude",),
    "date": ("Date",),
    "governor": ("State Governor at the Time",),
    "minors": ("Minor Victims (Under 18)",),
    "disappearances": ("Enforced Dissapearances", "Enforced Disappearances"),
    "state_action": ("Victims of State/Police Action",),
    "militia": ("Victims of Faction/Militia Conflict",),
    "police": ("Police Officers Victims",),
    "names": ("Names",),
    "notes": ("Notes",),
    "link": ("WikiFavelas Source Link",),
}

COUNT_FIELDS = ["minors", "disappearances", "state_action", "militia", "police"]
COORDINATE_FIELDS = ["lat", "lon"]

# Victim categories stacked in the timeline chart and shown in tooltips
VICTIM_CATEGORIES = {
    "state_action": "Victims of State/Police Action",
    "militia": "Victims of Faction/Militia Conflict",
    "police": "Police Officers Victims",
    "disappearances": "Enforced Disappearances",
}

# Source dates are written day-first (DD/MM/YYYY)
DATE_DAYFIRST = True

# Geocoding collaborators
NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "massacremap/0.1")
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "")
GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
GEOCODER_TIMEOUT = int(os.getenv("GEOCODER_TIMEOUT", "10"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
