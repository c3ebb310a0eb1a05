"""
Address-to-coordinate lookups used to fill in missing map positions.

Two interchangeable providers share the same `geocode(address)` call:
Nominatim (OpenStreetMap, through geopy) and the Google Geocoding API
(plain HTTP through requests). A lookup that finds nothing, or fails,
returns None. These are optional enrichment helpers; loading and
filtering the dataset never depend on them.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

import requests
from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from massacremap.core import config
from massacremap.data.records import IncidentRecord
from massacremap.data.schemas import GeocodeResult

logger = logging.getLogger(__name__)


class NominatimGeocoder:
    """Geocoder backed by the public Nominatim service."""

    name = "nominatim"

    def __init__(self, user_agent: Optional[str] = None, timeout: Optional[int] = None):
        self.geolocator = Nominatim(
            user_agent=user_agent or config.NOMINATIM_USER_AGENT,
            timeout=timeout or config.GEOCODER_TIMEOUT,
        )

    def geocode(self, address: str) -> Optional[GeocodeResult]:
        if not address or not address.strip():
            return None
        try:
            location = self.geolocator.geocode(address)
        except GeopyError as e:
            logger.warning(f"Nominatim lookup failed for '{address}': {e}")
            return None

        if location is None:
            logger.info(f"Nominatim found no match for '{address}'")
            return None

        return GeocodeResult(
            address=address,
            lat=location.latitude,
            lon=location.longitude,
            provider=self.name,
            display_name=location.address,
        )


class GoogleGeocoder:
    """Geocoder backed by the Google Maps Geocoding API."""

    name = "google"

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[int] = None):
        self.api_key = api_key if api_key is not None else config.GOOGLE_MAPS_API_KEY
        self.timeout = timeout or config.GEOCODER_TIMEOUT
        self.session = requests.Session()

    def geocode(self, address: str) -> Optional[GeocodeResult]:
        if not address or not address.strip():
            return None
        if not self.api_key:
            logger.warning("GOOGLE_MAPS_API_KEY is not set, skipping Google lookup")
            return None

        try:
            response = self.session.get(
                config.GOOGLE_GEOCODE_URL,
                params={"address": address, "key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning(f"Google lookup failed for '{address}': {e}")
            return None
        except ValueError as e:
            logger.warning(f"Google returned invalid JSON for '{address}': {e}")
            return None

        status = data.get("status")
        results = data.get("results") or []
        if status != "OK" or not results:
            logger.info(f"Google found no match for '{address}' (status={status})")
            return None

        best = results[0]
        location = best.get("geometry", {}).get("location", {})
        if "lat" not in location or "lng" not in location:
            logger.info(f"Google result for '{address}' has no coordinates")
            return None

        return GeocodeResult(
            address=address,
            lat=location["lat"],
            lon=location["lng"],
            provider=self.name,
            display_name=best.get("formatted_address"),
        )


GEOCODERS = {
    NominatimGeocoder.name: NominatimGeocoder,
    GoogleGeocoder.name: GoogleGeocoder,
}


def get_geocoder(provider: str = "nominatim"):
    """Instantiate a geocoder by provider name."""
    geocoder_cls = GEOCODERS.get(provider.lower())
    if geocoder_cls is None:
        raise ValueError(f"Unknown geocoding provider: {provider!r}. Expected one of {sorted(GEOCODERS)}")
    return geocoder_cls()


def enrich_coordinates(records: Iterable[IncidentRecord], geocoder) -> tuple[IncidentRecord, ...]:
    """
    Fill in coordinates for records that lack them.

    Records that already have valid coordinates, or have no location text,
    are returned as-is. Returns a new tuple in the same order.
    """
    enriched = []
    filled = 0
    for record in records:
        if record.has_coordinates or not record.location:
            enriched.append(record)
            continue
        result = geocoder.geocode(record.location)
        if result is None:
            enriched.append(record)
            continue
        enriched.append(replace(record, lat=result.lat, lon=result.lon))
        filled += 1

    logger.info(f"Geocoded {filled} of {len(enriched)} incidents")
    return tuple(enriched)
