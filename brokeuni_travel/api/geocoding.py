# brokeuni_travel/api/geocoding.py
"""Remote city-name lookup used to enrich autocomplete suggestions.

Two providers share one interface, ``search(query) -> list[str]``:

* ``NominatimLookup`` queries the public OpenStreetMap search endpoint
  (the default, no key needed).
* ``GoogleMapsLookup`` uses Google Places autocomplete through the
  ``googlemaps`` client when an API key is configured.

Both return short place names (the first comma-separated segment of the
provider's display name), deduplicated in the order received, and raise
``CityLookupError`` on any failure so the caller can fall back to the
local list.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import googlemaps
from googlemaps import exceptions as gmaps_exceptions
import requests

from brokeuni_travel.api.config import validate_geocoding_config
from brokeuni_travel.api.errors import CityLookupError

logger = logging.getLogger(__name__)


def extract_place_names(display_names: Iterable[str]) -> List[str]:
    """Keep the leading segment of each display name, first occurrence wins."""
    names: List[str] = []
    seen = set()
    for display_name in display_names:
        if not isinstance(display_name, str) or not display_name:
            continue
        name = display_name.split(",")[0].strip()
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names


class NominatimLookup:
    """City search against an OpenStreetMap Nominatim instance."""

    def __init__(
        self,
        url: str = "https://nominatim.openstreetmap.org/search",
        country: str = "gb",
        limit: int = 5,
        timeout: float = 10.0,
        user_agent: str = "brokeuni-travel/0.1",
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.country = country
        self.limit = limit
        self.timeout = timeout
        self.user_agent = user_agent
        self._http = session or requests.Session()

    def search(self, query: str) -> List[str]:
        params = {
            "format": "json",
            "countrycodes": self.country,
            "city": query,
            "limit": self.limit,
        }
        logger.debug("Nominatim lookup: %s", query)
        try:
            response = self._http.get(
                self.url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            response.raise_for_status()
            records = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise CityLookupError(f"Nominatim lookup failed for '{query}': {exc}") from exc

        if not isinstance(records, list):
            raise CityLookupError(f"Unexpected Nominatim payload for '{query}'")

        return extract_place_names(
            record.get("display_name", "") for record in records if isinstance(record, dict)
        )


class GoogleMapsLookup:
    """City search using Google Places autocomplete."""

    def __init__(self, api_key: str, country: str = "gb", limit: int = 5, timeout: float = 10.0):
        self.api_key = api_key
        self.country = country
        self.limit = limit
        self.timeout = timeout
        self._gmaps: Optional[googlemaps.Client] = None

    def _get_client(self) -> googlemaps.Client:
        """Return a cached googlemaps.Client instance."""
        if self._gmaps is None:
            try:
                logger.info(f"Initializing Google Maps client with key: {self.api_key[:10]}...")
                self._gmaps = googlemaps.Client(key=self.api_key, timeout=self.timeout)
            except ValueError as exc:
                raise CityLookupError(f"Failed to initialize Google Maps client: {exc}") from exc
        return self._gmaps

    def search(self, query: str) -> List[str]:
        client = self._get_client()
        logger.debug("Google Places lookup: %s", query)
        try:
            predictions: List[Dict[str, Any]] = client.places_autocomplete(
                query,
                components={"country": [self.country]},
                types="(cities)",
                language="en",
            )
        except (
            gmaps_exceptions.ApiError,
            gmaps_exceptions.TransportError,
            gmaps_exceptions.Timeout,
        ) as exc:
            raise CityLookupError(f"Google Places lookup failed for '{query}': {exc}") from exc

        descriptions = [p.get("description", "") for p in predictions[: self.limit]]
        return extract_place_names(descriptions)


def create_city_lookup(config: Dict[str, Any]):
    """Build the lookup selected by ``config["provider"]``."""
    validate_geocoding_config(config)
    if config["provider"] == "google":
        logger.info("Using Google Places for city lookups")
        return GoogleMapsLookup(
            api_key=config["google_api_key"],
            country=config["country"],
            limit=config["limit"],
            timeout=config["timeout"],
        )
    logger.info("Using Nominatim for city lookups (%s)", config["nominatim_url"])
    return NominatimLookup(
        url=config["nominatim_url"],
        country=config["country"],
        limit=config["limit"],
        timeout=config["timeout"],
        user_agent=config["user_agent"],
    )


__all__ = [
    "extract_place_names",
    "NominatimLookup",
    "GoogleMapsLookup",
    "create_city_lookup",
]
