"""
Google Maps Places client: place details lookup and photo URL generation.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from .exceptions import PlacesError
from .models import PlaceDetails


logger = logging.getLogger(__name__)

PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"
DETAILS_FIELDS = "formatted_address,address_components,name,geometry"
MAX_PHOTOS = 10
PHOTO_MAX_WIDTH = 1600

# address component type -> PlaceDetails field
_COMPONENT_FIELDS = (
    ("locality", "city"),
    ("administrative_area_level_1", "state"),
    ("country", "country"),
    ("postal_code", "postal_code"),
)


def parse_place_details(result: Dict[str, Any]) -> PlaceDetails:
    """Flatten a Place Details `result` object into PlaceDetails."""
    found: Dict[str, str] = {}
    for component in result.get("address_components") or []:
        types = component.get("types") or []
        for type_name, field_name in _COMPONENT_FIELDS:
            if type_name in types:
                found[field_name] = component.get("long_name") or ""
                break

    location = (result.get("geometry") or {}).get("location") or {}
    return PlaceDetails(
        address=result.get("formatted_address") or "",
        name=result.get("name") or "",
        city=found.get("city", ""),
        state=found.get("state", ""),
        country=found.get("country", ""),
        postal_code=found.get("postal_code", ""),
        latitude=location.get("lat"),
        longitude=location.get("lng"),
    )


def photo_url(photo_reference: str, api_key: str, max_width: int = PHOTO_MAX_WIDTH) -> str:
    query = urlencode({"maxwidth": max_width, "photo_reference": photo_reference, "key": api_key})
    return f"{PLACES_BASE_URL}/photo?{query}"


class PlacesClient:
    def __init__(
        self,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def _details(self, place_id: str, fields: str) -> Dict[str, Any]:
        response = self.session.get(
            f"{PLACES_BASE_URL}/details/json",
            params={"place_id": place_id, "fields": fields, "key": self.api_key},
            timeout=self.timeout,
        )
        if not response.ok:
            logger.error("Google Maps API error: %s - %s", response.status_code, response.text)
            raise PlacesError(
                f"Google Maps API request failed: {response.status_code}",
                status=response.status_code,
            )

        data = response.json()
        if data.get("error_message"):
            logger.error("Google Maps API error: %s", data["error_message"])
            raise PlacesError(data["error_message"], status=400)
        return data

    def get_details(self, place_id: str) -> PlaceDetails:
        """
        Look up one place. Raises PlacesError with the HTTP status the caller
        should answer with (upstream status, 400 for API errors, 404 when unknown).
        """
        logger.info("Fetching place details for %s", place_id)
        result = self._details(place_id, DETAILS_FIELDS).get("result")
        if not result:
            raise PlacesError("No place found for this Place ID", status=404)
        details = parse_place_details(result)
        logger.info("Place details retrieved: %s", details.address)
        return details

    def get_photo_urls(self, place_id: str, limit: int = MAX_PHOTOS) -> List[str]:
        """
        Photo URLs for a place, at most `limit`. Lookup failures yield an empty list.
        """
        try:
            data = self._details(place_id, "photos")
        except (PlacesError, requests.RequestException, ValueError) as e:
            logger.error("Google Maps photo lookup failed for %s: %s", place_id, e)
            return []

        photos = (data.get("result") or {}).get("photos") or []
        urls = [
            photo_url(p["photo_reference"], self.api_key)
            for p in photos[:limit]
            if isinstance(p, dict) and p.get("photo_reference")
        ]
        logger.info("Generated %d photo URLs for %s", len(urls), place_id)
        return urls
