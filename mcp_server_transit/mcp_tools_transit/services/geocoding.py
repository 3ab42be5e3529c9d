from __future__ import annotations

import logging
from typing import Optional

import requests

from ..core.cache import FileCache
from ..core.errors import LookupFailedError, UpstreamAPIError, UpstreamNetworkError
from ..core.schemas import Place

logger = logging.getLogger(__name__)

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"


def geocode_city(
    city: str,
    cache: Optional[FileCache] = None,
    base_url: str = GEOCODING_BASE_URL,
    timeout_s: int = 30,
) -> Place:
    """Token-free geocoding via the Open-Meteo geocoding API (first hit only)."""
    key = f"openmeteo-geocoding:{city.strip().lower()}"
    if cache:
        cached = cache.get(key)
        if cached and "lat" in cached and "lon" in cached:
            return Place(**cached)

    params = {"name": city, "count": 1, "language": "en", "format": "json"}
    try:
        r = requests.get(base_url, params=params, timeout=timeout_s)
    except requests.RequestException as e:
        raise UpstreamNetworkError(str(e)) from e
    if r.status_code >= 400:
        raise UpstreamAPIError(f"Geocoding request failed ({r.status_code}).")

    results = r.json().get("results") or []
    if not results:
        raise LookupFailedError(f"도시 '{city}'를 찾을 수 없습니다")

    hit = results[0]
    place = Place(
        name=str(hit.get("name") or city),
        lat=float(hit["latitude"]),
        lon=float(hit["longitude"]),
        country=hit.get("country"),
    )
    logger.debug("Geocoded %r -> %s (%.4f, %.4f)", city, place.name, place.lat, place.lon)
    if cache:
        cache.set(key, place.model_dump())
    return place
