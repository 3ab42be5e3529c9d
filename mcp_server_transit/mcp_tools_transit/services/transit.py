"""Transit directions via the SK Open API (Tmap) transit routes endpoint.

Notes:
- The provider is asked for a single ranked itinerary (count=1).
- No retries here; a failed call becomes one report line.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..core.config import TransitApiConfig
from ..core.errors import UpstreamAPIError, UpstreamDataError, UpstreamError, UpstreamNetworkError
from ..core.schemas import Coordinates
from .formatter import format_failure, format_itinerary, format_not_found
from .itinerary import extract_itinerary

logger = logging.getLogger(__name__)


class TransitRouteService:
    """Fetch one itinerary between two coordinates and describe it in text."""

    def __init__(self, config: TransitApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this service created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "TransitRouteService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def fetch_routes(self, origin: Coordinates, destination: Coordinates) -> Dict[str, Any]:
        """POST the route request and return the decoded JSON body.

        Raises:
            UpstreamNetworkError: connection problems or timeout.
            UpstreamAPIError: HTTP status >= 400.
            UpstreamDataError: body is not a JSON object.
        """
        body = {
            "startX": origin.lon,
            "startY": origin.lat,
            "endX": destination.lon,
            "endY": destination.lat,
            "count": 1,
            "lang": 0,
            "format": "json",
        }
        headers = {"appKey": self._config.api_key, "Content-Type": "application/json"}

        logger.info(
            "Transit request: (%.6f, %.6f) -> (%.6f, %.6f)",
            origin.lat, origin.lon, destination.lat, destination.lon,
        )
        try:
            r = self._session.post(
                self._config.endpoint_url,
                json=body,
                headers=headers,
                timeout=self._config.timeout_s,
            )
        except requests.RequestException as e:
            logger.error("Transit request failed: %s", e)
            raise UpstreamNetworkError(str(e)) from e

        if r.status_code >= 400:
            reason = _error_reason(r)
            logger.error("Transit API returned %s: %s", r.status_code, reason or r.text[:500])
            extra = f" {reason}" if reason else ""
            raise UpstreamAPIError(f"Transit API request failed ({r.status_code}).{extra}")

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamDataError(f"Transit API returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise UpstreamDataError("Transit API returned a non-object JSON body")

        logger.debug("Transit response: %s", data)
        return data

    def describe_route(self, origin: Coordinates, destination: Coordinates) -> str:
        """Text report for the best itinerary; never raises for upstream failures."""
        try:
            raw = self.fetch_routes(origin, destination)
        except UpstreamError as e:
            return format_failure(str(e))

        summary = extract_itinerary(raw)
        if summary is None:
            logger.info("No itinerary in transit response")
            return format_not_found()
        logger.info("Transit itinerary with %d legs", len(summary.legs))
        return format_itinerary(summary)


def _error_reason(r: requests.Response) -> Optional[str]:
    """Tmap error bodies look like {"error": {"id": ..., "code": ..., "message": ...}}."""
    try:
        err = r.json()
    except ValueError:
        return None
    if not isinstance(err, dict):
        return None
    detail = err.get("error") or err.get("result")
    if isinstance(detail, dict):
        return detail.get("message") or detail.get("code")
    if isinstance(detail, str):
        return detail
    return None
