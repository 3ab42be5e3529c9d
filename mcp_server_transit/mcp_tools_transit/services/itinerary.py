"""Itinerary extraction from a Tmap transit response.

The raw payload is loosely typed: any field may be missing or carry the
wrong type. All presence checks happen here, once, so the formatter only has
to look at `None` on the normalized model.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.schemas import ItinerarySummary, Lane, Leg

logger = logging.getLogger(__name__)

WALK_MODE = "WALK"


def extract_itinerary(raw: Any) -> Optional[ItinerarySummary]:
    """Normalize the first itinerary of `metaData.plan.itineraries`.

    Returns None (not found) when the list is missing or empty, or when the
    first itinerary has no legs. Later itineraries are never consulted.
    """
    itineraries = _as_list(_dig(raw, "metaData", "plan", "itineraries"))
    if not itineraries:
        return None

    best = itineraries[0]
    if not isinstance(best, dict):
        logger.warning("First itinerary is not an object: %r", type(best).__name__)
        return None

    legs = [_leg_from_tmap(leg) for leg in _as_list(best.get("legs")) if isinstance(leg, dict)]
    if not legs:
        logger.info("First itinerary has no legs, treating as not found")
        return None

    return ItinerarySummary(
        total_time_seconds=_safe_int(best.get("totalTime")),
        total_distance_meters=_safe_int(best.get("totalDistance")),
        transfer_count=_safe_int(best.get("transferCount")) or 0,
        total_walk_distance_meters=_safe_int(best.get("totalWalkDistance")) or 0,
        total_walk_time_seconds=_safe_int(best.get("totalWalkTime")),
        fare_amount=_safe_int(_dig(best, "fare", "regular", "totalFare")) or 0,
        legs=tuple(legs),
    )


def _leg_from_tmap(leg: Dict[str, Any]) -> Leg:
    mode = _safe_str(leg.get("mode"))
    common = dict(
        mode=mode,
        distance_meters=_safe_int(leg.get("distance")) or 0,
        section_time_seconds=_safe_int(leg.get("sectionTime")),
        start_name=_safe_str(_dig(leg, "start", "name")),
        end_name=_safe_str(_dig(leg, "end", "name")),
    )

    if mode == WALK_MODE:
        steps = leg.get("steps")
        walk_steps = None
        if isinstance(steps, list):
            # Empty descriptions are kept so the step count survives.
            walk_steps = tuple(_safe_str(_dig(step, "description")) or "" for step in steps)
        return Leg(walk_steps=walk_steps, **common)

    return Leg(
        route_label=_safe_str(leg.get("route")),
        lane_info=_lane_from_tmap(leg.get("Lane")),
        passed_stations=tuple(_station_names(leg.get("passStopList"))),
        **common,
    )


def _lane_from_tmap(lanes: Any) -> Optional[Lane]:
    lanes = _as_list(lanes)
    if not lanes or not isinstance(lanes[0], dict):
        return None
    lane = lanes[0]
    service = lane.get("service")
    return Lane(
        route_label=_safe_str(lane.get("route")),
        route_type=_safe_str(lane.get("type")),
        service_active=None if service is None else _is_service_on(service),
    )


def _is_service_on(service: Any) -> bool:
    # only the number 1 means operating; "1" and True do not
    return isinstance(service, (int, float)) and not isinstance(service, bool) and service == 1


def _station_names(pass_stop_list: Any) -> List[str]:
    names: List[str] = []
    for station in _as_list(_dig(pass_stop_list, "stationList")):
        name = _safe_str(_dig(station, "stationName"))
        if name:
            names.append(name)
    return names


# ---------------------------------------------------------------------------
# Loose JSON helpers
# ---------------------------------------------------------------------------


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _safe_int(value: Any) -> Optional[int]:
    """Integer from int/float/numeric string; bools and garbage are absent."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return None


def _safe_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    return text if text else None
