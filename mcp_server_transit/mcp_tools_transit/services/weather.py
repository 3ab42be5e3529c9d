"""Current weather (Open-Meteo).

The city is geocoded first, then the `current` block of the forecast
endpoint is fetched for its coordinates. Weather codes follow the WMO
interpretation table documented at https://open-meteo.com/en/docs.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..core.cache import FileCache
from ..core.errors import ToolServiceError, UpstreamAPIError, UpstreamDataError, UpstreamNetworkError
from ..core.schemas import Coordinates, CurrentWeather
from ..utils.units import round_half_up
from .geocoding import GEOCODING_BASE_URL, geocode_city

logger = logging.getLogger(__name__)

FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_FIELDS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
]

WEATHER_CONDITIONS: Dict[int, str] = {
    0: "맑은 하늘",
    1: "주로 맑음",
    2: "부분적으로 흐림",
    3: "흐림",
    45: "안개",
    48: "서리안개",
    51: "가벼운 이슬비",
    53: "보통 이슬비",
    55: "강한 이슬비",
    61: "약한 비",
    63: "보통 비",
    65: "강한 비",
    71: "약한 눈",
    73: "보통 눈",
    75: "강한 눈",
    77: "눈 알갱이",
    80: "약한 소나기",
    81: "보통 소나기",
    82: "강한 소나기",
    85: "약한 눈소나기",
    86: "강한 눈소나기",
    95: "천둥번개",
    96: "약한 우박을 동반한 천둥번개",
    99: "강한 우박을 동반한 천둥번개",
}
UNKNOWN_CONDITION = "알 수 없음"

FAILURE_PREFIX = "날씨 데이터 가져오기 실패: "


def weather_condition(code: Optional[int]) -> str:
    """Korean label for a WMO weather code."""
    if code is None:
        return UNKNOWN_CONDITION
    return WEATHER_CONDITIONS.get(code, UNKNOWN_CONDITION)


def get_current_weather(
    city: str,
    cache: Optional[FileCache] = None,
    geocoding_url: str = GEOCODING_BASE_URL,
    weather_url: str = FORECAST_BASE_URL,
    timeout_s: int = 30,
) -> CurrentWeather:
    """Return current conditions for `city`.

    Raises:
        ToolServiceError: any failure, message prefixed with the Korean
            "weather fetch failed" text. The original exception is chained.
    """
    try:
        place = geocode_city(city, cache=cache, base_url=geocoding_url, timeout_s=timeout_s)
        current = _fetch_current(place.coordinates, weather_url, timeout_s)
        return CurrentWeather(
            city=place.name,
            temperature=round_half_up(current["temperature_2m"]),
            condition=weather_condition(_safe_int(current.get("weather_code"))),
            humidity=round_half_up(current["relative_humidity_2m"]),
            wind_speed=round_half_up(current["wind_speed_10m"]),
            feels_like=round_half_up(current["apparent_temperature"]),
            precipitation=_safe_float(current.get("precipitation")),
        )
    except ToolServiceError as e:
        logger.error("Weather lookup for %r failed: %s", city, e)
        raise type(e)(f"{FAILURE_PREFIX}{e}") from e
    except (AttributeError, ArithmeticError, KeyError, TypeError, ValueError) as e:
        logger.error("Unexpected Open-Meteo payload for %r: %s", city, e)
        raise UpstreamDataError(f"{FAILURE_PREFIX}unexpected response ({e})") from e


def _fetch_current(coords: Coordinates, base_url: str, timeout_s: int) -> Dict[str, Any]:
    params = {
        "latitude": coords.lat,
        "longitude": coords.lon,
        "current": ",".join(CURRENT_FIELDS),
        "timezone": "auto",
    }
    try:
        r = requests.get(base_url, params=params, timeout=timeout_s)
    except requests.RequestException as e:
        raise UpstreamNetworkError(str(e)) from e

    if r.status_code >= 400:
        # Open-Meteo puts the reason in the body for 400s
        try:
            err = r.json()
            reason = err.get("reason") if isinstance(err, dict) else None
        except ValueError:
            reason = None
        extra = f" Reason: {reason}" if reason else ""
        raise UpstreamAPIError(f"Open-Meteo request failed ({r.status_code}).{extra}")

    current = r.json().get("current")
    if not isinstance(current, dict):
        raise UpstreamDataError("Open-Meteo response has no 'current' block")
    return current


def _safe_float(v: Any) -> Optional[float]:
    try:
        return None if v is None else float(v)
    except (TypeError, ValueError):
        return None


def _safe_int(v: Any) -> Optional[int]:
    try:
        return None if v is None else int(v)
    except (TypeError, ValueError):
        return None
