from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Geographic coordinates in WGS84."""
    lat: float
    lon: float


class Place(BaseModel):
    """A geocoded place (first Open-Meteo geocoding hit)."""
    name: str
    lat: float
    lon: float
    country: Optional[str] = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lon=self.lon)


# ---------------------------------------------------------------------------
# Transit itinerary (normalized Tmap response)
# ---------------------------------------------------------------------------


class Lane(BaseModel):
    """Route metadata attached to a transit leg (first entry of `Lane`)."""
    model_config = ConfigDict(frozen=True)

    route_label: Optional[str] = None
    route_type: Optional[str] = None
    service_active: Optional[bool] = Field(
        default=None,
        description="True if the line is currently operating (service == 1).",
    )


class Leg(BaseModel):
    """One continuous segment of an itinerary.

    Raw units are kept (meters / seconds); conversion happens when rendering.
    """
    model_config = ConfigDict(frozen=True)

    mode: Optional[str] = Field(default=None, description="WALK or a transit mode code, e.g. BUS, SUBWAY")
    route_label: Optional[str] = None
    distance_meters: int = 0
    section_time_seconds: Optional[int] = None
    start_name: Optional[str] = None
    end_name: Optional[str] = None

    # WALK legs only
    walk_steps: Optional[Tuple[str, ...]] = None

    # Transit legs only
    lane_info: Optional[Lane] = None
    passed_stations: Tuple[str, ...] = ()

    @property
    def is_walk(self) -> bool:
        return self.mode == "WALK"


class ItinerarySummary(BaseModel):
    """The first itinerary of a directions response, normalized."""
    model_config = ConfigDict(frozen=True)

    total_time_seconds: Optional[int] = None
    total_distance_meters: Optional[int] = None
    transfer_count: int = 0
    total_walk_distance_meters: int = 0
    total_walk_time_seconds: Optional[int] = None
    fare_amount: int = 0
    legs: Tuple[Leg, ...] = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Collaborator tools
# ---------------------------------------------------------------------------


class CurrentWeather(BaseModel):
    """Current conditions for a city (Open-Meteo `current` block)."""
    city: str
    temperature: int
    condition: str
    humidity: int
    wind_speed: int
    feels_like: int
    precipitation: Optional[float] = None


class ExchangeRate(BaseModel):
    """Rate for converting one unit of `base` into `target`."""
    base: str
    target: str
    rate: float
    date: Optional[str] = Field(default=None, description="Provider's last update time (UTC string)")
