from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransitApiConfig(BaseModel):
    """Explicit configuration handed to `TransitRouteService`."""
    endpoint_url: str
    api_key: str = ""
    timeout_ms: int = Field(default=10_000, gt=0)

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000


class Settings(BaseSettings):
    """Environment / .env backed settings for the MCP server."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # SK Open API (Tmap) transit routes
    TMAP_TRANSIT_API_URL: str = "https://apis.openapi.sk.com/transit/routes"
    TMAP_TRANSIT_API_KEY: str = ""
    TMAP_TRANSIT_TIMEOUT_MS: int = 10_000

    # Open-Meteo
    GEOCODING_API_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    WEATHER_API_URL: str = "https://api.open-meteo.com/v1/forecast"

    # Exchange rates, base currency code is appended to the URL
    EXCHANGE_RATE_API_URL: str = "https://open.er-api.com/v6/latest/"

    HTTP_TIMEOUT_S: int = 30
    CACHE_DIR: str = "./data/cache"
    CACHE_TTL_SECONDS: int = 24 * 3600
    LOG_LEVEL: str = "INFO"

    def transit_config(self) -> TransitApiConfig:
        return TransitApiConfig(
            endpoint_url=self.TMAP_TRANSIT_API_URL,
            api_key=self.TMAP_TRANSIT_API_KEY,
            timeout_ms=self.TMAP_TRANSIT_TIMEOUT_MS,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
