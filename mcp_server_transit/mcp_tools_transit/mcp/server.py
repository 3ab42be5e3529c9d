"""MCP server (official python-sdk) exposing mcp_tools_transit tools.

This uses FastMCP from the official MCP Python SDK:
- Tools are ordinary Python functions decorated with @mcp.tool().
- Schemas are derived automatically from type hints / Pydantic models.
- Transport (stdio, SSE, streamable HTTP) is handled by the SDK/CLI.
"""

from __future__ import annotations

import sys
import argparse
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP

from ..core.cache import FileCache
from ..core.config import get_settings
from ..core.schemas import Coordinates, CurrentWeather, ExchangeRate
from ..services.exchange import get_exchange_rate
from ..services.transit import TransitRouteService
from ..services.weather import get_current_weather


# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------

settings = get_settings()

mcp = FastMCP(name="transit-weather-exchange", stateless_http=False)

logger = logging.getLogger("transit-mcp")
logging.basicConfig(stream=sys.stderr, level=settings.LOG_LEVEL.upper())


def _cache() -> FileCache:
    return FileCache(settings.CACHE_DIR, ttl_seconds=settings.CACHE_TTL_SECONDS)


@mcp.tool()
def transit_api(origin_lat: float, origin_lng: float, dest_lat: float, dest_lng: float) -> str:
    """티맵 대중교통 API를 사용하여 출발지~도착지(위도/경도) 대중교통 경로를 안내합니다."""
    with TransitRouteService(settings.transit_config()) as service:
        return service.describe_route(
            Coordinates(lat=origin_lat, lon=origin_lng),
            Coordinates(lat=dest_lat, lon=dest_lng),
        )


@mcp.tool()
def weather_api(city: str) -> CurrentWeather:
    """Open-Meteo API를 사용하여 도시의 실제 날씨 정보를 가져오기"""
    return get_current_weather(
        city,
        cache=_cache(),
        geocoding_url=settings.GEOCODING_API_URL,
        weather_url=settings.WEATHER_API_URL,
        timeout_s=settings.HTTP_TIMEOUT_S,
    )


@mcp.tool()
def exchange_rate_api(base: str, target: str) -> ExchangeRate:
    """무료 환율 API를 사용하여 기준 통화(base)에서 대상 통화(target)로의 환율을 조회합니다."""
    return get_exchange_rate(
        base,
        target,
        cache=_cache(),
        api_url=settings.EXCHANGE_RATE_API_URL,
        timeout_s=settings.HTTP_TIMEOUT_S,
    )


# ---------------------------------------------------------------------------
# ASGI-App für streamable HTTP & Uvicorn-Entry-Point
# ---------------------------------------------------------------------------

# ASGI-App exportieren; der MCP-Endpunkt ist /mcp
starlette_app = mcp.streamable_http_app()  # path="/mcp"


def main() -> None:
    """Start the transit MCP server (streamable HTTP via Uvicorn, or stdio)."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--transport", choices=["http", "stdio"], default="http")
    args = parser.parse_args()

    if args.transport == "stdio":
        logger.info("Starting transit MCP server (stdio) …")
        mcp.run(transport="stdio")
        return

    logger.info(
        "Starting transit MCP server (streamable-http) on http://%s:%d/mcp …",
        args.host,
        args.port,
    )

    uvicorn.run(
        starlette_app,
        host=args.host,
        port=args.port,
        reload=False,
        loop="asyncio",
    )


if __name__ == "__main__":
    main()
