"""mcp_tools_transit package

Purpose:
- Turn third-party API responses (Tmap transit routes, Open-Meteo weather,
  exchange rates) into normalized, readable tool results.
- Expose those services via an MCP server (official python-sdk / FastMCP), so an LLM can call tools.

Structure:
- core/: schemas, config, errors, caching
- services/: transit (itinerary extraction + formatting), geocoding/weather, exchange rates
- utils/: pure helpers (unit conversion)
- mcp/: FastMCP server + tool wiring
"""

from .core.schemas import Coordinates, ItinerarySummary, Lane, Leg  # noqa: F401
from .services.formatter import format_itinerary, format_not_found  # noqa: F401
from .services.itinerary import extract_itinerary  # noqa: F401
