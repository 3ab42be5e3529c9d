"""Exceptions raised by the service layer.

Transit failures are caught in `TransitRouteService` and turned into a single
report line; weather and exchange-rate failures propagate to the MCP layer.
"""


class ToolServiceError(Exception):
    """Base exception for all tool services."""


class UpstreamError(ToolServiceError):
    """The third-party API call itself failed."""


class UpstreamAPIError(UpstreamError):
    """Raised when the provider answers with an error status or error payload."""


class UpstreamNetworkError(UpstreamError):
    """Raised when network communication fails (connection, timeout)."""


class UpstreamDataError(UpstreamError):
    """Raised when the response body cannot be parsed."""


class LookupFailedError(ToolServiceError):
    """The provider answered, but had nothing for the requested city/currency."""
