"""
Unit tests for the transit route service (HTTP boundary).
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from mcp_tools_transit.core.errors import UpstreamAPIError, UpstreamDataError, UpstreamNetworkError
from mcp_tools_transit.services.transit import TransitRouteService
from mcp_tools_transit.utils.units import meters_to_km_text


def _response(status_code=200, payload=None, json_error=None):
    r = MagicMock()
    r.status_code = status_code
    r.text = "" if payload is None else str(payload)
    if json_error is not None:
        r.json.side_effect = json_error
    else:
        r.json.return_value = payload
    return r


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def service(transit_config, session):
    return TransitRouteService(transit_config, session=session)


def test_request_shape(service, session, origin, destination, tmap_response):
    session.post.return_value = _response(payload=tmap_response)

    service.fetch_routes(origin, destination)

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == "https://transit.example/routes"
    assert kwargs["json"] == {
        "startX": 126.9707,
        "startY": 37.5547,
        "endX": 126.9780,
        "endY": 37.5665,
        "count": 1,
        "lang": 0,
        "format": "json",
    }
    assert kwargs["headers"]["appKey"] == "test-key"
    assert kwargs["timeout"] == 2.5


def test_describe_route_success(service, session, origin, destination, tmap_response):
    session.post.return_value = _response(payload=tmap_response)

    report = service.describe_route(origin, destination)

    assert report.startswith("경로 요약: 도보 → 146\n")
    assert "[2] BUS(146) - 5000m, 약 15분" in report


def test_describe_route_not_found(service, session, origin, destination):
    session.post.return_value = _response(payload={"metaData": {"plan": {"itineraries": []}}})

    assert service.describe_route(origin, destination) == "경로를 찾을 수 없습니다."


def test_describe_route_network_error(service, session, origin, destination):
    session.post.side_effect = requests.ConnectionError("timeout")

    report = service.describe_route(origin, destination)

    assert report == "대중교통 경로 조회 실패: timeout"
    assert len(report.splitlines()) == 1


def test_describe_route_http_error(service, session, origin, destination):
    session.post.return_value = _response(
        status_code=403,
        payload={"error": {"id": "403", "code": "INVALID_API_KEY", "message": "Forbidden"}},
    )

    report = service.describe_route(origin, destination)

    assert report.startswith("대중교통 경로 조회 실패: ")
    assert "403" in report
    assert "Forbidden" in report


def test_describe_route_invalid_json(service, session, origin, destination):
    session.post.return_value = _response(json_error=ValueError("Expecting value"))

    report = service.describe_route(origin, destination)

    assert report.startswith("대중교통 경로 조회 실패: ")
    assert "\n" not in report


def test_fetch_routes_raises_typed_errors(service, session, origin, destination):
    session.post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(UpstreamNetworkError):
        service.fetch_routes(origin, destination)

    session.post.side_effect = None
    session.post.return_value = _response(status_code=500, payload="boom")
    with pytest.raises(UpstreamAPIError):
        service.fetch_routes(origin, destination)

    session.post.return_value = _response(payload=["not", "an", "object"])
    with pytest.raises(UpstreamDataError):
        service.fetch_routes(origin, destination)


def test_describe_route_huge_numbers(service, session, origin, destination):
    session.post.return_value = _response(
        payload={"metaData": {"plan": {"itineraries": [
            {"totalDistance": 1e30, "totalTime": 1e30, "legs": [{"mode": "BUS", "distance": 1e30}]},
        ]}}}
    )

    report = service.describe_route(origin, destination)

    assert report.startswith("경로 요약: BUS\n")
    assert f"총 거리: {meters_to_km_text(int(1e30))}km" in report.split("\n")


def test_owned_session_is_closed(transit_config, origin, destination, tmap_response):
    with patch("mcp_tools_transit.services.transit.requests.Session") as mock_session_cls:
        mock_session_cls.return_value.post.return_value = _response(payload=tmap_response)

        with TransitRouteService(transit_config) as service:
            service.describe_route(origin, destination)

    mock_session_cls.return_value.close.assert_called_once()


def test_injected_session_is_left_open(transit_config, session):
    with TransitRouteService(transit_config, session=session):
        pass

    session.close.assert_not_called()
