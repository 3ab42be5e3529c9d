import copy

import pytest

from mcp_tools_transit.core.config import TransitApiConfig
from mcp_tools_transit.core.schemas import Coordinates


WALK_LEG = {
    "mode": "WALK",
    "distance": 300,
    "sectionTime": 240,
    "start": {"name": "A", "lon": 126.97, "lat": 37.55},
    "end": {"name": "B", "lon": 126.98, "lat": 37.56},
    "steps": [
        {"streetName": "", "distance": 120, "description": "세종대로 을 따라 120m 이동"},
        {"streetName": "", "distance": 180, "description": "B 정류장 도착"},
    ],
}

BUS_LEG = {
    "mode": "BUS",
    "route": "146",
    "distance": 5000,
    "sectionTime": 900,
    "start": {"name": "B"},
    "end": {"name": "C"},
    "Lane": [{"route": "간선:146", "type": 11, "service": 1}],
    "passStopList": {
        "stationList": [
            {"index": 0, "stationName": "C1"},
            {"index": 1, "stationName": "C2"},
        ]
    },
}


@pytest.fixture
def walk_leg():
    return copy.deepcopy(WALK_LEG)


@pytest.fixture
def bus_leg():
    return copy.deepcopy(BUS_LEG)


@pytest.fixture
def tmap_response(walk_leg, bus_leg):
    """Trimmed Tmap transit response with one WALK and one BUS leg."""
    return {
        "metaData": {
            "requestParameters": {"reqDttm": "20251019101500"},
            "plan": {
                "itineraries": [
                    {
                        "totalTime": 1140,
                        "transferCount": 1,
                        "totalDistance": 5300,
                        "totalWalkDistance": 300,
                        "totalWalkTime": 240,
                        "pathType": 2,
                        "fare": {"regular": {"totalFare": 1500, "currency": {"symbol": "￦"}}},
                        "legs": [walk_leg, bus_leg],
                    }
                ]
            },
        }
    }


@pytest.fixture
def transit_config():
    return TransitApiConfig(endpoint_url="https://transit.example/routes", api_key="test-key", timeout_ms=2500)


@pytest.fixture
def origin():
    return Coordinates(lat=37.5547, lon=126.9707)


@pytest.fixture
def destination():
    return Coordinates(lat=37.5665, lon=126.9780)
