import pytest

from mcp_tools_transit.utils.units import meters_to_km_text, round_half_up, seconds_to_minutes


@pytest.mark.parametrize("seconds, minutes", [(0, 0), (29, 0), (30, 1), (90, 2), (125, 2), (150, 3), (1140, 19)])
def test_seconds_to_minutes(seconds, minutes):
    assert seconds_to_minutes(seconds) == minutes


@pytest.mark.parametrize("meters, text", [(0, "0.0"), (1050, "1.1"), (1250, "1.3"), (1049, "1.0"), (5300, "5.3"), (12000, "12.0")])
def test_meters_to_km_text(meters, text):
    assert meters_to_km_text(meters) == text


@pytest.mark.parametrize("value, expected", [(17.5, 18), (16.4, 16), (-2.5, -3), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_huge_values_do_not_overflow():
    assert seconds_to_minutes(10**30) == (10**30 + 30) // 60
    assert meters_to_km_text(10**30) == f"{10**27}.0"


@pytest.mark.parametrize("value", [None, "17.5", True, float("nan"), float("inf")])
def test_round_half_up_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        round_half_up(value)


def test_round_half_up_large_float():
    assert round_half_up(1e30) == 10**30
