import math

import numpy as np
import pytest

from restaurant_locator.geo.distance import (
    EARTH_RADIUS_KM,
    distance_km,
    distances_km,
    format_distance,
    haversine,
)
from restaurant_locator.restaurants.models import Coordinate

SAN_FRANCISCO = (37.7749, -122.4194)
LOS_ANGELES = (34.0522, -118.2437)

SAMPLE_POINTS = [
    (29.7604, -95.3698),
    (37.7749, -122.4194),
    (-33.8688, 151.2093),
    (64.1466, -21.9426),
    (0.0, 0.0),
    (89.9, 45.0),
]


# ── distance_km ──────────────────────────────────────────────────────────


def test_san_francisco_to_los_angeles():
    distance = distance_km(*SAN_FRANCISCO, *LOS_ANGELES)
    assert 550 < distance < 570


def test_same_point_is_exactly_zero():
    for lat, lon in SAMPLE_POINTS:
        assert distance_km(lat, lon, lat, lon) == 0


def test_distance_is_symmetric():
    for a in SAMPLE_POINTS:
        for b in SAMPLE_POINTS:
            assert distance_km(*a, *b) == pytest.approx(distance_km(*b, *a))


def test_distance_across_antimeridian():
    # One degree of longitude on the equator, crossing 180°
    distance = distance_km(0.0, 179.5, 0.0, -179.5)
    assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-9)


def test_pole_to_pole_is_half_circumference():
    assert distance_km(90.0, 0.0, -90.0, 0.0) == pytest.approx(EARTH_RADIUS_KM * math.pi)


def test_out_of_range_coordinates_are_not_rejected():
    distance = distance_km(120.0, 400.0, -95.0, -200.0)
    assert math.isfinite(distance)
    assert distance >= 0


def test_non_finite_input_propagates():
    assert math.isnan(distance_km(float("nan"), 0.0, 10.0, 10.0))
    assert math.isnan(distance_km(0.0, float("inf"), 10.0, 10.0))


def test_distance_returns_builtin_float():
    assert type(distance_km(*SAN_FRANCISCO, *LOS_ANGELES)) is float


def test_haversine_matches_flat_entry_point():
    a = Coordinate(latitude=SAN_FRANCISCO[0], longitude=SAN_FRANCISCO[1])
    b = Coordinate(latitude=LOS_ANGELES[0], longitude=LOS_ANGELES[1])
    assert haversine(a, b) == distance_km(*SAN_FRANCISCO, *LOS_ANGELES)


def test_vectorized_distances_match_scalar():
    origin = Coordinate(latitude=29.7604, longitude=-95.3698)
    lats = [p[0] for p in SAMPLE_POINTS]
    lons = [p[1] for p in SAMPLE_POINTS]

    result = distances_km(origin, lats, lons)

    assert isinstance(result, np.ndarray)
    assert result.shape == (len(SAMPLE_POINTS),)
    for value, (lat, lon) in zip(result, SAMPLE_POINTS):
        assert value == pytest.approx(distance_km(29.7604, -95.3698, lat, lon))


# ── format_distance ──────────────────────────────────────────────────────


def test_format_under_one_km_in_meters():
    assert format_distance(0.5) == "500m"
    assert format_distance(0.999) == "999m"
    assert format_distance(0.0424) == "42m"


def test_format_zero():
    assert format_distance(0) == "0m"


def test_format_meters_round_half_up():
    assert format_distance(0.0125) == "13m"


def test_format_one_km_and_over():
    assert format_distance(1) == "1.0 km"
    assert format_distance(5.5) == "5.5 km"
    assert format_distance(12.34) == "12.3 km"


def test_format_km_round_half_up():
    assert format_distance(1.25) == "1.3 km"
    assert format_distance(3.75) == "3.8 km"
    assert format_distance(1.04) == "1.0 km"


def test_format_non_finite():
    assert format_distance(float("inf")) == "inf km"
    assert format_distance(float("nan")) == "nan km"
