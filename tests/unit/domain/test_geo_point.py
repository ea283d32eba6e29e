"""Tests for GeoPoint value object and distance_km."""

import math

import pytest

from civic_routing.domain.value_objects.geo_point import (
    GeoPoint,
    distance_km,
    is_finite_coordinate,
)


def test_haversine_same_point():
    """Distance from a point to itself should be 0."""
    p = GeoPoint(latitude=12.9716, longitude=77.5946)
    assert p.haversine_km(p) == 0.0


@pytest.mark.parametrize("lat,lon", [(0.0, 0.0), (90.0, 0.0), (-45.5, 179.9), (12.97, 77.59)])
def test_distance_zero_for_identical_points(lat, lon):
    assert distance_km(lat, lon, lat, lon) == 0.0


def test_distance_is_symmetric():
    a = (12.9716, 77.5946)
    b = (28.6139, 77.2090)
    assert math.isclose(distance_km(*a, *b), distance_km(*b, *a), rel_tol=1e-12)


def test_bengaluru_to_delhi():
    """Bengaluru to New Delhi is roughly 1740 km in a straight line."""
    bengaluru = GeoPoint(latitude=12.9716, longitude=77.5946)
    delhi = GeoPoint(latitude=28.6139, longitude=77.2090)
    assert 1700 < bengaluru.haversine_km(delhi) < 1780


def test_one_degree_of_latitude():
    assert math.isclose(distance_km(0, 0, 1, 0), 111.19, abs_tol=0.01)


def test_antipodal_points_do_not_fail():
    """Half the Earth's circumference, no math domain error."""
    d = distance_km(0.0, 0.0, 0.0, 180.0)
    assert math.isclose(d, math.pi * 6371.0, rel_tol=1e-9)
    d = distance_km(45.0, 30.0, -45.0, -150.0)
    assert math.isclose(d, math.pi * 6371.0, rel_tol=1e-9)


def test_geo_point_is_frozen():
    """GeoPoint should be immutable."""
    p = GeoPoint(latitude=12.0, longitude=77.0)
    with pytest.raises(AttributeError):
        p.latitude = 50.0


@pytest.mark.parametrize("value", [0, 12.5, -180.0, 90])
def test_finite_coordinates_accepted(value):
    assert is_finite_coordinate(value)


@pytest.mark.parametrize("value", [None, "12.5", True, float("nan"), float("inf"), -math.inf, 10**400])
def test_non_finite_coordinates_rejected(value):
    assert not is_finite_coordinate(value)
