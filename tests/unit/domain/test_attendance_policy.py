"""Tests for attendance distance verification."""

import math
from datetime import datetime, timezone

import pytest

from civic_routing.domain.errors import InvalidAttendancePayload
from civic_routing.domain.policies.attendance import (
    attendance_distance_meters,
    build_attendance_record,
)
from civic_routing.domain.value_objects.geo_point import GeoPoint, distance_km
from tests.factories import make_issue


def test_distance_in_meters():
    site = GeoPoint(latitude=12.97, longitude=77.59)
    meters = attendance_distance_meters(site, 12.971, 77.591)
    assert math.isclose(meters, distance_km(12.971, 77.591, 12.97, 77.59) * 1000)
    assert 100 < meters < 200


def test_same_spot_is_zero():
    site = GeoPoint(latitude=12.97, longitude=77.59)
    assert attendance_distance_meters(site, 12.97, 77.59) == 0.0


@pytest.mark.parametrize("lat,lon", [(None, 77.0), (12.0, None), (math.nan, 77.0), (12.0, math.inf), (10**400, 77.0)])
def test_bad_coordinates_rejected(lat, lon):
    with pytest.raises(InvalidAttendancePayload):
        attendance_distance_meters(GeoPoint(latitude=0, longitude=0), lat, lon)


def test_build_record():
    issue = make_issue("issue-9", latitude=12.97, longitude=77.59)
    ts = datetime(2025, 3, 2, 8, 30, tzinfo=timezone.utc)
    record = build_attendance_record(issue, 55, 12.97, 77.60, ts)
    assert record.id is None
    assert record.issue_id == "issue-9"
    assert record.staff_id == 55
    assert record.staff_latitude == 12.97
    assert record.staff_longitude == 77.60
    assert record.timestamp == ts
    assert 1000 < record.distance_meters < 1200


def test_record_is_immutable():
    record = build_attendance_record(
        make_issue(), 1, 12.97, 77.59, datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    with pytest.raises(AttributeError):
        record.distance_meters = 0
