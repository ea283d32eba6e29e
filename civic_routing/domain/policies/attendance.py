"""AttendanceVerification — how far a staff check-in was from the issue site."""

from __future__ import annotations

from datetime import datetime

from civic_routing.domain.entities.attendance import AttendanceRecord
from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.errors import InvalidAttendancePayload
from civic_routing.domain.value_objects.geo_point import GeoPoint, is_finite_coordinate


def attendance_distance_meters(
    issue_location: GeoPoint,
    staff_lat: float | None,
    staff_lon: float | None,
) -> float:
    """Distance from the staff position to the issue, in metres."""
    if not is_finite_coordinate(staff_lat) or not is_finite_coordinate(staff_lon):
        raise InvalidAttendancePayload()
    staff = GeoPoint(latitude=float(staff_lat), longitude=float(staff_lon))
    return staff.haversine_km(issue_location) * 1000


def build_attendance_record(
    issue: Issue,
    staff_id: int,
    staff_lat: float,
    staff_lon: float,
    timestamp: datetime,
) -> AttendanceRecord:
    return AttendanceRecord(
        id=None,
        issue_id=issue.id,
        staff_id=staff_id,
        staff_latitude=staff_lat,
        staff_longitude=staff_lon,
        distance_meters=attendance_distance_meters(issue.location, staff_lat, staff_lon),
        timestamp=timestamp,
    )
