"""Tests for domain entities."""

from datetime import datetime, timezone

from civic_routing.domain.entities.allocation import AllocationResult
from civic_routing.domain.entities.department import Department
from civic_routing.domain.entities.staff_task import StaffTask
from civic_routing.domain.value_objects.enums import (
    AllocationStrategy,
    IssueStatus,
    StaffTaskStatus,
)
from civic_routing.domain.value_objects.geo_point import GeoPoint
from tests.factories import make_issue


def test_department_location():
    d = Department(id=1, name="Water", latitude=12.5, longitude=77.25)
    assert d.location == GeoPoint(latitude=12.5, longitude=77.25)


def test_issue_location_and_resolved():
    issue = make_issue(status=IssueStatus.RESOLVED, latitude=1.0, longitude=2.0)
    assert issue.location == GeoPoint(latitude=1.0, longitude=2.0)
    assert issue.is_resolved()
    assert not make_issue().is_resolved()


def test_allocation_distance_display():
    result = AllocationResult(
        department_id=2, strategy=AllocationStrategy.NEAREST,
        nearest_candidate=Department(id=2, name="Water", latitude=0, longitude=0),
        distance_km=3.14159,
    )
    assert result.distance_display == "3.14 km"
    assert result.reason == "Nearest department: Water (3.14 km)"


def test_allocation_explicit_has_no_distance():
    result = AllocationResult(department_id=7, strategy=AllocationStrategy.EXPLICIT)
    assert result.distance_display is None
    assert result.nearest_candidate is None
    assert result.reason == "Explicit department 7"


def test_allocation_keywords_reason():
    result = AllocationResult(department_id=4, strategy=AllocationStrategy.KEYWORDS)
    assert "department 4" in result.reason


def test_staff_task_distance_display():
    task = StaffTask(
        id="x", title="Issue", type="issue", description="d", address=None,
        status=StaffTaskStatus.VALIDATION, raw_status="REPORTED",
        department_name=None, citizen_name=None, citizen_phone=None,
        latitude=0.0, longitude=0.0,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        distance_km=2.345,
    )
    assert task.distance_display == "2.3 km"


def test_staff_task_zero_distance_is_shown():
    task = StaffTask(
        id="x", title="Issue", type="issue", description="d", address=None,
        status=StaffTaskStatus.VALIDATION, raw_status="REPORTED",
        department_name=None, citizen_name=None, citizen_phone=None,
        latitude=0.0, longitude=0.0,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        distance_km=0.0,
    )
    assert task.distance_display == "0.0 km"
