"""Tests for GetStaffTasksUseCase."""

import pytest

from civic_routing.adapters.memory.repositories import InMemoryIssueRepository
from civic_routing.application.use_cases.staff_tasks import GetStaffTasksUseCase
from civic_routing.domain.value_objects.enums import IssueStatus, StaffTaskStatus
from tests.factories import make_issue


def _repo():
    return InMemoryIssueRepository([
        make_issue("done", IssueStatus.RESOLVED, minutes=50, department_id=4),
        make_issue("new", IssueStatus.REPORTED, minutes=40, department_id=4),
        make_issue("mine", IssueStatus.ASSIGNED, minutes=0, department_id=4),
        make_issue("other-dept", IssueStatus.ASSIGNED, minutes=60, department_id=1),
    ])


@pytest.mark.asyncio
async def test_only_department_issues_ranked():
    tasks = await GetStaffTasksUseCase(_repo()).execute(4)
    assert [t.id for t in tasks] == ["mine", "new", "done"]
    assert [t.status for t in tasks] == [
        StaffTaskStatus.ASSIGNED, StaffTaskStatus.VALIDATION, StaffTaskStatus.COMPLETED,
    ]
    assert all(t.distance_km is None for t in tasks)


@pytest.mark.asyncio
async def test_distance_when_staff_location_given():
    tasks = await GetStaffTasksUseCase(_repo()).execute(4, staff_lat=12.97, staff_lon=77.59)
    assert all(t.distance_km == 0.0 for t in tasks)


@pytest.mark.asyncio
async def test_unknown_department_is_empty():
    assert await GetStaffTasksUseCase(_repo()).execute(99) == []


@pytest.mark.asyncio
async def test_mixed_naive_and_aware_timestamps_rank():
    older_naive = make_issue("x").created_at.replace(tzinfo=None)
    repo = InMemoryIssueRepository([
        make_issue("naive", IssueStatus.ASSIGNED, department_id=4, created_at=older_naive),
        make_issue("aware", IssueStatus.ASSIGNED, minutes=5, department_id=4),
    ])
    tasks = await GetStaffTasksUseCase(repo).execute(4)
    assert [t.id for t in tasks] == ["aware", "naive"]
