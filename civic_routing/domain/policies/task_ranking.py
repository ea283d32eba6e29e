"""StaffTaskRanking — order a department's issues for field staff."""

from __future__ import annotations

from typing import Iterable

from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.entities.staff_task import StaffTask
from civic_routing.domain.value_objects.enums import IssueStatus, StaffTaskStatus
from civic_routing.domain.value_objects.geo_point import distance_km

# Lower sorts first; resolved work sinks to the bottom
STATUS_PRIORITY: dict[IssueStatus, int] = {
    IssueStatus.ASSIGNED: 1,
    IssueStatus.IN_PROGRESS: 2,
    IssueStatus.REPORTED: 3,
    IssueStatus.RESOLVED: 4,
}

STAFF_LABELS: dict[IssueStatus, StaffTaskStatus] = {
    IssueStatus.REPORTED: StaffTaskStatus.VALIDATION,
    IssueStatus.ASSIGNED: StaffTaskStatus.ASSIGNED,
    IssueStatus.IN_PROGRESS: StaffTaskStatus.IN_PROGRESS,
    IssueStatus.RESOLVED: StaffTaskStatus.COMPLETED,
}


def _coerce_status(raw: object) -> IssueStatus | None:
    if isinstance(raw, IssueStatus):
        return raw
    if isinstance(raw, str):
        try:
            return IssueStatus(raw.strip().upper())
        except ValueError:
            return None
    return None


def status_priority(raw: object) -> int:
    """Sort priority; unknown statuses rank alongside REPORTED."""
    status = _coerce_status(raw)
    return STATUS_PRIORITY[status if status is not None else IssueStatus.REPORTED]


def staff_label(raw: object) -> StaffTaskStatus:
    status = _coerce_status(raw)
    return STAFF_LABELS[status] if status is not None else StaffTaskStatus.VALIDATION


def _to_task(issue: Issue, distance: float | None) -> StaffTask:
    raw = issue.status.value if isinstance(issue.status, IssueStatus) else issue.status
    return StaffTask(
        id=issue.id,
        title=issue.issue_type or "Issue",
        type=issue.issue_type.lower() if issue.issue_type else "issue",
        description=issue.description,
        address=issue.address,
        status=staff_label(issue.status),
        raw_status=raw,
        department_name=issue.department_name,
        citizen_name=issue.citizen_name,
        citizen_phone=issue.citizen_phone,
        latitude=issue.latitude,
        longitude=issue.longitude,
        created_at=issue.created_at,
        distance_km=distance,
        image_count=issue.image_count or 0,
    )


def rank_tasks(
    issues: Iterable[Issue],
    staff_lat: float | None = None,
    staff_lon: float | None = None,
) -> list[StaffTask]:
    """Pure function: rank issues by status priority, newest first within a status.

    Distance to the staff member is attached only when both coordinates are
    given. It is for display and never changes the order.
    """
    with_location = staff_lat is not None and staff_lon is not None

    # Two stable sorts: recency first, then priority on top of it
    ordered = sorted(issues, key=lambda i: i.created_at, reverse=True)
    ordered.sort(key=lambda i: status_priority(i.status))

    tasks = []
    for issue in ordered:
        distance = (
            distance_km(staff_lat, staff_lon, issue.latitude, issue.longitude)
            if with_location
            else None
        )
        tasks.append(_to_task(issue, distance))
    return tasks
