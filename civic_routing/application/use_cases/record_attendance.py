"""RecordAttendanceUseCase — log a staff check-in and its distance to the issue."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from civic_routing.application.ports.attendance_repo import AttendanceRepository
from civic_routing.application.ports.issue_repo import IssueRepository
from civic_routing.domain.entities.attendance import AttendanceRecord
from civic_routing.domain.errors import InvalidAttendancePayload, IssueNotFound
from civic_routing.domain.policies.attendance import build_attendance_record
from civic_routing.domain.value_objects.geo_point import is_finite_coordinate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordAttendanceUseCase:
    def __init__(
        self,
        issue_repo: IssueRepository,
        attendance_repo: AttendanceRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._issues = issue_repo
        self._attendance = attendance_repo
        self._clock = clock

    async def execute(
        self,
        issue_id: str | None,
        staff_id: int | None,
        staff_lat: float | None,
        staff_lon: float | None,
    ) -> AttendanceRecord:
        """Record where a staff member checked in for an issue.

        Raises:
            InvalidAttendancePayload: missing id or non-finite coordinate.
            IssueNotFound: the issue does not exist.
        """
        if (
            not issue_id
            or not staff_id
            or not is_finite_coordinate(staff_lat)
            or not is_finite_coordinate(staff_lon)
        ):
            raise InvalidAttendancePayload()

        issue = await self._issues.get_by_id(issue_id)
        if issue is None:
            raise IssueNotFound(issue_id)

        record = build_attendance_record(issue, staff_id, staff_lat, staff_lon, self._clock())
        record = await self._attendance.append(record)

        logger.info(
            "Staff %s checked in at issue %s, %.0f m from the site",
            staff_id, issue_id, record.distance_meters,
        )
        return record
