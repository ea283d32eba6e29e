"""In-memory repository implementations.

Used by the command-line tool and by tests. Departments keep insertion order,
which is the order allocation tie-breaking sees.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import timezone
from typing import Iterable

from civic_routing.application.ports.attendance_repo import AttendanceRepository
from civic_routing.application.ports.department_repo import DepartmentRepository
from civic_routing.application.ports.issue_repo import IssueRepository
from civic_routing.domain.entities.attendance import AttendanceRecord
from civic_routing.domain.entities.department import Department
from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.value_objects.enums import IssueStatus


class InMemoryDepartmentRepository(DepartmentRepository):
    def __init__(self, departments: Iterable[Department] = ()):
        self._departments = list(departments)

    async def get_all(self) -> list[Department]:
        return list(self._departments)

    async def get_by_id(self, department_id: int) -> Department | None:
        return next((d for d in self._departments if d.id == department_id), None)


def _as_utc(issue: Issue) -> Issue:
    """Read a naive ``created_at`` as UTC."""
    if issue.created_at.tzinfo is None:
        return replace(issue, created_at=issue.created_at.replace(tzinfo=timezone.utc))
    return issue


class InMemoryIssueRepository(IssueRepository):
    def __init__(self, issues: Iterable[Issue] = ()):
        self.issues: dict[str, Issue] = {}
        for issue in issues:
            self._store(issue)

    def _store(self, issue: Issue) -> Issue:
        if issue.id is None:
            issue.id = str(uuid.uuid4())
        issue = _as_utc(issue)
        self.issues[issue.id] = issue
        return issue

    async def save(self, issue: Issue) -> Issue:
        return self._store(issue)

    async def get_by_id(self, issue_id: str) -> Issue | None:
        return self.issues.get(issue_id)

    async def get_by_department(self, department_id: int) -> list[Issue]:
        return [i for i in self.issues.values() if i.department_id == department_id]

    async def get_by_citizen(self, citizen_id: int) -> list[Issue]:
        return [i for i in self.issues.values() if i.citizen_id == citizen_id]

    async def get_all(self) -> list[Issue]:
        return list(self.issues.values())

    async def update_status(self, issue_id: str, status: IssueStatus) -> Issue | None:
        issue = self.issues.get(issue_id)
        if issue is None:
            return None
        updated = replace(issue, status=status)
        self.issues[issue_id] = updated
        return updated


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self.records: list[AttendanceRecord] = []

    async def append(self, record: AttendanceRecord) -> AttendanceRecord:
        stored = replace(record, id=len(self.records) + 1)
        self.records.append(stored)
        return stored

    async def get_by_issue(self, issue_id: str) -> list[AttendanceRecord]:
        return [r for r in self.records if r.issue_id == issue_id]
