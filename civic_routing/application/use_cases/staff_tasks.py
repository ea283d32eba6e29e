"""GetStaffTasksUseCase — a department's issues, ranked for field staff."""

from __future__ import annotations

import logging

from civic_routing.application.ports.issue_repo import IssueRepository
from civic_routing.domain.entities.staff_task import StaffTask
from civic_routing.domain.policies.task_ranking import rank_tasks

logger = logging.getLogger(__name__)


class GetStaffTasksUseCase:
    def __init__(self, issue_repo: IssueRepository):
        self._issues = issue_repo

    async def execute(
        self,
        department_id: int,
        staff_lat: float | None = None,
        staff_lon: float | None = None,
    ) -> list[StaffTask]:
        issues = await self._issues.get_by_department(department_id)
        tasks = rank_tasks(issues, staff_lat, staff_lon)
        logger.info(
            "Department %d: %d tasks ranked (staff location %s)",
            department_id, len(tasks),
            "given" if staff_lat is not None and staff_lon is not None else "unknown",
        )
        return tasks
