"""CreateIssueUseCase — validate, allocate a department, persist."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from civic_routing.application.ports.department_repo import DepartmentRepository
from civic_routing.application.ports.issue_repo import IssueRepository
from civic_routing.domain.entities.allocation import CreatedIssue
from civic_routing.domain.entities.issue import Issue, IssueIntake
from civic_routing.domain.errors import RoutingError
from civic_routing.domain.policies.department_allocation import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    allocate_department,
    validate_intake,
)
from civic_routing.domain.policies.keyword_rules import KeywordRuleSet
from civic_routing.domain.value_objects.enums import IssueStatus

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CreateIssueUseCase:
    """Orchestrates issue intake: allocation first, then persistence."""

    def __init__(
        self,
        department_repo: DepartmentRepository,
        issue_repo: IssueRepository,
        rules: KeywordRuleSet,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._departments = department_repo
        self._issues = issue_repo
        self._rules = rules
        self._max_description_length = max_description_length
        self._clock = clock

    async def execute(
        self, intake: IssueIntake, explicit_department_id: int | None = None
    ) -> CreatedIssue:
        """Create an issue and route it to a department.

        Pipeline:
        1. Validate intake (fails before any lookup)
        2. Fetch the department directory unless an explicit id was given
        3. Allocate (explicit → keywords → nearest)
        4. Persist with status REPORTED

        Raises:
            InvalidIssueData: bad description or coordinates.
            NoDepartmentsAvailable: directory empty and no keyword/explicit match.
        """
        try:
            validate_intake(intake, self._max_description_length)

            departments = []
            if explicit_department_id is None:
                departments = await self._departments.get_all()
                if not departments:
                    logger.warning("Department directory is empty")

            allocation = allocate_department(
                intake,
                explicit_department_id,
                departments,
                self._rules,
                self._max_description_length,
            )
        except RoutingError as e:
            logger.warning("Issue intake from citizen %s rejected: %s", intake.citizen_id, e)
            raise

        logger.info(
            "Citizen %s issue → department %d (strategy=%s, distance=%s)",
            intake.citizen_id, allocation.department_id,
            allocation.strategy.value, allocation.distance_display,
        )

        issue = Issue(
            id=None,
            citizen_id=intake.citizen_id,
            department_id=allocation.department_id,
            issue_type=intake.issue_type or None,
            description=intake.description,
            latitude=float(intake.latitude),
            longitude=float(intake.longitude),
            address=intake.address or None,
            status=IssueStatus.REPORTED,
            created_at=self._clock(),
        )
        issue = await self._issues.save(issue)
        logger.info("Issue %s created (%s)", issue.id, allocation.reason)

        return CreatedIssue(issue=issue, allocation=allocation)
