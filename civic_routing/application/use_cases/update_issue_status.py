"""UpdateIssueStatusUseCase — apply a validated status change."""

from __future__ import annotations

import logging

from civic_routing.application.ports.issue_repo import IssueRepository
from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.errors import IssueNotFound
from civic_routing.domain.policies.status_machine import is_reopening, transition
from civic_routing.domain.value_objects.enums import IssueStatus

logger = logging.getLogger(__name__)


class UpdateIssueStatusUseCase:
    def __init__(self, issue_repo: IssueRepository):
        self._issues = issue_repo

    async def execute(self, issue_id: str, status: IssueStatus | str) -> Issue:
        """Validate ``status`` and store it.

        Raises:
            InvalidStatus: ``status`` is not one of the four canonical values.
            IssueNotFound: no issue with ``issue_id``.
        """
        issue = await self._issues.get_by_id(issue_id)
        if issue is None:
            raise IssueNotFound(issue_id)

        target = transition(issue.status, status)
        if is_reopening(issue.status, target):
            # Allowed, but worth seeing in the logs until product confirms
            logger.warning(
                "Issue %s moved backwards: %s → %s",
                issue_id, issue.status.value, target.value,
            )

        updated = await self._issues.update_status(issue_id, target)
        if updated is None:
            raise IssueNotFound(issue_id)

        logger.info("Issue %s status → %s", issue_id, target.value)
        return updated
