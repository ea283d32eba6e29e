"""Read-only issue queries: dashboard statistics, activity feeds and the admin listing."""

from __future__ import annotations

from civic_routing.application.ports.issue_repo import IssueRepository
from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.entities.issue_stats import IssueStats
from civic_routing.domain.policies.issue_stats import (
    DEFAULT_PAGE_SIZE,
    select_page,
    select_recent,
    summarize_issues,
)


class GetIssueStatsUseCase:
    def __init__(self, issue_repo: IssueRepository):
        self._issues = issue_repo

    async def execute(self) -> IssueStats:
        return summarize_issues(await self._issues.get_all())


class GetRecentIssuesUseCase:
    def __init__(self, issue_repo: IssueRepository, default_limit: int = 10):
        self._issues = issue_repo
        self._default_limit = default_limit

    async def execute(self, limit: int | None = None) -> list[Issue]:
        return select_recent(
            await self._issues.get_all(),
            self._default_limit if limit is None else limit,
        )


class GetCitizenIssuesUseCase:
    """Issues reported by one citizen, newest first."""

    def __init__(self, issue_repo: IssueRepository):
        self._issues = issue_repo

    async def execute(self, citizen_id: int) -> list[Issue]:
        issues = await self._issues.get_by_citizen(citizen_id)
        return sorted(issues, key=lambda i: i.created_at, reverse=True)


class ListIssuesUseCase:
    """Paged listing of every issue for administrators, newest first."""

    def __init__(self, issue_repo: IssueRepository):
        self._issues = issue_repo

    async def execute(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> list[Issue]:
        return select_page(await self._issues.get_all(), limit=limit, offset=offset)
