"""Dashboard statistics, the recent-activity feed and the admin listing."""

from __future__ import annotations

from typing import Iterable

from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.entities.issue_stats import IssueStats
from civic_routing.domain.value_objects.enums import IssueStatus

DEFAULT_PAGE_SIZE = 20


def summarize_issues(issues: Iterable[Issue]) -> IssueStats:
    total = resolved = in_progress = 0
    for issue in issues:
        total += 1
        if issue.status == IssueStatus.RESOLVED:
            resolved += 1
        elif issue.status == IssueStatus.IN_PROGRESS:
            in_progress += 1
    return IssueStats(
        total_issues=total,
        resolved_issues=resolved,
        in_progress_issues=in_progress,
    )


def select_page(
    issues: Iterable[Issue],
    limit: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
) -> list[Issue]:
    """One page of issues, newest first.

    A non-positive ``limit`` gives an empty page; a negative ``offset`` is
    read as 0.
    """
    if limit <= 0:
        return []
    start = max(offset, 0)
    return sorted(issues, key=lambda i: i.created_at, reverse=True)[start:start + limit]


def select_recent(issues: Iterable[Issue], limit: int = 10) -> list[Issue]:
    """Newest issues first, at most ``limit`` of them."""
    return select_page(issues, limit=limit)
