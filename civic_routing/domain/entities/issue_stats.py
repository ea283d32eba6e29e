"""Dashboard counters over a set of issues."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IssueStats:
    total_issues: int = 0
    resolved_issues: int = 0
    in_progress_issues: int = 0
