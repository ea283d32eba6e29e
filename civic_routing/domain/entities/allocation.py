"""Allocation result — which department an issue was routed to, and why."""

from __future__ import annotations

from dataclasses import dataclass

from civic_routing.domain.entities.department import Department
from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.value_objects.enums import AllocationStrategy


@dataclass(frozen=True)
class AllocationResult:
    department_id: int
    strategy: AllocationStrategy
    nearest_candidate: Department | None = None
    distance_km: float | None = None  # only set for NEAREST

    @property
    def distance_display(self) -> str | None:
        if self.distance_km is None:
            return None
        return f"{self.distance_km:.2f} km"

    @property
    def reason(self) -> str:
        if self.strategy == AllocationStrategy.EXPLICIT:
            return f"Explicit department {self.department_id}"
        if self.strategy == AllocationStrategy.KEYWORDS:
            return f"Keyword match → department {self.department_id}"
        name = self.nearest_candidate.name if self.nearest_candidate else self.department_id
        return f"Nearest department: {name} ({self.distance_display})"


@dataclass
class CreatedIssue:
    """A persisted issue together with its allocation provenance."""

    issue: Issue
    allocation: AllocationResult
