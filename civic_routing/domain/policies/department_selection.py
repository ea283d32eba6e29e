"""DepartmentSelectionPolicy — pick the geographically nearest department."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from civic_routing.domain.entities.department import Department
from civic_routing.domain.errors import NoDepartmentsAvailable
from civic_routing.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class DepartmentSelection:
    """Result of the nearest-department policy."""

    department: Department
    distance_km: float
    reason: str


def select_nearest_department(
    issue_location: GeoPoint,
    departments: Sequence[Department],
) -> DepartmentSelection:
    """Select the department closest to the issue.

    Args:
        issue_location: where the issue was reported.
        departments: department directory in a stable order.

    Returns:
        DepartmentSelection with the nearest department. Equal distances
        resolve to the department listed first.

    Raises:
        NoDepartmentsAvailable: if ``departments`` is empty.
    """
    if not departments:
        raise NoDepartmentsAvailable()

    candidates = [(d, issue_location.haversine_km(d.location)) for d in departments]
    # min() keeps the first of equal keys
    best_dept, best_distance = min(candidates, key=lambda x: x[1])
    return DepartmentSelection(
        department=best_dept,
        distance_km=best_distance,
        reason=f"Nearest department: {best_dept.name} ({best_distance:.1f} km)",
    )
