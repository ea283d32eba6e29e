"""DepartmentAllocationPolicy — explicit override, then keywords, then nearest."""

from __future__ import annotations

from typing import Sequence

from civic_routing.domain.entities.allocation import AllocationResult
from civic_routing.domain.entities.department import Department
from civic_routing.domain.entities.issue import IssueIntake
from civic_routing.domain.errors import InvalidIssueData
from civic_routing.domain.policies.department_selection import select_nearest_department
from civic_routing.domain.policies.keyword_classifier import (
    classify_department_name,
    resolve_department_id,
)
from civic_routing.domain.policies.keyword_rules import KeywordRuleSet
from civic_routing.domain.value_objects.enums import AllocationStrategy
from civic_routing.domain.value_objects.geo_point import GeoPoint, is_finite_coordinate

DEFAULT_MAX_DESCRIPTION_LENGTH = 500


def validate_intake(
    intake: IssueIntake,
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
) -> None:
    """Reject intake data that cannot be allocated.

    Raises:
        InvalidIssueData: naming the first offending field.
    """
    description = intake.description
    if not isinstance(description, str) or not description.strip():
        raise InvalidIssueData("description", "Description is required")
    if len(description) > max_description_length:
        raise InvalidIssueData(
            "description", f"Description max {max_description_length} chars"
        )
    if not is_finite_coordinate(intake.latitude):
        raise InvalidIssueData("latitude", "Latitude is required")
    if not is_finite_coordinate(intake.longitude):
        raise InvalidIssueData("longitude", "Longitude is required")


def allocate_department(
    intake: IssueIntake,
    explicit_department_id: int | None,
    departments: Sequence[Department],
    rules: KeywordRuleSet,
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
) -> AllocationResult:
    """Decide which department a new issue belongs to.

    Policy, first success wins:
      1. explicit_department_id given → used verbatim (caller validated it).
      2. Keyword classifier resolves to a department in ``departments``.
      3. Nearest department to the issue location.

    Raises:
        InvalidIssueData: intake failed validation; nothing was allocated.
        NoDepartmentsAvailable: step 3 reached with an empty directory.
    """
    validate_intake(intake, max_description_length)

    if explicit_department_id is not None:
        return AllocationResult(
            department_id=explicit_department_id,
            strategy=AllocationStrategy.EXPLICIT,
        )

    department_name = classify_department_name(intake.description, intake.issue_type, rules)
    department_id = resolve_department_id(department_name, departments)
    if department_id is not None:
        return AllocationResult(
            department_id=department_id,
            strategy=AllocationStrategy.KEYWORDS,
        )

    selection = select_nearest_department(
        GeoPoint(latitude=float(intake.latitude), longitude=float(intake.longitude)),
        departments,
    )
    return AllocationResult(
        department_id=selection.department.id,
        strategy=AllocationStrategy.NEAREST,
        nearest_candidate=selection.department,
        distance_km=selection.distance_km,
    )
