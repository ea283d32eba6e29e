"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class IssueStatus(str, Enum):
    REPORTED = "REPORTED"
    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"


class AllocationStrategy(str, Enum):
    EXPLICIT = "explicit"
    KEYWORDS = "keywords"
    NEAREST = "nearest"


class StaffTaskStatus(str, Enum):
    """Status labels shown to field staff."""

    VALIDATION = "validation"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
