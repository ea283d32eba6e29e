"""Typed failures raised by the routing engine.

Every error carries ``client_error`` so the orchestrating layer can decide how
to surface it: caller input problems are client errors, missing seed data is
a server error.
"""

from __future__ import annotations


class RoutingError(Exception):
    """Base class for all engine errors."""

    client_error: bool = True


class InvalidIssueData(RoutingError, ValueError):
    """Issue intake data failed validation (description or coordinates)."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class NoDepartmentsAvailable(RoutingError, LookupError):
    """The department directory is empty; nothing can be allocated."""

    client_error = False

    def __init__(self, message: str = "No departments available"):
        super().__init__(message)


class InvalidStatus(RoutingError, ValueError):
    """Requested status is not one of the canonical issue statuses."""

    def __init__(self, value: object):
        super().__init__(f"Invalid status: {value!r}")
        self.value = value


class InvalidAttendancePayload(RoutingError, ValueError):
    """Attendance check-in is missing an id or carries a non-finite coordinate."""

    def __init__(self, message: str = "Invalid attendance payload"):
        super().__init__(message)


class IssueNotFound(RoutingError, LookupError):
    def __init__(self, issue_id: object):
        super().__init__(f"Issue not found: {issue_id}")
        self.issue_id = issue_id
