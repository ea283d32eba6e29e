"""IssueStatusMachine — validate requested status changes.

Any of the four statuses may be set from any state, including reopening a
resolved issue. ``is_reopening`` lets callers notice backward moves without
blocking them.
"""

from __future__ import annotations

from civic_routing.domain.errors import InvalidStatus
from civic_routing.domain.value_objects.enums import IssueStatus

STATUS_ORDER: dict[IssueStatus, int] = {
    IssueStatus.REPORTED: 0,
    IssueStatus.ASSIGNED: 1,
    IssueStatus.IN_PROGRESS: 2,
    IssueStatus.RESOLVED: 3,
}


def parse_status(value: IssueStatus | str | None) -> IssueStatus:
    """Return the canonical status for ``value`` or raise InvalidStatus."""
    if isinstance(value, IssueStatus):
        return value
    if isinstance(value, str):
        try:
            return IssueStatus(value)
        except ValueError:
            pass
    raise InvalidStatus(value)


def transition(current: IssueStatus, target: IssueStatus | str | None) -> IssueStatus:
    """Validate-then-return: the new status if ``target`` is canonical."""
    return parse_status(target)


def is_reopening(current: IssueStatus, target: IssueStatus) -> bool:
    return STATUS_ORDER[target] < STATUS_ORDER[current]
