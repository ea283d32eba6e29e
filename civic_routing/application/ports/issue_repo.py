"""Port interface for issue persistence."""

from abc import ABC, abstractmethod

from civic_routing.domain.entities.issue import Issue
from civic_routing.domain.value_objects.enums import IssueStatus


class IssueRepository(ABC):
    """Issue store.

    Implementations return timezone-aware ``created_at`` values; naive
    timestamps from the backing store are read as UTC. Ranking and paging
    compare timestamps across issues and cannot mix the two kinds.
    """

    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        """Persist a new issue and return it with its id set."""
        ...

    @abstractmethod
    async def get_by_id(self, issue_id: str) -> Issue | None:
        ...

    @abstractmethod
    async def get_by_department(self, department_id: int) -> list[Issue]:
        ...

    @abstractmethod
    async def get_by_citizen(self, citizen_id: int) -> list[Issue]:
        ...

    @abstractmethod
    async def get_all(self) -> list[Issue]:
        ...

    @abstractmethod
    async def update_status(self, issue_id: str, status: IssueStatus) -> Issue | None:
        """Set the status and return the updated issue, or None if it does not exist."""
        ...
