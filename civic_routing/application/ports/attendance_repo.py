"""Port interface for the append-only attendance log."""

from abc import ABC, abstractmethod

from civic_routing.domain.entities.attendance import AttendanceRecord


class AttendanceRepository(ABC):
    @abstractmethod
    async def append(self, record: AttendanceRecord) -> AttendanceRecord:
        """Store a new record and return it with its id set. Records are never updated."""
        ...

    @abstractmethod
    async def get_by_issue(self, issue_id: str) -> list[AttendanceRecord]:
        ...
