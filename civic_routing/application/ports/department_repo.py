"""Port interface for the department directory."""

from abc import ABC, abstractmethod

from civic_routing.domain.entities.department import Department


class DepartmentRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[Department]:
        """Return every department in a stable order.

        Order decides ties in keyword and nearest-department allocation.
        """
        ...

    @abstractmethod
    async def get_by_id(self, department_id: int) -> Department | None:
        ...
