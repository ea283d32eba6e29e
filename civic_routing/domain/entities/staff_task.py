"""StaffTask — one row of a department's ranked task list."""

from dataclasses import dataclass
from datetime import datetime

from civic_routing.domain.value_objects.enums import StaffTaskStatus


@dataclass(frozen=True)
class StaffTask:
    id: str | None
    title: str
    type: str
    description: str
    address: str | None
    status: StaffTaskStatus
    raw_status: str | None
    department_name: str | None
    citizen_name: str | None
    citizen_phone: str | None
    latitude: float
    longitude: float
    created_at: datetime
    distance_km: float | None = None
    image_count: int = 0

    @property
    def distance_display(self) -> str:
        if self.distance_km is None:
            return "N/A"
        return f"{self.distance_km:.1f} km"
