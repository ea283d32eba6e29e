"""Issue entity — a problem reported by a citizen at a location."""

from dataclasses import dataclass
from datetime import datetime

from civic_routing.domain.value_objects.enums import IssueStatus
from civic_routing.domain.value_objects.geo_point import GeoPoint


@dataclass
class IssueIntake:
    """Raw creation data, before validation and allocation."""

    citizen_id: int
    description: str | None
    latitude: float | None
    longitude: float | None
    issue_type: str | None = None
    address: str | None = None


@dataclass
class Issue:
    id: str | None
    citizen_id: int
    department_id: int | None
    issue_type: str | None
    description: str
    latitude: float
    longitude: float
    address: str | None
    status: IssueStatus
    created_at: datetime

    # Joined fields, filled in by the persistence collaborator for list views
    department_name: str | None = None
    citizen_name: str | None = None
    citizen_phone: str | None = None
    image_count: int = 0

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)

    def is_resolved(self) -> bool:
        return self.status == IssueStatus.RESOLVED
