"""Department entity — a municipal body with a physical location."""

from dataclasses import dataclass

from civic_routing.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class Department:
    id: int
    name: str
    latitude: float
    longitude: float

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
