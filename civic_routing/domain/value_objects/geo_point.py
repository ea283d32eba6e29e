"""GeoPoint value object — immutable (lat, lon) pair."""

import math
from dataclasses import dataclass
from numbers import Real

EARTH_RADIUS_KM = 6371.0


def is_finite_coordinate(value: object) -> bool:
    """True for a real, finite number. Rejects None, strings, bools, NaN and inf."""
    # bool is a Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range, e.g. 10**400
        return False


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two coordinates (Haversine formula)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def haversine_km(self, other: "GeoPoint") -> float:
        """Calculate distance in km between two points using the Haversine formula."""
        return distance_km(self.latitude, self.longitude, other.latitude, other.longitude)
