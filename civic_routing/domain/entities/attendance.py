"""Attendance record — a staff check-in at an issue site."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AttendanceRecord:
    id: int | None
    issue_id: str
    staff_id: int
    staff_latitude: float
    staff_longitude: float
    distance_meters: float
    timestamp: datetime
