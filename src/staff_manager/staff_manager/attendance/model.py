from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for an employee on a date.

    At most one record exists per (employee_id, date).
    """

    id: str
    employee_id: str
    date: str
    status: AttendanceStatus
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": self.date,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            date=str(data["date"]),
            status=AttendanceStatus(data["status"]),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
        )


@dataclass(frozen=True)
class AutoResetStatus:
    """Read-model for the client-side "should I reset today" check."""

    date: str
    has_attendance_today: bool
    attendance_count: int

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "hasAttendanceToday": self.has_attendance_today,
            "attendanceCount": self.attendance_count,
        }
