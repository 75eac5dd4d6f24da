from __future__ import annotations

from typing import Any, Dict

from ..common.validators import parse_fields, require_choice, require_iso_date, require_non_empty
from ..core.enums import AttendanceStatus

_RULES = {
    "employeeId": ("employee_id", lambda v: require_non_empty(v, "Employee ID")),
    "date": ("date", lambda v: require_iso_date(v, "Date")),
    "status": ("status", lambda v: require_choice(v, AttendanceStatus, "Status")),
}


def parse_attendance_create(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES)


def parse_attendance_update(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES, partial=True)
