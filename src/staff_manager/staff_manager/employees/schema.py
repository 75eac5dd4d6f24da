from __future__ import annotations

from typing import Any, Dict

from ..core.enums import EmployeeStatus
from ..common.validators import (
    parse_fields,
    require_choice,
    require_email,
    require_iso_date,
    require_non_empty,
    require_number,
)

_RULES = {
    "name": ("name", lambda v: require_non_empty(v, "Name")),
    "salary": ("salary", lambda v: require_number(v, "Salary")),
    "joiningDate": ("joining_date", lambda v: require_iso_date(v, "Joining date")),
    "mobile": ("mobile", lambda v: require_non_empty(v, "Mobile")),
    "email": ("email", require_email),
    "role": ("role", lambda v: require_non_empty(v, "Role")),
    "status": ("status", lambda v: require_choice(v, EmployeeStatus, "Status")),
    "profilePhoto": ("profile_photo", lambda v: require_non_empty(v, "Profile photo")),
}


def parse_employee_create(payload: Any) -> Dict[str, Any]:
    return parse_fields(
        payload,
        _RULES,
        optional=("profilePhoto",),
        defaults={"status": EmployeeStatus.ACTIVE},
    )


def parse_employee_update(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES, partial=True)
