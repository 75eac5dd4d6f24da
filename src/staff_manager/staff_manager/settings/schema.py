from __future__ import annotations

from typing import Any, Dict

from ..common.validators import (
    parse_fields,
    require_bool,
    require_choice,
    require_email,
    require_mapping,
    require_non_empty,
    require_number,
)
from ..core.enums import LeaveDeductionType
from ..core.exceptions import ValidationError
from .model import LeaveDeductionPolicy, WorkingHours


def _leave_deduction(value: Any) -> LeaveDeductionPolicy:
    data = require_mapping(value, "Leave deduction")
    return LeaveDeductionPolicy(
        type=require_choice(data.get("type"), LeaveDeductionType, "Leave deduction type"),
        value=require_number(data.get("value"), "Deduction value"),
    )


def _working_hours(value: Any) -> WorkingHours:
    data = require_mapping(value, "Working hours")
    return WorkingHours(
        start=require_non_empty(data.get("start"), "Working hours start"),
        end=require_non_empty(data.get("end"), "Working hours end"),
    )


def _weekend_days(value: Any) -> tuple:
    if not isinstance(value, list):
        raise ValidationError("Weekend days must be a list")
    return tuple(require_non_empty(day, "Weekend day") for day in value)


_RULES = {
    "organizationName": ("organization_name", lambda v: require_non_empty(v, "Organization name")),
    "leaveDeduction": ("leave_deduction", _leave_deduction),
    "workingHours": ("working_hours", _working_hours),
    "weekendDays": ("weekend_days", _weekend_days),
    "autoMarkAbsent": ("auto_mark_absent", lambda v: require_bool(v, "autoMarkAbsent")),
    "emailNotifications": ("email_notifications", lambda v: require_bool(v, "emailNotifications")),
    "backupFrequency": ("backup_frequency", lambda v: require_non_empty(v, "Backup frequency")),
    "companyAddress": ("company_address", lambda v: require_non_empty(v, "Company address")),
    "companyPhone": ("company_phone", lambda v: require_non_empty(v, "Company phone")),
    "companyEmail": ("company_email", lambda v: require_email(v, "Company email")),
}


def parse_settings_update(payload: Any) -> Dict[str, Any]:
    """Every settings key is optional; absent keys keep their stored value."""
    return parse_fields(payload, _RULES, partial=True)
