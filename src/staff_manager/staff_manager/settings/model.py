from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from ..core.constants import DEFAULT_LEAVE_DEDUCTION_VALUE, DEFAULT_ORGANIZATION_NAME
from ..core.enums import LeaveDeductionType


@dataclass(frozen=True)
class LeaveDeductionPolicy:
    type: LeaveDeductionType = LeaveDeductionType.PERCENTAGE
    value: float = DEFAULT_LEAVE_DEDUCTION_VALUE

    def to_dict(self) -> dict:
        return {"type": self.type.value, "value": self.value}


@dataclass(frozen=True)
class WorkingHours:
    start: str
    end: str

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class Settings:
    """Organization-wide settings. Exactly one instance exists per store."""

    organization_name: str = DEFAULT_ORGANIZATION_NAME
    leave_deduction: LeaveDeductionPolicy = field(default_factory=LeaveDeductionPolicy)
    working_hours: Optional[WorkingHours] = None
    weekend_days: Optional[Tuple[str, ...]] = None
    auto_mark_absent: Optional[bool] = None
    email_notifications: Optional[bool] = None
    backup_frequency: Optional[str] = None
    company_address: Optional[str] = None
    company_phone: Optional[str] = None
    company_email: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {
            "organizationName": self.organization_name,
            "leaveDeduction": self.leave_deduction.to_dict(),
        }
        optional = {
            "workingHours": self.working_hours.to_dict() if self.working_hours else None,
            "weekendDays": list(self.weekend_days) if self.weekend_days is not None else None,
            "autoMarkAbsent": self.auto_mark_absent,
            "emailNotifications": self.email_notifications,
            "backupFrequency": self.backup_frequency,
            "companyAddress": self.company_address,
            "companyPhone": self.company_phone,
            "companyEmail": self.company_email,
        }
        out.update({k: v for k, v in optional.items() if v is not None})
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        deduction = data.get("leaveDeduction") or {}
        hours = data.get("workingHours")
        weekend = data.get("weekendDays")
        return cls(
            organization_name=str(data.get("organizationName") or DEFAULT_ORGANIZATION_NAME),
            leave_deduction=LeaveDeductionPolicy(
                type=LeaveDeductionType(deduction.get("type", LeaveDeductionType.PERCENTAGE.value)),
                value=float(deduction.get("value", DEFAULT_LEAVE_DEDUCTION_VALUE)),
            ),
            working_hours=WorkingHours(start=str(hours["start"]), end=str(hours["end"])) if hours else None,
            weekend_days=tuple(weekend) if weekend is not None else None,
            auto_mark_absent=data.get("autoMarkAbsent"),
            email_notifications=data.get("emailNotifications"),
            backup_frequency=data.get("backupFrequency"),
            company_address=data.get("companyAddress"),
            company_phone=data.get("companyPhone"),
            company_email=data.get("companyEmail"),
        )
