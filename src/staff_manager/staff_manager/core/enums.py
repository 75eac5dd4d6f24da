from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status of an employee record."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Daily attendance status stored per (employee, date)."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    SICK_LEAVE = "sick-leave"
    PAID_LEAVE = "paid-leave"


# Statuses that reduce pay. Paid leave does not.
DEDUCTIBLE_STATUSES = frozenset(
    {AttendanceStatus.ABSENT, AttendanceStatus.HALF_DAY, AttendanceStatus.SICK_LEAVE}
)


class TaskPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LeaveDeductionType(str, Enum):
    """How a leave day is converted into a salary deduction."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


class HistoryAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class EntityKind(str, Enum):
    """Entity tables tracked by the history ledger."""

    EMPLOYEE = "employee"
    ATTENDANCE = "attendance"
    CREDIT = "credit"
    TASK = "task"
