from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import month_prefix
from ...core.enums import DEDUCTIBLE_STATUSES
from ...credits.model import Credit
from ...employees.model import Employee
from ...settings.model import LeaveDeductionPolicy
from ..factory import LeaveDeductionFactory
from ..model import SalaryBreakdown
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary - leave deductions (this month) - unpaid credits (all time), not below 0."""

    def __init__(self, factory: Optional[LeaveDeductionFactory] = None):
        self._factory = factory or LeaveDeductionFactory()

    def breakdown(
        self,
        *,
        employee: Employee,
        attendance: Sequence[AttendanceRecord],
        credits: Sequence[Credit],
        policy: LeaveDeductionPolicy,
        today: date,
    ) -> SalaryBreakdown:
        month = month_prefix(today)
        base = float(employee.salary)

        leave_count = sum(
            1
            for a in attendance
            if a.employee_id == employee.id and a.date.startswith(month) and a.status in DEDUCTIBLE_STATUSES
        )
        leave = self._factory.for_policy(policy).deduction(base_salary=base, leave_count=leave_count)

        unpaid = sum(float(c.amount) for c in credits if c.employee_id == employee.id and not c.is_paid)

        total = leave + unpaid
        return SalaryBreakdown(
            employee_id=employee.id,
            month=month,
            base_salary=base,
            leave_count=leave_count,
            leave_deductions=leave,
            unpaid_credits=unpaid,
            total_deductions=total,
            net_salary=max(0.0, base - total),
        )
