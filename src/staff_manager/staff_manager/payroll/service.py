from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..credits.service import CreditService
from ..employees.service import EmployeeService
from ..settings.service import SettingsService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalaryBreakdown


class PayrollService:
    """Use case: salary breakdowns, recomputed from fresh data on every call."""

    def __init__(
        self,
        employees: EmployeeService,
        attendance: AttendanceService,
        credits: CreditService,
        settings: SettingsService,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._credits = credits
        self._settings = settings
        self._calculator = calculator or StandardPayrollCalculator()

    def breakdown_for(self, employee_id: str, *, today: Optional[date] = None) -> Optional[SalaryBreakdown]:
        employee = self._employees.get(employee_id)
        if employee is None:
            return None
        return self._calculator.breakdown(
            employee=employee,
            attendance=self._attendance.list_by_employee(employee_id),
            credits=self._credits.list_by_employee(employee_id),
            policy=self._settings.get().leave_deduction,
            today=today or now_local().date(),
        )

    def net_salary(self, employee_id: str, *, today: Optional[date] = None) -> float:
        breakdown = self.breakdown_for(employee_id, today=today)
        return breakdown.net_salary if breakdown else 0.0

    def payroll_report(self, *, today: Optional[date] = None) -> List[SalaryBreakdown]:
        day = today or now_local().date()
        report = []
        for employee in self._employees.list_all():
            breakdown = self.breakdown_for(employee.id, today=day)
            if breakdown is not None:
                report.append(breakdown)
        return report
