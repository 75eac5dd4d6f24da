from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...credits.model import Credit
from ...employees.model import Employee
from ...settings.model import LeaveDeductionPolicy
from ..model import SalaryBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def breakdown(
        self,
        *,
        employee: Employee,
        attendance: Sequence[AttendanceRecord],
        credits: Sequence[Credit],
        policy: LeaveDeductionPolicy,
        today: date,
    ) -> SalaryBreakdown:
        raise NotImplementedError
