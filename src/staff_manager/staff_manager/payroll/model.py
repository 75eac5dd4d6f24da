from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SalaryBreakdown:
    """Read-model: derived pay for one employee in one month."""

    employee_id: str
    month: str
    base_salary: float
    leave_count: int
    leave_deductions: float
    unpaid_credits: float
    total_deductions: float
    net_salary: float

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "month": self.month,
            "baseSalary": self.base_salary,
            "leaveCount": self.leave_count,
            "leaveDeductions": self.leave_deductions,
            "unpaidCredits": self.unpaid_credits,
            "totalDeductions": self.total_deductions,
            "netSalary": self.net_salary,
        }
