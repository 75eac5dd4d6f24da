from __future__ import annotations

from .base import LeaveDeductionStrategy


class PercentageDeductionStrategy(LeaveDeductionStrategy):
    """Each leave day costs `percent` % of the base salary."""

    def __init__(self, percent: float):
        self._percent = float(percent)

    def deduction(self, *, base_salary: float, leave_count: int) -> float:
        return base_salary * self._percent * leave_count / 100
