from __future__ import annotations

from .base import LeaveDeductionStrategy


class FixedDeductionStrategy(LeaveDeductionStrategy):
    """Each leave day costs a flat amount."""

    def __init__(self, amount: float):
        self._amount = float(amount)

    def deduction(self, *, base_salary: float, leave_count: int) -> float:
        return self._amount * leave_count
