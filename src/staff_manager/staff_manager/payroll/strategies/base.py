from __future__ import annotations

from abc import ABC, abstractmethod


class LeaveDeductionStrategy(ABC):
    """Strategy Pattern: how leave days turn into a salary deduction."""

    @abstractmethod
    def deduction(self, *, base_salary: float, leave_count: int) -> float:
        raise NotImplementedError
