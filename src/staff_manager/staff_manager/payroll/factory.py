from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LeaveDeductionType
from ..settings.model import LeaveDeductionPolicy
from .strategies.base import LeaveDeductionStrategy
from .strategies.fixed_strategy import FixedDeductionStrategy
from .strategies.percentage_strategy import PercentageDeductionStrategy


@dataclass
class LeaveDeductionFactory:
    """Factory Pattern: choose the deduction strategy from settings."""

    def for_policy(self, policy: LeaveDeductionPolicy) -> LeaveDeductionStrategy:
        if policy.type == LeaveDeductionType.FIXED:
            return FixedDeductionStrategy(policy.value)
        return PercentageDeductionStrategy(policy.value)
