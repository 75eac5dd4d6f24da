from src.staff_manager.staff_manager.core.enums import LeaveDeductionType
from src.staff_manager.staff_manager.payroll.factory import LeaveDeductionFactory
from src.staff_manager.staff_manager.payroll.strategies.fixed_strategy import FixedDeductionStrategy
from src.staff_manager.staff_manager.payroll.strategies.percentage_strategy import PercentageDeductionStrategy
from src.staff_manager.staff_manager.settings.model import LeaveDeductionPolicy


def test_factory_percentage_policy():
    strategy = LeaveDeductionFactory().for_policy(LeaveDeductionPolicy(type=LeaveDeductionType.PERCENTAGE, value=5))

    assert isinstance(strategy, PercentageDeductionStrategy)
    assert strategy.deduction(base_salary=20000.0, leave_count=3) == 3000.0


def test_factory_fixed_policy():
    strategy = LeaveDeductionFactory().for_policy(LeaveDeductionPolicy(type=LeaveDeductionType.FIXED, value=250))

    assert isinstance(strategy, FixedDeductionStrategy)
    assert strategy.deduction(base_salary=20000.0, leave_count=3) == 750.0


def test_zero_leave_costs_nothing():
    for policy in (LeaveDeductionPolicy(), LeaveDeductionPolicy(type=LeaveDeductionType.FIXED, value=100)):
        assert LeaveDeductionFactory().for_policy(policy).deduction(base_salary=1000.0, leave_count=0) == 0
