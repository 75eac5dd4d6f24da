from __future__ import annotations

from typing import List

from ..core.enums import EntityKind
from ..store.record_service import DependentRecordService
from .model import Credit


def _money(amount: float) -> str:
    return f"₹{amount:g}"


class CreditService(DependentRecordService[Credit]):
    """Salary advances. Unpaid credits are deducted at payroll time."""

    kind = EntityKind.CREDIT
    record_type = Credit

    def list_unpaid(self) -> List[Credit]:
        return self._where(is_paid=False)

    def _describe_create(self, record: Credit) -> str:
        return f"Added credit: {_money(record.amount)} for {self._name_of(record.employee_id)}"

    def _describe_update(self, old: Credit, new: Credit) -> str:
        return f"Updated credit: {_money(old.amount)} for {self._name_of(old.employee_id)}"

    def _describe_delete(self, record: Credit, note: str) -> str:
        return f"Deleted credit: {_money(record.amount)} for {self._name_of(record.employee_id)}"
