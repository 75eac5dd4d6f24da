from __future__ import annotations

import logging
from typing import List, Optional

from ..core.enums import EntityKind
from ..store.record_service import DependentRecordService, RecordService
from .model import Employee

logger = logging.getLogger(__name__)


class EmployeeService(RecordService[Employee]):
    """Employee records. Deleting an employee cascades to its dependents.

    Dependents are registered explicitly with `register_dependent`; each one
    removes its own rows and logs its own cleanup entry before the employee's
    delete entry is appended.
    """

    kind = EntityKind.EMPLOYEE
    record_type = Employee

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._dependents: List[DependentRecordService] = []

    def register_dependent(self, dependent: DependentRecordService) -> None:
        self._dependents.append(dependent)

    def name_of(self, employee_id: str) -> Optional[str]:
        employee = self.get(employee_id)
        return employee.name if employee else None

    def _before_delete(self, record: Employee) -> str:
        cleaned = []
        for dependent in self._dependents:
            removed = dependent.cleanup_for_employee(record.id, record.name)
            if removed:
                cleaned.append(f"{removed} {dependent.kind.value} records")
        if not cleaned:
            return ""
        return " and cleaned up " + ", ".join(cleaned)

    def _describe_create(self, record: Employee) -> str:
        return f"Created employee: {record.name}"

    def _describe_update(self, old: Employee, new: Employee) -> str:
        return f"Updated employee: {old.name}"

    def _describe_delete(self, record: Employee, note: str) -> str:
        return f"Deleted employee: {record.name}{note}"
