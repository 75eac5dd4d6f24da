from __future__ import annotations

from typing import List

from ..core.enums import EntityKind
from ..store.record_service import DependentRecordService
from .model import Task


class TaskService(DependentRecordService[Task]):
    kind = EntityKind.TASK
    record_type = Task

    def list_pending(self) -> List[Task]:
        return self._where(is_completed=False)

    def _describe_create(self, record: Task) -> str:
        return f"Created task: {record.title} for {self._name_of(record.employee_id)}"

    def _describe_update(self, old: Task, new: Task) -> str:
        return f"Updated task: {old.title} for {self._name_of(old.employee_id)}"

    def _describe_delete(self, record: Task, note: str) -> str:
        return f"Deleted task: {record.title} for {self._name_of(record.employee_id)}"
