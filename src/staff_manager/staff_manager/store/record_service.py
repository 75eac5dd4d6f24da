from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from dataclasses import replace
from typing import Any, Callable, ClassVar, ContextManager, Generic, List, Mapping, Optional, Type, TypeVar

from ..common.datetime_utils import now_iso
from ..common.ids import generate_id
from ..core.constants import CLEANUP_ENTITY_ID, UNKNOWN_EMPLOYEE_NAME
from ..core.enums import EntityKind, HistoryAction
from ..core.exceptions import ValidationError
from ..history.ledger import HistoryLedger
from ..history.model import HistoryEntry
from .table import EntityTable

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Attributes callers can never set through create/update.
_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class RecordService(Generic[R]):
    """Create/read/update/delete for one entity table, with history.

    Every mutation and every read runs under the store-wide lock, so readers
    never observe a half-applied mutation. A mutation checks business rules
    first and appends exactly one history entry after the table write. A
    rejected mutation leaves both the table and the ledger untouched.

    `transaction` opens one unit of work around the table write and the
    ledger append (the MySQL backend commits both together or neither).

    Subclasses set `kind` and `record_type` and override the `_check_*` and
    `_describe_*` hooks.
    """

    kind: ClassVar[EntityKind]
    record_type: ClassVar[Type[Any]]

    def __init__(
        self,
        table: EntityTable[R],
        ledger: HistoryLedger,
        *,
        lock: threading.RLock,
        employee_name: Optional[Callable[[str], Optional[str]]] = None,
        transaction: Optional[Callable[[], ContextManager[Any]]] = None,
    ):
        self._table = table
        self._ledger = ledger
        self._lock = lock
        self._employee_name = employee_name
        self._transaction = transaction or nullcontext

    # --- reads -----------------------------------------------------------

    def get(self, record_id: str) -> Optional[R]:
        with self._lock:
            return self._table.get(record_id)

    def list_all(self) -> List[R]:
        with self._lock:
            return self._table.list_all()

    def count(self) -> int:
        with self._lock:
            return self._table.count()

    def _where(self, **criteria: Any) -> List[R]:
        with self._lock:
            return self._table.list_where(**criteria)

    # --- mutations -------------------------------------------------------

    def create(self, fields: Mapping[str, Any]) -> R:
        with self._lock, self._transaction():
            values = self._strip_managed(fields)
            self._check_create(values)
            now = now_iso()
            record = self.record_type(id=generate_id(), created_at=now, updated_at=now, **values)
            self._table.put(record)
            self._record(HistoryAction.CREATE, record.id, self._describe_create(record), new=record)
        logger.info("Created %s %s", self.kind.value, record.id)
        return record

    def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[R]:
        with self._lock, self._transaction():
            existing = self._table.get(record_id)
            if existing is None:
                return None
            updated = replace(existing, **self._strip_managed(changes), updated_at=now_iso())
            self._check_update(existing, updated)
            self._table.put(updated)
            self._record(
                HistoryAction.UPDATE,
                record_id,
                self._describe_update(existing, updated),
                old=existing,
                new=updated,
            )
        logger.info("Updated %s %s", self.kind.value, record_id)
        return updated

    def delete(self, record_id: str) -> bool:
        with self._lock, self._transaction():
            existing = self._table.get(record_id)
            if existing is None:
                return False
            note = self._before_delete(existing)
            if not self._table.remove(record_id):
                return False
            self._record(HistoryAction.DELETE, record_id, self._describe_delete(existing, note), old=existing)
        logger.info("Deleted %s %s", self.kind.value, record_id)
        return True

    # --- hooks -----------------------------------------------------------

    def _check_create(self, values: Mapping[str, Any]) -> None:
        """Raise ValidationError to reject the create."""

    def _check_update(self, existing: R, updated: R) -> None:
        """Raise ValidationError to reject the update."""

    def _before_delete(self, record: R) -> str:
        """Run side effects of a delete; returns a note for the description."""
        return ""

    def _describe_create(self, record: R) -> str:
        return f"Created {self.kind.value}"

    def _describe_update(self, old: R, new: R) -> str:
        return f"Updated {self.kind.value}"

    def _describe_delete(self, record: R, note: str) -> str:
        return f"Deleted {self.kind.value}{note}"

    # --- helpers ---------------------------------------------------------

    def _name_of(self, employee_id: str) -> str:
        name = self._employee_name(employee_id) if self._employee_name else None
        return name or UNKNOWN_EMPLOYEE_NAME

    def _record(
        self,
        action: HistoryAction,
        entity_id: str,
        description: str,
        *,
        old: Optional[R] = None,
        new: Optional[R] = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            id=generate_id(),
            timestamp=now_iso(),
            action=action,
            entity=self.kind,
            entity_id=entity_id,
            description=description,
            old_data=old.to_dict() if old is not None else None,  # type: ignore[attr-defined]
            new_data=new.to_dict() if new is not None else None,  # type: ignore[attr-defined]
        )
        self._ledger.append(entry)
        return entry

    @staticmethod
    def _strip_managed(fields: Mapping[str, Any]) -> dict:
        return {k: v for k, v in fields.items() if k not in _MANAGED_FIELDS}


class DependentRecordService(RecordService[R]):
    """Records owned by an employee (attendance, credits, tasks).

    The referenced employee must exist at create time and whenever an update
    moves the record to another employee; deleting the employee
    removes every dependent record through `cleanup_for_employee`.
    """

    def list_by_employee(self, employee_id: str) -> List[R]:
        return self._where(employee_id=employee_id)

    def _check_create(self, values: Mapping[str, Any]) -> None:
        self._require_employee(values.get("employee_id"))

    def _check_update(self, existing: R, updated: R) -> None:
        if updated.employee_id != existing.employee_id:  # type: ignore[attr-defined]
            self._require_employee(updated.employee_id)  # type: ignore[attr-defined]

    def _require_employee(self, employee_id: Optional[str]) -> None:
        if not employee_id or self._employee_name is None or self._employee_name(employee_id) is None:
            raise ValidationError("Employee not found")

    def cleanup_for_employee(self, employee_id: str, employee_name: str) -> int:
        """Remove all records of a deleted employee; logs one cleanup entry."""
        with self._lock, self._transaction():
            removed = 0
            for record in self._table.list_where(employee_id=employee_id):
                if self._table.remove(record.id):  # type: ignore[attr-defined]
                    removed += 1
            if removed:
                self._record(
                    HistoryAction.DELETE,
                    CLEANUP_ENTITY_ID,
                    f"Cleaned up {removed} {self.kind.value} records for deleted employee: {employee_name}",
                )
        if removed:
            logger.info("Removed %d %s records of employee %s", removed, self.kind.value, employee_id)
        return removed
