from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from typing import Any, Callable, ContextManager, Mapping, Optional, Type

from ..core.constants import BULK_ENTITY_ID, CLEANUP_ENTITY_ID
from ..core.enums import EntityKind, HistoryAction
from ..store.table import EntityTable
from .ledger import HistoryLedger
from .model import HistoryEntry

logger = logging.getLogger(__name__)


class UndoEngine:
    """Reverse one recorded mutation by restoring its snapshot.

    Single level only: the writes done here go straight to the tables and
    produce no history, so an undo cannot itself be undone. An entry that
    was already undone is refused.

    Supported reversals:
    - create (any entity): remove the created record
    - update (any entity): write `old_data` back
    - delete (employee only): write `old_data` back; dependents removed by
      the cascade stay removed
    """

    def __init__(
        self,
        ledger: HistoryLedger,
        tables: Mapping[EntityKind, EntityTable[Any]],
        record_types: Mapping[EntityKind, Type[Any]],
        *,
        lock: threading.RLock,
        transaction: Optional[Callable[[], ContextManager[Any]]] = None,
    ):
        self._ledger = ledger
        self._tables = dict(tables)
        self._record_types = dict(record_types)
        self._lock = lock
        self._transaction = transaction or nullcontext

    def undo(self, history_id: str) -> bool:
        try:
            with self._lock, self._transaction():
                entry = self._ledger.get(history_id)
                if entry is None or entry.is_undone:
                    return False
                if not self._apply(entry):
                    return False
                self._ledger.mark_undone(entry.id)
        except Exception:
            logger.exception("Undo of history entry %s failed", history_id)
            return False

        logger.info("Undid %s %s %s", entry.action.value, entry.entity.value, entry.entity_id)
        return True

    def _apply(self, entry: HistoryEntry) -> bool:
        if entry.entity_id in (BULK_ENTITY_ID, CLEANUP_ENTITY_ID):
            return False

        table = self._tables.get(entry.entity)
        if table is None:
            return False

        if entry.action == HistoryAction.CREATE:
            return table.remove(entry.entity_id)

        if entry.action == HistoryAction.UPDATE:
            return self._restore(entry, table)

        if entry.action == HistoryAction.DELETE and entry.entity == EntityKind.EMPLOYEE:
            return self._restore(entry, table)

        return False

    def _restore(self, entry: HistoryEntry, table: EntityTable[Any]) -> bool:
        if not entry.old_data:
            return False

        record = self._record_types[entry.entity].from_dict(entry.old_data)
        if record.id != entry.entity_id:
            return False

        if entry.entity == EntityKind.ATTENDANCE:
            # One record per (employee, date) must still hold after the restore.
            clashes = table.list_where(employee_id=record.employee_id, date=record.date)
            if any(other.id != record.id for other in clashes):
                return False

        table.put(record)
        return True
