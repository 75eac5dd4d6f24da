from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from ..core.constants import HISTORY_LIMIT
from .model import HistoryEntry


class HistoryLedger(Protocol):
    """Append-only, size-bounded, newest-first audit trail.

    The only mutation allowed on an existing entry is `mark_undone`.
    """

    def append(self, entry: HistoryEntry) -> None:
        raise NotImplementedError

    def list(self) -> Sequence[HistoryEntry]:
        raise NotImplementedError

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        raise NotImplementedError

    def mark_undone(self, entry_id: str) -> bool:
        raise NotImplementedError


class InMemoryHistoryLedger:
    def __init__(self, *, limit: int = HISTORY_LIMIT):
        self._limit = int(limit)
        self._entries: List[HistoryEntry] = []

    def append(self, entry: HistoryEntry) -> None:
        self._entries.insert(0, entry)
        if len(self._entries) > self._limit:
            del self._entries[self._limit:]

    def list(self) -> Sequence[HistoryEntry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def mark_undone(self, entry_id: str) -> bool:
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                self._entries[i] = entry.marked_undone()
                return True
        return False

    def __len__(self) -> int:
        return len(self._entries)
