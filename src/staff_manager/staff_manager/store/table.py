from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Protocol, TypeVar

R = TypeVar("R")


class EntityTable(Protocol[R]):
    """Low-level record collection keyed by id.

    Note: no business rules and no history here; the services on top of the
    tables own both.
    """

    def get(self, record_id: str) -> Optional[R]:
        raise NotImplementedError

    def list_all(self) -> List[R]:
        raise NotImplementedError

    def list_where(self, **criteria: Any) -> List[R]:
        """Records whose attributes equal every given criterion."""
        raise NotImplementedError

    def put(self, record: R) -> None:
        """Insert or replace the record under `record.id`."""
        raise NotImplementedError

    def remove(self, record_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class InMemoryTable(Generic[R]):
    """Dict-backed table holding frozen records in insertion order.

    Reads iterate over a copy of the rows, so a concurrent write never breaks
    an iteration in progress.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, R] = {}

    def get(self, record_id: str) -> Optional[R]:
        return self._rows.get(record_id)

    def list_all(self) -> List[R]:
        return list(self._rows.values())

    def list_where(self, **criteria: Any) -> List[R]:
        return [
            r for r in list(self._rows.values())
            if all(getattr(r, name) == value for name, value in criteria.items())
        ]

    def put(self, record: R) -> None:
        self._rows[record.id] = record  # type: ignore[attr-defined]

    def remove(self, record_id: str) -> bool:
        return self._rows.pop(record_id, None) is not None

    def count(self) -> int:
        return len(self._rows)
