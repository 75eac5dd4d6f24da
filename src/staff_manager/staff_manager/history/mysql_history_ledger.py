from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.constants import HISTORY_LIMIT
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, fetchone, load_json
from .ledger import HistoryLedger
from .model import HistoryEntry

_SELECT = "SELECT id, timestamp, action, entity, entity_id, old_data, new_data, description FROM history"


class MySQLHistoryLedger(HistoryLedger):
    """History table trimmed to the newest `limit` rows on every append."""

    def __init__(self, conn_factory: DatabaseConnection, *, limit: int = HISTORY_LIMIT):
        self._conn_factory = conn_factory
        self._limit = int(limit)

    def append(self, entry: HistoryEntry) -> None:
        data = entry.to_dict()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO history(id, timestamp, action, entity, entity_id, old_data, new_data, description)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.id,
                    entry.timestamp,
                    entry.action.value,
                    entry.entity.value,
                    entry.entity_id,
                    dump_json(data["oldData"]),
                    dump_json(data["newData"]),
                    entry.description,
                ),
            )
            # Evict everything older than the newest `limit` rows.
            cur.execute(
                """
                DELETE FROM history
                WHERE seq <= (
                    SELECT seq FROM (
                        SELECT seq FROM history ORDER BY seq DESC LIMIT 1 OFFSET %s
                    ) AS oldest_kept
                )
                """,
                (self._limit,),
            )

    def list(self) -> Sequence[HistoryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY seq DESC LIMIT %s", (self._limit,))
            return [_from_row(r) for r in fetchall(cur)]

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (entry_id,))
            row = fetchone(cur)
            return _from_row(row) if row else None

    def mark_undone(self, entry_id: str) -> bool:
        entry = self.get(entry_id)
        if entry is None:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE history SET description=%s WHERE id=%s",
                (entry.marked_undone().description, entry_id),
            )
            return cur.rowcount > 0 or entry.is_undone


def _from_row(row: Mapping[str, Any]) -> HistoryEntry:
    return HistoryEntry.from_dict({
        "id": row["id"],
        "timestamp": row["timestamp"],
        "action": row["action"],
        "entity": row["entity"],
        "entityId": row["entity_id"],
        "description": row["description"],
        "oldData": load_json(row.get("old_data")),
        "newData": load_json(row.get("new_data")),
    })
