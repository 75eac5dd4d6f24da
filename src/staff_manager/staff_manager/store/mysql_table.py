from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_sql_value

R = TypeVar("R")


class MySQLEntityTable(ABC, Generic[R]):
    """EntityTable backed by one MySQL table.

    Column names equal the record's attribute names, so `list_where` criteria
    map straight onto columns. Subclasses declare `table_name` / `columns`
    and convert rows back into records.
    """

    table_name: ClassVar[str]
    columns: ClassVar[Tuple[str, ...]]

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @abstractmethod
    def _from_row(self, row: Mapping[str, Any]) -> R:
        raise NotImplementedError

    def _to_row(self, record: R) -> Dict[str, Any]:
        return {col: to_sql_value(getattr(record, col)) for col in self.columns}

    @property
    def _select(self) -> str:
        return f"SELECT {', '.join(self.columns)} FROM {self.table_name}"

    def get(self, record_id: str) -> Optional[R]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._select} WHERE id=%s", (record_id,))
            row = fetchone(cur)
            return self._from_row(row) if row else None

    def list_all(self) -> List[R]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._select} ORDER BY seq")
            return [self._from_row(r) for r in fetchall(cur)]

    def list_where(self, **criteria: Any) -> List[R]:
        unknown = set(criteria) - set(self.columns)
        if unknown:
            raise ValueError(f"Unknown columns for {self.table_name}: {sorted(unknown)}")

        where = " AND ".join(f"{col}=%s" for col in criteria) or "1=1"
        params = tuple(to_sql_value(v) for v in criteria.values())

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._select} WHERE {where} ORDER BY seq", params)
            return [self._from_row(r) for r in fetchall(cur)]

    def put(self, record: R) -> None:
        row = self._to_row(record)
        cols = list(row)
        placeholders = ", ".join(["%s"] * len(cols))
        updates = ", ".join(f"{c}=VALUES({c})" for c in cols if c != "id")

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self.table_name} ({', '.join(cols)})
                VALUES ({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                tuple(row[c] for c in cols),
            )

    def remove(self, record_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self.table_name} WHERE id=%s", (record_id,))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM {self.table_name}")
            row = fetchone(cur)
            return int(row["n"]) if row else 0
