from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import TaskPriority
from ..database.mysql_base import from_sql_bool
from ..store.mysql_table import MySQLEntityTable
from .model import Task


class MySQLTaskTable(MySQLEntityTable[Task]):
    table_name = "tasks"
    columns = (
        "id", "employee_id", "title", "description", "deadline",
        "priority", "is_completed", "created_at", "updated_at",
    )

    def _from_row(self, row: Mapping[str, Any]) -> Task:
        return Task(
            id=str(row["id"]),
            employee_id=str(row["employee_id"]),
            title=row["title"],
            description=row.get("description") or "",
            deadline=row["deadline"],
            priority=TaskPriority(row["priority"]),
            is_completed=bool(from_sql_bool(row["is_completed"])),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
