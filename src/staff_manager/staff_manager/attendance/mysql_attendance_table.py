from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import AttendanceStatus
from ..store.mysql_table import MySQLEntityTable
from .model import AttendanceRecord


class MySQLAttendanceTable(MySQLEntityTable[AttendanceRecord]):
    table_name = "attendance"
    columns = ("id", "employee_id", "date", "status", "created_at", "updated_at")

    def _from_row(self, row: Mapping[str, Any]) -> AttendanceRecord:
        return AttendanceRecord(
            id=str(row["id"]),
            employee_id=str(row["employee_id"]),
            date=row["date"],
            status=AttendanceStatus(row["status"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
