from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import EmployeeStatus
from ..store.mysql_table import MySQLEntityTable
from .model import Employee


class MySQLEmployeeTable(MySQLEntityTable[Employee]):
    table_name = "employees"
    columns = (
        "id", "name", "salary", "joining_date", "mobile", "email",
        "role", "profile_photo", "status", "created_at", "updated_at",
    )

    def _from_row(self, row: Mapping[str, Any]) -> Employee:
        return Employee(
            id=str(row["id"]),
            name=row["name"],
            salary=float(row["salary"]),
            joining_date=row["joining_date"],
            mobile=row["mobile"],
            email=row["email"],
            role=row["role"],
            profile_photo=row.get("profile_photo"),
            status=EmployeeStatus(row["status"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
