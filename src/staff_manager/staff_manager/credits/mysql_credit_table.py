from __future__ import annotations

from typing import Any, Mapping

from ..database.mysql_base import from_sql_bool
from ..store.mysql_table import MySQLEntityTable
from .model import Credit


class MySQLCreditTable(MySQLEntityTable[Credit]):
    table_name = "credits"
    columns = (
        "id", "employee_id", "amount", "date_taken", "promise_return_date",
        "is_paid", "created_at", "updated_at",
    )

    def _from_row(self, row: Mapping[str, Any]) -> Credit:
        return Credit(
            id=str(row["id"]),
            employee_id=str(row["employee_id"]),
            amount=float(row["amount"]),
            date_taken=row["date_taken"],
            promise_return_date=row["promise_return_date"],
            is_paid=bool(from_sql_bool(row["is_paid"])),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
