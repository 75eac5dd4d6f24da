from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import now_iso
from ..core.enums import LeaveDeductionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchone, from_sql_bool, load_json, to_sql_value
from .model import LeaveDeductionPolicy, Settings, WorkingHours
from .repository import SettingsRepository

_SETTINGS_ROW_ID = 1

_COLUMNS = (
    "organization_name", "leave_deduction_type", "leave_deduction_value",
    "working_hours_start", "working_hours_end", "weekend_days",
    "auto_mark_absent", "email_notifications", "backup_frequency",
    "company_address", "company_phone", "company_email",
)


class MySQLSettingsRepository(SettingsRepository):
    """Singleton settings row (id=1); nested values stored flat or as JSON."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Settings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {', '.join(_COLUMNS)} FROM settings WHERE id=%s", (_SETTINGS_ROW_ID,))
            row = fetchone(cur)
        return _from_row(row) if row else Settings()

    def save(self, settings: Settings) -> None:
        row = _to_row(settings)
        cols = ["id", *_COLUMNS, "updated_at"]
        values = (_SETTINGS_ROW_ID, *[row[c] for c in _COLUMNS], now_iso())
        updates = ", ".join(f"{c}=VALUES({c})" for c in cols if c != "id")

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO settings ({', '.join(cols)})
                VALUES ({', '.join(['%s'] * len(cols))})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                values,
            )


def _to_row(s: Settings) -> dict:
    return {
        "organization_name": s.organization_name,
        "leave_deduction_type": s.leave_deduction.type.value,
        "leave_deduction_value": s.leave_deduction.value,
        "working_hours_start": s.working_hours.start if s.working_hours else None,
        "working_hours_end": s.working_hours.end if s.working_hours else None,
        "weekend_days": dump_json(list(s.weekend_days)) if s.weekend_days is not None else None,
        "auto_mark_absent": to_sql_value(s.auto_mark_absent),
        "email_notifications": to_sql_value(s.email_notifications),
        "backup_frequency": s.backup_frequency,
        "company_address": s.company_address,
        "company_phone": s.company_phone,
        "company_email": s.company_email,
    }


def _from_row(row: Mapping[str, Any]) -> Settings:
    start, end = row.get("working_hours_start"), row.get("working_hours_end")
    weekend = load_json(row.get("weekend_days"))
    return Settings(
        organization_name=row["organization_name"],
        leave_deduction=LeaveDeductionPolicy(
            type=LeaveDeductionType(row["leave_deduction_type"]),
            value=float(row["leave_deduction_value"]),
        ),
        working_hours=WorkingHours(start=start, end=end) if start and end else None,
        weekend_days=tuple(weekend) if weekend is not None else None,
        auto_mark_absent=from_sql_bool(row.get("auto_mark_absent")),
        email_notifications=from_sql_bool(row.get("email_notifications")),
        backup_frequency=row.get("backup_frequency"),
        company_address=row.get("company_address"),
        company_phone=row.get("company_phone"),
        company_email=row.get("company_email"),
    )
