from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Mapping, Optional

from ..common.datetime_utils import now_local
from ..core.constants import BULK_ENTITY_ID
from ..core.enums import EntityKind, HistoryAction
from ..core.exceptions import ValidationError
from ..store.record_service import DependentRecordService
from .model import AttendanceRecord, AutoResetStatus

logger = logging.getLogger(__name__)


class AttendanceService(DependentRecordService[AttendanceRecord]):
    """Daily attendance marks, at most one per (employee, date)."""

    kind = EntityKind.ATTENDANCE
    record_type = AttendanceRecord

    def get_by_employee_and_date(self, employee_id: str, day: str) -> Optional[AttendanceRecord]:
        rows = self._where(employee_id=employee_id, date=day)
        return rows[0] if rows else None

    def list_by_date(self, day: str) -> List[AttendanceRecord]:
        return self._where(date=day)

    def reset_daily(self, day: Optional[str] = None) -> int:
        """Delete every record dated `day` (default: today). Returns the count."""
        target = day or now_local().date().isoformat()
        with self._lock, self._transaction():
            removed = 0
            for record in self._table.list_where(date=target):
                if self._table.remove(record.id):
                    removed += 1
            if removed:
                self._record(
                    HistoryAction.DELETE,
                    BULK_ENTITY_ID,
                    f"Reset attendance for {target} - deleted {removed} records",
                )
        logger.info("Attendance reset for %s: %d records removed", target, removed)
        return removed

    def auto_reset_status(self, *, today: Optional[date] = None) -> AutoResetStatus:
        day = (today or now_local().date()).isoformat()
        count = len(self.list_by_date(day))
        return AutoResetStatus(date=day, has_attendance_today=count > 0, attendance_count=count)

    def _check_create(self, values: Mapping[str, Any]) -> None:
        super()._check_create(values)
        existing = self.get_by_employee_and_date(values["employee_id"], values["date"])
        if existing:
            raise ValidationError(
                f"Attendance already marked for this employee on {values['date']}. "
                f"Current status: {existing.status.value}"
            )

    def _check_update(self, existing: AttendanceRecord, updated: AttendanceRecord) -> None:
        super()._check_update(existing, updated)
        if (existing.employee_id, existing.date) == (updated.employee_id, updated.date):
            return
        clash = self.get_by_employee_and_date(updated.employee_id, updated.date)
        if clash and clash.id != existing.id:
            raise ValidationError(
                f"Attendance already marked for this employee on {updated.date}. "
                f"Current status: {clash.status.value}"
            )

    def _describe_create(self, record: AttendanceRecord) -> str:
        return f"Marked {self._name_of(record.employee_id)} as {record.status.value} on {record.date}"

    def _describe_update(self, old: AttendanceRecord, new: AttendanceRecord) -> str:
        return f"Updated attendance for {self._name_of(old.employee_id)} on {old.date}"

    def _describe_delete(self, record: AttendanceRecord, note: str) -> str:
        return f"Deleted attendance for {self._name_of(record.employee_id)} on {record.date}"
