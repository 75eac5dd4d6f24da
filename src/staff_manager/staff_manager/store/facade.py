from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, ContextManager, Dict, Optional, Sequence

from ..attendance.model import AttendanceRecord, AutoResetStatus
from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, EntityKind
from ..credits.model import Credit
from ..credits.service import CreditService
from ..employees.model import Employee
from ..employees.service import EmployeeService
from ..history.ledger import HistoryLedger
from ..history.model import HistoryEntry
from ..history.undo import UndoEngine
from ..settings.repository import SettingsRepository
from ..settings.service import SettingsService
from ..tasks.model import Task
from ..tasks.service import TaskService
from .table import EntityTable


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    attendance_today: int
    pending_tasks: int
    outstanding_credits: int

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "attendanceToday": self.attendance_today,
            "pendingTasks": self.pending_tasks,
            "outstandingCredits": self.outstanding_credits,
        }


class StoreFacade:
    """Single coordination point for every entity table and the ledger.

    Constructed once at process start and handed to the controllers. All
    mutations (including undo) and reads share one re-entrant lock, so each
    call is atomic with respect to other requests. `transaction` (the MySQL
    connection factory's) makes each mutation and its history entry commit
    together.
    """

    def __init__(
        self,
        *,
        employees: EntityTable[Employee],
        attendance: EntityTable[AttendanceRecord],
        credits: EntityTable[Credit],
        tasks: EntityTable[Task],
        settings: SettingsRepository,
        ledger: HistoryLedger,
        transaction: Optional[Callable[[], ContextManager[Any]]] = None,
    ):
        self._lock = threading.RLock()
        self._ledger = ledger
        shared = {"lock": self._lock, "transaction": transaction}

        self.employees = EmployeeService(employees, ledger, **shared)
        name_of = self.employees.name_of
        self.attendance = AttendanceService(attendance, ledger, employee_name=name_of, **shared)
        self.credits = CreditService(credits, ledger, employee_name=name_of, **shared)
        self.tasks = TaskService(tasks, ledger, employee_name=name_of, **shared)
        for dependent in (self.attendance, self.credits, self.tasks):
            self.employees.register_dependent(dependent)

        self.settings = SettingsService(settings, lock=self._lock)

        self._undo = UndoEngine(
            ledger,
            {
                EntityKind.EMPLOYEE: employees,
                EntityKind.ATTENDANCE: attendance,
                EntityKind.CREDIT: credits,
                EntityKind.TASK: tasks,
            },
            {
                EntityKind.EMPLOYEE: Employee,
                EntityKind.ATTENDANCE: AttendanceRecord,
                EntityKind.CREDIT: Credit,
                EntityKind.TASK: Task,
            },
            **shared,
        )

    # --- history ---------------------------------------------------------

    def list_history(self) -> Sequence[HistoryEntry]:
        """Newest first, at most 100 entries."""
        with self._lock:
            return self._ledger.list()

    def undo(self, history_id: str) -> bool:
        return self._undo.undo(history_id)

    # --- attendance reset ------------------------------------------------

    def reset_daily_attendance(self, day: Optional[str] = None) -> int:
        return self.attendance.reset_daily(day)

    def auto_reset_status(self, *, today: Optional[date] = None) -> AutoResetStatus:
        return self.attendance.auto_reset_status(today=today)

    # --- aggregates ------------------------------------------------------

    def get_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        day = (today or now_local().date()).isoformat()
        with self._lock:
            present = [a for a in self.attendance.list_by_date(day) if a.status == AttendanceStatus.PRESENT]
            return DashboardStats(
                total_employees=self.employees.count(),
                attendance_today=len(present),
                pending_tasks=len(self.tasks.list_pending()),
                outstanding_credits=len(self.credits.list_unpaid()),
            )

    def table_counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                "employees": self.employees.count(),
                "attendance": self.attendance.count(),
                "credits": self.credits.count(),
                "tasks": self.tasks.count(),
                "history": len(self._ledger.list()),
            }
