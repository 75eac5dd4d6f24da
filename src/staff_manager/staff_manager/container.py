from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.mysql_attendance_table import MySQLAttendanceTable
from .credits.mysql_credit_table import MySQLCreditTable
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_table import MySQLEmployeeTable
from .history.ledger import InMemoryHistoryLedger
from .history.mysql_history_ledger import MySQLHistoryLedger
from .payroll.service import PayrollService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import InMemorySettingsRepository
from .store.facade import StoreFacade
from .store.table import InMemoryTable
from .tasks.mysql_task_table import MySQLTaskTable

MEMORY_BACKEND = "memory"
MYSQL_BACKEND = "mysql"


@dataclass(frozen=True)
class Container:
    backend: str
    conn: Optional[DatabaseConnection]

    store: StoreFacade
    payroll_service: PayrollService


def build_container(*, backend: str = MEMORY_BACKEND, db_config: Optional[Mapping[str, Any]] = None) -> Container:
    backend = (backend or MEMORY_BACKEND).lower()

    if backend == MEMORY_BACKEND:
        conn = None
        store = StoreFacade(
            employees=InMemoryTable(),
            attendance=InMemoryTable(),
            credits=InMemoryTable(),
            tasks=InMemoryTable(),
            settings=InMemorySettingsRepository(),
            ledger=InMemoryHistoryLedger(),
        )
    elif backend == MYSQL_BACKEND:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
        store = StoreFacade(
            employees=MySQLEmployeeTable(conn),
            attendance=MySQLAttendanceTable(conn),
            credits=MySQLCreditTable(conn),
            tasks=MySQLTaskTable(conn),
            settings=MySQLSettingsRepository(conn),
            ledger=MySQLHistoryLedger(conn),
            transaction=conn.transaction,
        )
    else:
        raise ValueError(f"Unknown store backend: {backend!r}")

    payroll_service = PayrollService(store.employees, store.attendance, store.credits, store.settings)

    return Container(backend=backend, conn=conn, store=store, payroll_service=payroll_service)
