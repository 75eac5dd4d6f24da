from __future__ import annotations

import logging
from typing import List

from ..common.datetime_utils import today_iso
from ..core.enums import AttendanceStatus, EmployeeStatus
from ..employees.model import Employee
from .facade import StoreFacade

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = (
    {
        "name": "John Doe",
        "salary": 75000.0,
        "joining_date": "2023-01-15",
        "mobile": "+1234567890",
        "email": "john@company.com",
        "role": "Software Engineer",
        "status": EmployeeStatus.ACTIVE,
        "profile_photo": None,
    },
    {
        "name": "Jane Smith",
        "salary": 85000.0,
        "joining_date": "2022-11-20",
        "mobile": "+1234567891",
        "email": "jane@company.com",
        "role": "Project Manager",
        "status": EmployeeStatus.ACTIVE,
        "profile_photo": None,
    },
)


def seed_sample_data(store: StoreFacade) -> List[Employee]:
    """Create demo employees marked present today. No-op unless the store is empty."""
    if store.employees.count() > 0:
        return []

    today = today_iso()
    created = []
    for fields in SAMPLE_EMPLOYEES:
        employee = store.employees.create(fields)
        store.attendance.create({"employee_id": employee.id, "date": today, "status": AttendanceStatus.PRESENT})
        created.append(employee)

    logger.info("Seeded %d sample employees", len(created))
    return created
