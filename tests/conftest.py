from __future__ import annotations

from datetime import date

import pytest

from src.staff_manager.staff_manager.container import build_container
from src.staff_manager.staff_manager.core.enums import AttendanceStatus, EmployeeStatus


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def store(container):
    return container.store


@pytest.fixture
def fixed_today():
    return date(2025, 1, 20)


@pytest.fixture
def make_employee(store):
    def _make(name="Alice", salary=50000.0, **overrides):
        fields = {
            "name": name,
            "salary": salary,
            "joining_date": "2024-03-01",
            "mobile": "+100000000",
            "email": f"{name.lower()}@company.com",
            "role": "Engineer",
            "status": EmployeeStatus.ACTIVE,
            "profile_photo": None,
        }
        fields.update(overrides)
        return store.employees.create(fields)

    return _make


@pytest.fixture
def mark(store):
    def _mark(employee_id, day, status=AttendanceStatus.PRESENT):
        return store.attendance.create({"employee_id": employee_id, "date": day, "status": status})

    return _mark
