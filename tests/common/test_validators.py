from __future__ import annotations

import pytest

from src.staff_manager.staff_manager.attendance.schema import parse_attendance_create, parse_attendance_update
from src.staff_manager.staff_manager.common.validators import require_email, require_iso_date, require_number
from src.staff_manager.staff_manager.core.enums import AttendanceStatus, EmployeeStatus, TaskPriority
from src.staff_manager.staff_manager.core.exceptions import ValidationError
from src.staff_manager.staff_manager.credits.schema import parse_credit_create
from src.staff_manager.staff_manager.employees.schema import parse_employee_create, parse_employee_update
from src.staff_manager.staff_manager.tasks.schema import parse_task_create

EMPLOYEE = {
    "name": "Alice",
    "salary": 50000,
    "joiningDate": "2024-03-01",
    "mobile": "+100",
    "email": "alice@company.com",
    "role": "Engineer",
}


def test_employee_create_applies_defaults():
    fields = parse_employee_create(EMPLOYEE)

    assert fields["salary"] == 50000.0
    assert fields["joining_date"] == "2024-03-01"
    assert fields["status"] == EmployeeStatus.ACTIVE
    assert fields["profile_photo"] is None


@pytest.mark.parametrize(
    "override, message",
    [
        ({"name": "  "}, "Name is required"),
        ({"salary": -5}, "Salary must be positive"),
        ({"salary": True}, "Salary must be a number"),
        ({"email": "nope"}, "Invalid email format"),
        ({"joiningDate": "01/03/2024"}, "Joining date must be a date in YYYY-MM-DD format"),
        ({"status": "retired"}, "Status must be one of: active, inactive"),
    ],
)
def test_employee_create_rejects_bad_fields(override, message):
    with pytest.raises(ValidationError) as exc:
        parse_employee_create({**EMPLOYEE, **override})
    assert str(exc.value) == message


def test_employee_create_requires_every_field():
    payload = dict(EMPLOYEE)
    del payload["mobile"]

    with pytest.raises(ValidationError, match="Mobile is required"):
        parse_employee_create(payload)


def test_update_only_returns_present_keys():
    assert parse_employee_update({"salary": 60000}) == {"salary": 60000.0}
    assert parse_attendance_update({"status": "half-day"}) == {"status": AttendanceStatus.HALF_DAY}


def test_body_must_be_an_object():
    with pytest.raises(ValidationError, match="Request body must be an object"):
        parse_attendance_create(None)


def test_credit_and_task_defaults():
    credit = parse_credit_create({
        "employeeId": "e1",
        "amount": 100,
        "dateTaken": "2025-01-01",
        "promiseReturnDate": "2025-02-01",
    })
    task = parse_task_create({
        "employeeId": "e1",
        "title": "T",
        "description": "D",
        "deadline": "2025-01-31",
    })

    assert credit["is_paid"] is False
    assert task["is_completed"] is False
    assert task["priority"] == TaskPriority.MEDIUM


def test_small_validators():
    assert require_number(0, "Amount") == 0.0
    assert require_iso_date("2025-02-28", "Date") == "2025-02-28"
    with pytest.raises(ValidationError):
        require_iso_date("2025-02-30", "Date")
    assert require_email(" a@b.co ") == "a@b.co"
