from __future__ import annotations

import pytest

from src.staff_manager.staff_manager.core.enums import AttendanceStatus, TaskPriority


def test_undo_update_restores_old_snapshot(store, make_employee):
    emp = make_employee("Alice", salary=50000.0)
    store.employees.update(emp.id, {"salary": 99000.0, "role": "Lead"})
    entry = store.list_history()[0]

    assert store.undo(entry.id) is True

    restored = store.employees.get(emp.id)
    assert restored.salary == 50000.0
    assert restored.role == "Engineer"
    assert store.list_history()[0].description.endswith(" (UNDONE)")


def test_undo_writes_no_new_history(store, make_employee):
    emp = make_employee()
    store.employees.update(emp.id, {"name": "Renamed"})
    before = len(store.list_history())

    store.undo(store.list_history()[0].id)

    assert len(store.list_history()) == before


def test_undo_create_removes_the_record(store, make_employee, mark):
    emp = make_employee()
    record = mark(emp.id, "2025-01-05")

    assert store.undo(store.list_history()[0].id) is True

    assert store.attendance.get(record.id) is None
    assert store.employees.get(emp.id) is not None


def test_undo_twice_is_refused(store, make_employee):
    emp = make_employee()
    store.employees.update(emp.id, {"name": "Bob"})
    entry_id = store.list_history()[0].id

    assert store.undo(entry_id) is True
    store.employees.update(emp.id, {"name": "Carl"})

    assert store.undo(entry_id) is False
    assert store.employees.get(emp.id).name == "Carl"


def test_undo_unknown_entry_is_refused(store):
    assert store.undo("does-not-exist") is False


def test_undo_employee_delete_restores_employee_but_not_dependents(store, make_employee, mark):
    emp = make_employee("Dana")
    mark(emp.id, "2025-01-05")
    store.employees.delete(emp.id)
    delete_entry = store.list_history()[0]

    assert store.undo(delete_entry.id) is True

    assert store.employees.get(emp.id).name == "Dana"
    assert store.attendance.list_by_employee(emp.id) == []


def test_undo_delete_of_non_employee_is_refused(store, make_employee):
    emp = make_employee()
    task = store.tasks.create({
        "employee_id": emp.id,
        "title": "T",
        "description": "d",
        "deadline": "2025-01-31",
        "priority": TaskPriority.HIGH,
        "is_completed": False,
    })
    store.tasks.delete(task.id)

    assert store.undo(store.list_history()[0].id) is False
    assert store.tasks.get(task.id) is None
    assert not store.list_history()[0].description.endswith(" (UNDONE)")


def test_bulk_and_cleanup_entries_cannot_be_undone(store, make_employee, mark):
    emp = make_employee()
    mark(emp.id, "2025-01-05")
    mark(emp.id, "2025-01-06")
    store.reset_daily_attendance("2025-01-05")
    bulk = store.list_history()[0]
    assert bulk.entity_id == "bulk"
    assert store.undo(bulk.id) is False

    store.employees.delete(emp.id)
    cleanup = store.list_history()[1]
    assert cleanup.entity_id == "cleanup"
    assert store.undo(cleanup.id) is False


def test_undo_attendance_update_refused_when_it_would_duplicate_a_day(store, make_employee, mark):
    emp = make_employee()
    first = mark(emp.id, "2025-01-05", AttendanceStatus.PRESENT)
    store.attendance.update(first.id, {"date": "2025-01-06"})
    move_entry = store.list_history()[0]
    mark(emp.id, "2025-01-05", AttendanceStatus.ABSENT)

    assert store.undo(move_entry.id) is False
    assert store.attendance.get(first.id).date == "2025-01-06"


def test_undo_employee_create_removes_the_employee(store, make_employee):
    emp = make_employee("Zed")

    assert store.undo(store.list_history()[0].id) is True

    assert store.employees.get(emp.id) is None
    assert store.list_history()[0].description == "Created employee: Zed (UNDONE)"


def test_undo_credit_update_restores_amount_and_paid_flag(store, make_employee):
    emp = make_employee()
    credit = store.credits.create({
        "employee_id": emp.id,
        "amount": 800.0,
        "date_taken": "2025-01-02",
        "promise_return_date": "2025-02-02",
        "is_paid": False,
    })
    store.credits.update(credit.id, {"amount": 1200.0, "is_paid": True})

    assert store.undo(store.list_history()[0].id) is True

    restored = store.credits.get(credit.id)
    assert restored.amount == 800.0
    assert restored.is_paid is False


def test_undo_task_update_restores_previous_state(store, make_employee):
    emp = make_employee()
    task = store.tasks.create({
        "employee_id": emp.id,
        "title": "Draft",
        "description": "d",
        "deadline": "2025-01-31",
        "priority": TaskPriority.LOW,
        "is_completed": False,
    })
    store.tasks.update(task.id, {"title": "Final", "priority": TaskPriority.HIGH, "is_completed": True})

    assert store.undo(store.list_history()[0].id) is True

    assert store.tasks.get(task.id) == task


def test_edited_history_snapshot_cannot_change_what_undo_restores(store, make_employee):
    emp = make_employee(salary=1000.0)
    store.employees.update(emp.id, {"salary": 2000.0})
    entry = store.list_history()[0]

    with pytest.raises(TypeError):
        entry.old_data["salary"] = 1.0
    exported = entry.to_dict()
    exported["oldData"]["salary"] = 1.0

    assert store.undo(entry.id) is True
    assert store.employees.get(emp.id).salary == 1000.0
    assert store.list_history()[0].old_data["salary"] == 1000.0
