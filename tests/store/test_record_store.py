from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from src.staff_manager.staff_manager.core.enums import AttendanceStatus, EntityKind, HistoryAction, TaskPriority
from src.staff_manager.staff_manager.core.exceptions import ValidationError


def test_create_employee_assigns_id_timestamps_and_logs_history(store, make_employee):
    emp = make_employee("Alice")

    assert emp.id
    assert emp.created_at == emp.updated_at
    assert store.employees.get(emp.id) == emp

    history = store.list_history()
    assert len(history) == 1
    assert history[0].action == HistoryAction.CREATE
    assert history[0].entity == EntityKind.EMPLOYEE
    assert history[0].entity_id == emp.id
    assert history[0].description == "Created employee: Alice"
    assert history[0].new_data["name"] == "Alice"
    assert history[0].old_data is None


def test_update_merges_fields_and_snapshots_old_and_new(store, make_employee):
    emp = make_employee("Alice", salary=50000.0)

    updated = store.employees.update(emp.id, {"salary": 60000.0, "id": "hijack"})

    assert updated.id == emp.id
    assert updated.salary == 60000.0
    assert updated.name == "Alice"
    entry = store.list_history()[0]
    assert entry.action == HistoryAction.UPDATE
    assert entry.old_data["salary"] == 50000.0
    assert entry.new_data["salary"] == 60000.0


def test_update_and_delete_of_missing_record_change_nothing(store):
    assert store.employees.update("missing", {"name": "X"}) is None
    assert store.employees.delete("missing") is False
    assert store.list_history() == []


def test_attendance_requires_existing_employee(store, mark):
    with pytest.raises(ValidationError, match="Employee not found"):
        mark("nobody", "2025-01-05")
    assert store.attendance.count() == 0
    assert store.list_history() == []


def test_attendance_is_unique_per_employee_and_date(store, make_employee, mark):
    emp = make_employee()
    mark(emp.id, "2025-01-05", AttendanceStatus.PRESENT)

    with pytest.raises(ValidationError) as exc:
        mark(emp.id, "2025-01-05", AttendanceStatus.ABSENT)

    assert "Current status: present" in str(exc.value)
    assert len(store.attendance.list_by_employee(emp.id)) == 1
    # employee create + attendance create only
    assert len(store.list_history()) == 2


def test_attendance_update_cannot_collide_with_another_day(store, make_employee, mark):
    emp = make_employee()
    mark(emp.id, "2025-01-05")
    second = mark(emp.id, "2025-01-06")

    with pytest.raises(ValidationError):
        store.attendance.update(second.id, {"date": "2025-01-05"})

    assert store.attendance.get(second.id).date == "2025-01-06"


def test_attendance_description_uses_employee_name(store, make_employee, mark):
    emp = make_employee("Bob")
    mark(emp.id, "2025-01-05", AttendanceStatus.SICK_LEAVE)

    assert store.list_history()[0].description == "Marked Bob as sick-leave on 2025-01-05"


def test_delete_employee_cascades_to_dependents(store, make_employee, mark):
    emp = make_employee("Carol")
    other = make_employee("Dave")
    mark(emp.id, "2025-01-05")
    mark(emp.id, "2025-01-06")
    mark(other.id, "2025-01-05")
    store.credits.create({
        "employee_id": emp.id,
        "amount": 500.0,
        "date_taken": "2025-01-02",
        "promise_return_date": "2025-02-02",
        "is_paid": False,
    })
    store.tasks.create({
        "employee_id": emp.id,
        "title": "Report",
        "description": "Quarterly report",
        "deadline": "2025-01-31",
        "priority": TaskPriority.HIGH,
        "is_completed": False,
    })

    assert store.employees.delete(emp.id) is True

    assert store.employees.get(emp.id) is None
    assert store.attendance.list_by_employee(emp.id) == []
    assert store.credits.list_by_employee(emp.id) == []
    assert store.tasks.list_by_employee(emp.id) == []
    assert len(store.attendance.list_by_employee(other.id)) == 1

    history = store.list_history()
    assert history[0].action == HistoryAction.DELETE
    assert history[0].entity == EntityKind.EMPLOYEE
    assert history[0].description.startswith("Deleted employee: Carol")
    assert history[0].old_data["name"] == "Carol"

    cleanups = [h for h in history[1:4]]
    assert {h.entity for h in cleanups} == {EntityKind.ATTENDANCE, EntityKind.CREDIT, EntityKind.TASK}
    assert all(h.entity_id == "cleanup" for h in cleanups)
    assert any(h.description == "Cleaned up 2 attendance records for deleted employee: Carol" for h in cleanups)


def test_delete_without_dependents_logs_no_cleanup(store, make_employee):
    emp = make_employee("Eve")

    store.employees.delete(emp.id)

    history = store.list_history()
    assert [h.action for h in history] == [HistoryAction.DELETE, HistoryAction.CREATE]
    assert history[0].description == "Deleted employee: Eve"


def test_history_is_bounded_and_newest_first(store, make_employee):
    emp = make_employee("Frank", salary=0.0)
    for i in range(1, 120):
        store.employees.update(emp.id, {"salary": float(i)})

    history = store.list_history()
    assert len(history) == 100
    assert history[0].new_data["salary"] == 119.0
    assert history[-1].new_data["salary"] == 20.0


def test_credit_and_task_descriptions(store, make_employee):
    emp = make_employee("Gina")
    store.credits.create({
        "employee_id": emp.id,
        "amount": 1500.0,
        "date_taken": "2025-01-02",
        "promise_return_date": "2025-02-02",
        "is_paid": False,
    })
    assert store.list_history()[0].description == "Added credit: ₹1500 for Gina"

    store.tasks.create({
        "employee_id": emp.id,
        "title": "Onboarding",
        "description": "Set up laptop",
        "deadline": "2025-01-10",
        "priority": TaskPriority.LOW,
        "is_completed": False,
    })
    assert store.list_history()[0].description == "Created task: Onboarding for Gina"


def test_stats_count_present_today_pending_tasks_and_unpaid_credits(store, make_employee, mark, fixed_today):
    a = make_employee("Hank")
    b = make_employee("Ivy")
    mark(a.id, fixed_today.isoformat(), AttendanceStatus.PRESENT)
    mark(b.id, fixed_today.isoformat(), AttendanceStatus.ABSENT)
    store.tasks.create({
        "employee_id": a.id,
        "title": "T1",
        "description": "d",
        "deadline": "2025-01-31",
        "priority": TaskPriority.MEDIUM,
        "is_completed": False,
    })
    store.tasks.create({
        "employee_id": a.id,
        "title": "T2",
        "description": "d",
        "deadline": "2025-01-31",
        "priority": TaskPriority.MEDIUM,
        "is_completed": True,
    })
    store.credits.create({
        "employee_id": b.id,
        "amount": 100.0,
        "date_taken": "2025-01-02",
        "promise_return_date": "2025-02-02",
        "is_paid": True,
    })

    stats = store.get_stats(today=fixed_today)

    assert stats.to_dict() == {
        "totalEmployees": 2,
        "attendanceToday": 1,
        "pendingTasks": 1,
        "outstandingCredits": 0,
    }


def _credit(store, employee_id):
    return store.credits.create({
        "employee_id": employee_id,
        "amount": 300.0,
        "date_taken": "2025-01-02",
        "promise_return_date": "2025-02-02",
        "is_paid": False,
    })


def _task(store, employee_id):
    return store.tasks.create({
        "employee_id": employee_id,
        "title": "T",
        "description": "d",
        "deadline": "2025-01-31",
        "priority": TaskPriority.MEDIUM,
        "is_completed": False,
    })


def test_credit_and_task_cannot_move_to_unknown_employee(store, make_employee):
    emp = make_employee()
    credit = _credit(store, emp.id)
    task = _task(store, emp.id)
    entries = len(store.list_history())

    with pytest.raises(ValidationError, match="Employee not found"):
        store.credits.update(credit.id, {"employee_id": "ghost"})
    with pytest.raises(ValidationError, match="Employee not found"):
        store.tasks.update(task.id, {"employee_id": "ghost"})

    assert store.credits.get(credit.id).employee_id == emp.id
    assert store.tasks.get(task.id).employee_id == emp.id
    assert len(store.list_history()) == entries


def test_reassigned_credit_follows_new_employee_cascade(store, make_employee):
    first = make_employee("First")
    second = make_employee("Second")
    credit = _credit(store, first.id)

    store.credits.update(credit.id, {"employee_id": second.id})
    store.employees.delete(second.id)

    assert store.credits.get(credit.id) is None


def test_values_returned_by_reads_cannot_change_the_store(store, make_employee):
    emp = make_employee("Alice", salary=1000.0)

    with pytest.raises(FrozenInstanceError):
        store.employees.get(emp.id).salary = 1.0
    store.employees.list_all().clear()
    store.list_history().clear()
    store.list_history()[0].to_dict()["newData"]["salary"] = 1.0

    assert store.employees.get(emp.id).salary == 1000.0
    assert store.employees.count() == 1
    assert store.list_history()[0].new_data["salary"] == 1000.0
