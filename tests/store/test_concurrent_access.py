from __future__ import annotations

import threading

from src.staff_manager.staff_manager.core.enums import AttendanceStatus, TaskPriority
from src.staff_manager.staff_manager.core.exceptions import ValidationError


def test_reads_during_writes_never_fail(store, make_employee):
    emp = make_employee()
    stop = threading.Event()
    errors = []

    def reader():
        while not stop.is_set():
            try:
                store.tasks.list_pending()
                store.tasks.list_by_employee(emp.id)
                store.get_stats()
            except Exception as e:  # collected for the assertion below
                errors.append(repr(e))
                return

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    try:
        for i in range(1000):
            store.tasks.create({
                "employee_id": emp.id,
                "title": f"T{i}",
                "description": "d",
                "deadline": "2025-01-31",
                "priority": TaskPriority.LOW,
                "is_completed": False,
            })
    finally:
        stop.set()
        for t in threads:
            t.join()

    assert errors == []
    assert len(store.tasks.list_pending()) == 1000


def test_concurrent_marks_for_same_day_keep_one_record(store, make_employee):
    emp = make_employee()
    barrier = threading.Barrier(8)
    outcomes = []

    def mark():
        barrier.wait()
        try:
            store.attendance.create({"employee_id": emp.id, "date": "2025-01-05", "status": AttendanceStatus.PRESENT})
            outcomes.append("created")
        except ValidationError:
            outcomes.append("rejected")

    threads = [threading.Thread(target=mark) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("created") == 1
    assert len(store.attendance.list_by_date("2025-01-05")) == 1
