from __future__ import annotations

from src.staff_manager.staff_manager.common.datetime_utils import today_iso
from src.staff_manager.staff_manager.core.enums import AttendanceStatus
from src.staff_manager.staff_manager.store.sample_data import seed_sample_data


def test_seed_creates_sample_employees_marked_present_today(store):
    created = seed_sample_data(store)

    assert [e.name for e in created] == ["John Doe", "Jane Smith"]
    today = store.attendance.list_by_date(today_iso())
    assert len(today) == 2
    assert all(a.status == AttendanceStatus.PRESENT for a in today)


def test_seed_is_a_noop_when_employees_exist(store, make_employee):
    make_employee()

    assert seed_sample_data(store) == []
    assert store.employees.count() == 1
