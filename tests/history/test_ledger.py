from __future__ import annotations

import pytest

from src.staff_manager.staff_manager.core.enums import EntityKind, HistoryAction
from src.staff_manager.staff_manager.history.ledger import InMemoryHistoryLedger
from src.staff_manager.staff_manager.history.model import HistoryEntry


def _entry(i: int) -> HistoryEntry:
    return HistoryEntry(
        id=f"h{i}",
        timestamp=f"2025-01-01T00:00:{i:02d}.000",
        action=HistoryAction.CREATE,
        entity=EntityKind.EMPLOYEE,
        entity_id=f"e{i}",
        description=f"Created employee: E{i}",
    )


def test_ledger_keeps_newest_entries_up_to_limit():
    ledger = InMemoryHistoryLedger(limit=3)
    for i in range(5):
        ledger.append(_entry(i))

    assert [e.id for e in ledger.list()] == ["h4", "h3", "h2"]
    assert ledger.get("h0") is None


def test_mark_undone_appends_suffix_once():
    ledger = InMemoryHistoryLedger()
    ledger.append(_entry(1))

    assert ledger.mark_undone("h1") is True
    assert ledger.mark_undone("h1") is True
    assert ledger.get("h1").description == "Created employee: E1 (UNDONE)"
    assert ledger.get("h1").is_undone
    assert ledger.mark_undone("missing") is False


def test_list_returns_a_copy():
    ledger = InMemoryHistoryLedger()
    ledger.append(_entry(1))

    ledger.list().clear()

    assert len(ledger) == 1


def test_history_entry_round_trips_wire_format():
    entry = _entry(7)
    data = entry.to_dict()

    assert data["entityId"] == "e7"
    assert data["oldData"] is None
    assert HistoryEntry.from_dict(data) == entry


def test_snapshots_are_read_only_copies():
    source = {"id": "e1", "salary": 1000.0}
    entry = HistoryEntry(
        id="h1",
        timestamp="2025-01-01T00:00:00.000",
        action=HistoryAction.UPDATE,
        entity=EntityKind.EMPLOYEE,
        entity_id="e1",
        description="Updated employee: A",
        old_data=source,
    )
    ledger = InMemoryHistoryLedger()
    ledger.append(entry)

    source["salary"] = 5.0
    with pytest.raises(TypeError):
        ledger.get("h1").old_data["salary"] = 5.0

    assert ledger.list()[0].old_data["salary"] == 1000.0
    assert ledger.get("h1").marked_undone().old_data["salary"] == 1000.0
    assert ledger.get("h1").to_dict()["oldData"] == {"id": "e1", "salary": 1000.0}
