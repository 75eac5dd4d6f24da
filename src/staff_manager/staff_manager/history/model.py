from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..core.constants import UNDONE_SUFFIX
from ..core.enums import EntityKind, HistoryAction


@dataclass(frozen=True)
class HistoryEntry:
    """Audit record of one mutation.

    `old_data` / `new_data` are wire-format snapshots (camelCase mappings) of
    the record before and after the mutation; `None` when not applicable.
    Snapshots are held as read-only copies, so nothing handed out by the
    ledger can alter what it recorded.
    """

    id: str
    timestamp: str
    action: HistoryAction
    entity: EntityKind
    entity_id: str
    description: str
    old_data: Optional[Mapping[str, Any]] = None
    new_data: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        object.__setattr__(self, "old_data", _freeze(self.old_data))
        object.__setattr__(self, "new_data", _freeze(self.new_data))

    @property
    def is_undone(self) -> bool:
        return self.description.endswith(UNDONE_SUFFIX)

    def marked_undone(self) -> "HistoryEntry":
        if self.is_undone:
            return self
        return replace(self, description=self.description + UNDONE_SUFFIX)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "action": self.action.value,
            "entity": self.entity.value,
            "entityId": self.entity_id,
            "oldData": _thaw(self.old_data),
            "newData": _thaw(self.new_data),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HistoryEntry":
        return cls(
            id=str(data["id"]),
            timestamp=str(data["timestamp"]),
            action=HistoryAction(data["action"]),
            entity=EntityKind(data["entity"]),
            entity_id=str(data["entityId"]),
            description=str(data["description"]),
            old_data=data.get("oldData"),
            new_data=data.get("newData"),
        )


def _freeze(snapshot: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if snapshot is None or isinstance(snapshot, MappingProxyType):
        return snapshot
    return MappingProxyType(copy.deepcopy(dict(snapshot)))


def _thaw(snapshot: Optional[Mapping[str, Any]]) -> Optional[dict]:
    if snapshot is None:
        return None
    return copy.deepcopy(dict(snapshot))
