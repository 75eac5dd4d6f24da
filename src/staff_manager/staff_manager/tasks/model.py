from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import TaskPriority


@dataclass(frozen=True)
class Task:
    id: str
    employee_id: str
    title: str
    description: str
    deadline: str
    priority: TaskPriority
    is_completed: bool
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "title": self.title,
            "description": self.description,
            "deadline": self.deadline,
            "priority": self.priority.value,
            "isCompleted": self.is_completed,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            title=str(data["title"]),
            description=str(data.get("description") or ""),
            deadline=str(data["deadline"]),
            priority=TaskPriority(data["priority"]),
            is_completed=bool(data["isCompleted"]),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
        )
