from __future__ import annotations

from typing import Any, Dict

from ..common.validators import (
    parse_fields,
    require_bool,
    require_choice,
    require_iso_date,
    require_non_empty,
)
from ..core.enums import TaskPriority

_RULES = {
    "employeeId": ("employee_id", lambda v: require_non_empty(v, "Employee ID")),
    "title": ("title", lambda v: require_non_empty(v, "Title")),
    "description": ("description", lambda v: require_non_empty(v, "Description")),
    "deadline": ("deadline", lambda v: require_iso_date(v, "Deadline")),
    "priority": ("priority", lambda v: require_choice(v, TaskPriority, "Priority")),
    "isCompleted": ("is_completed", lambda v: require_bool(v, "isCompleted")),
}


def parse_task_create(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES, defaults={"isCompleted": False, "priority": TaskPriority.MEDIUM})


def parse_task_update(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES, partial=True)
