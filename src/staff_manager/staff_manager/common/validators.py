from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_number(value: Any, field_name: str, *, min_value: float = 0) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    if value < min_value:
        raise ValidationError(f"{field_name} must be positive")
    return float(value)


def require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_email(value: Any, field_name: str = "Email") -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(email):
        raise ValidationError("Invalid email format")
    return email


def require_iso_date(value: Any, field_name: str) -> str:
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format") from None


def require_choice(value: Any, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


def require_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field_name} must be an object")
    return value


FieldRule = Tuple[str, Callable[[Any], Any]]


def parse_fields(
    payload: Any,
    rules: Mapping[str, FieldRule],
    *,
    partial: bool = False,
    optional: Iterable[str] = (),
    defaults: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Validate a JSON payload against per-key rules.

    `rules` maps the wire (camelCase) key to `(attribute_name, validator)`.
    Returns a dict keyed by attribute name. With `partial=True` only keys
    present in the payload are validated and returned (update semantics).
    Unknown keys are ignored.
    """
    data = require_mapping(payload, "Request body")
    optional = set(optional)
    defaults = defaults or {}

    out: Dict[str, Any] = {}
    for key, (attr, validate) in rules.items():
        if key not in data or data[key] is None:
            if partial:
                continue
            if key in defaults:
                out[attr] = defaults[key]
                continue
            if key in optional:
                out[attr] = None
                continue
        out[attr] = validate(data.get(key))
    return out
