from __future__ import annotations

from typing import Any, Dict

from ..common.validators import parse_fields, require_bool, require_iso_date, require_non_empty, require_number

_RULES = {
    "employeeId": ("employee_id", lambda v: require_non_empty(v, "Employee ID")),
    "amount": ("amount", lambda v: require_number(v, "Amount")),
    "dateTaken": ("date_taken", lambda v: require_iso_date(v, "Date taken")),
    "promiseReturnDate": ("promise_return_date", lambda v: require_iso_date(v, "Promise return date")),
    "isPaid": ("is_paid", lambda v: require_bool(v, "isPaid")),
}


def parse_credit_create(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES, defaults={"isPaid": False})


def parse_credit_update(payload: Any) -> Dict[str, Any]:
    return parse_fields(payload, _RULES, partial=True)
