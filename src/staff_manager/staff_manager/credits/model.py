from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Credit:
    """Domain entity: a salary advance owed back by an employee."""

    id: str
    employee_id: str
    amount: float
    date_taken: str
    promise_return_date: str
    is_paid: bool
    created_at: str
    updated_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "amount": self.amount,
            "dateTaken": self.date_taken,
            "promiseReturnDate": self.promise_return_date,
            "isPaid": self.is_paid,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Credit":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            amount=float(data["amount"]),
            date_taken=str(data["dateTaken"]),
            promise_return_date=str(data["promiseReturnDate"]),
            is_paid=bool(data["isPaid"]),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
        )
