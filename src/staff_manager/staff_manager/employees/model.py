from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Note: plain data object; the store hands these out as read-only values.
    """

    id: str
    name: str
    salary: float
    joining_date: str
    mobile: str
    email: str
    role: str
    status: EmployeeStatus
    created_at: str
    updated_at: str
    profile_photo: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "salary": self.salary,
            "joiningDate": self.joining_date,
            "mobile": self.mobile,
            "email": self.email,
            "role": self.role,
            "profilePhoto": self.profile_photo,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            salary=float(data["salary"]),
            joining_date=str(data["joiningDate"]),
            mobile=str(data["mobile"]),
            email=str(data["email"]),
            role=str(data["role"]),
            status=EmployeeStatus(data["status"]),
            created_at=str(data["createdAt"]),
            updated_at=str(data["updatedAt"]),
            profile_photo=data.get("profilePhoto"),
        )
