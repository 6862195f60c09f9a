from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import EmployeeStatus, Role
from ..remote.gateway import RecordId


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the remote `employees` table.

    `role` here is the business role shown on the record; it is not the
    profile role used for access decisions and the two may differ.
    """

    id: RecordId
    full_name: str
    email: str
    role: Role
    status: EmployeeStatus

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        return cls(
            id=row["id"],
            full_name=row.get("full_name") or "",
            email=row.get("email") or "",
            role=Role(row.get("role") or Role.EMPLOYEE.value),
            status=EmployeeStatus(row.get("status") or EmployeeStatus.ACTIVE.value),
        )


@dataclass(frozen=True)
class EmployeeDraft:
    id: Optional[RecordId]
    full_name: str
    email: str
    role: Role
    status: EmployeeStatus

    def to_record(self) -> dict:
        return {
            "full_name": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class EmployeeForm:
    id: str = ""
    full_name: str = ""
    email: str = ""
    role: str = Role.EMPLOYEE.value
    status: str = EmployeeStatus.ACTIVE.value

    @property
    def is_new(self) -> bool:
        return not self.id

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeForm":
        return cls(
            id=str(employee.id),
            full_name=employee.full_name,
            email=employee.email,
            role=employee.role.value,
            status=employee.status.value,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EmployeeForm":
        return cls(
            id=str(data.get("id") or ""),
            full_name=str(data.get("full_name") or ""),
            email=str(data.get("email") or ""),
            role=str(data.get("role") or Role.EMPLOYEE.value),
            status=str(data.get("status") or EmployeeStatus.ACTIVE.value),
        )
