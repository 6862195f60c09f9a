from __future__ import annotations

from typing import Sequence

from ..core.constants import EMPLOYEE_COLUMNS, EMPLOYEES_TABLE
from ..remote.base import parse_rows
from ..remote.gateway import Order, RemoteStoreGateway
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository


class RemoteEmployeeRepository(EmployeeRepository):
    def __init__(self, gateway: RemoteStoreGateway):
        self._gateway = gateway

    def list_all(self) -> Sequence[Employee]:
        rows = self._gateway.query(EMPLOYEES_TABLE, columns=EMPLOYEE_COLUMNS, order=Order("full_name"))
        return parse_rows(EMPLOYEES_TABLE, rows, Employee.from_row)

    def find_by_email(self, email: str) -> Sequence[Employee]:
        rows = self._gateway.query(EMPLOYEES_TABLE, columns=EMPLOYEE_COLUMNS, filters={"email": email})
        return parse_rows(EMPLOYEES_TABLE, rows, Employee.from_row)

    def create(self, draft: EmployeeDraft) -> None:
        self._gateway.insert(EMPLOYEES_TABLE, draft.to_record())

    def update(self, draft: EmployeeDraft) -> None:
        if draft.id is None:
            raise ValueError("update needs an employee id")
        self._gateway.update(EMPLOYEES_TABLE, draft.id, draft.to_record())
