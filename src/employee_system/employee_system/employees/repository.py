from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee, EmployeeDraft


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by full name."""

        raise NotImplementedError

    def find_by_email(self, email: str) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, draft: EmployeeDraft) -> None:
        raise NotImplementedError

    def update(self, draft: EmployeeDraft) -> None:
        raise NotImplementedError
