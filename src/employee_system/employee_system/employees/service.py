from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_choice, require_email, require_non_empty
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import AmbiguousRecord, AuthorizationError, RecordNotFound
from .model import Employee, EmployeeDraft, EmployeeForm
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employee records (managers) and the self lookup (employees)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self, *, current_role: Optional[Role]) -> Sequence[Employee]:
        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can list employees")
        return self._employees.list_all()

    def get_own(self, email: str) -> Employee:
        """The single employee record whose email matches the signed-in user."""

        matches = list(self._employees.find_by_email(email))
        if not matches:
            raise RecordNotFound(f"No employee record for {email}")
        if len(matches) > 1:
            raise AmbiguousRecord(f"{len(matches)} employee records for {email}")
        return matches[0]

    @staticmethod
    def build_draft(form: EmployeeForm) -> EmployeeDraft:
        return EmployeeDraft(
            id=form.id or None,
            full_name=require_non_empty(form.full_name, "Full name"),
            email=require_email(form.email),
            role=require_choice(form.role, Role, "Role"),
            status=require_choice(form.status, EmployeeStatus, "Status"),
        )

    def save(self, *, current_role: Optional[Role], form: EmployeeForm) -> None:
        """Insert when the form carries no id, update that row otherwise."""

        if current_role != Role.MANAGER:
            raise AuthorizationError("Only managers can edit employees")

        draft = self.build_draft(form)
        if draft.id is None:
            self._employees.create(draft)
        else:
            self._employees.update(draft)
