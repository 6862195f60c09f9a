from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.validators import require_choice, require_email, require_non_empty
from ..core.enums import Role, TaskStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..remote.gateway import RecordId
from .model import Task, TaskDraft, TaskForm
from .repository import TaskRepository


def _require_manager(current_role: Optional[Role]) -> None:
    if current_role != Role.MANAGER:
        raise AuthorizationError("Only managers can manage tasks")


class TaskService:
    """Use cases over tasks: manager CRUD and the employee status change."""

    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def list_all(self, *, current_role: Optional[Role]) -> Sequence[Task]:
        _require_manager(current_role)
        return self._tasks.list_for_manager()

    def list_mine(self, *, email: str) -> Sequence[Task]:
        return self._tasks.list_for_employee(email)

    @staticmethod
    def build_draft(form: TaskForm) -> TaskDraft:
        title = require_non_empty(form.title, "Title")
        if not (form.employee_email or "").strip():
            raise ValidationError("Choose an employee to assign this task to")
        employee_email = require_email(form.employee_email, "Assignee")
        status = require_choice(form.status, TaskStatus, "Status")

        return TaskDraft(
            id=form.id or None,
            title=title,
            description=(form.description or "").strip(),
            status=status,
            due_date=parse_optional_date(form.due_date),
            employee_email=employee_email,
        )

    def save(self, *, current_role: Optional[Role], form: TaskForm) -> None:
        _require_manager(current_role)
        draft = self.build_draft(form)
        if draft.id is None:
            self._tasks.create(draft)
        else:
            self._tasks.update(draft)

    def delete(self, *, current_role: Optional[Role], task_id: RecordId) -> None:
        _require_manager(current_role)
        self._tasks.delete(task_id)

    def change_my_status(self, *, email: str, task_id: RecordId, status: str) -> None:
        """Status-only update by the assigned employee."""

        new_status = require_choice(status, TaskStatus, "Status")
        mine = self._tasks.list_for_employee(email)
        if not any(str(t.id) == str(task_id) for t in mine):
            raise AuthorizationError("This task is not assigned to you")

        self._tasks.update_status(task_id, new_status)
