from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import DomainError, ValidationError
from ..employees.model import Employee
from ..employees.service import EmployeeService
from ..remote.gateway import RecordId
from ..tasks.model import Task
from ..tasks.service import TaskService
from .section import Section

logger = logging.getLogger(__name__)


class EmployeeDashboard:
    """Read-only profile plus the caller's own tasks (status changes only)."""

    def __init__(self, email: str, employees: EmployeeService, tasks: TaskService):
        self._email = email
        self._employee_service = employees
        self._task_service = tasks

        self.employee: Optional[Employee] = None
        self.profile_error = ""
        self.tasks: Section[Task] = Section()

    @property
    def email(self) -> str:
        return self._email

    def load(self) -> "EmployeeDashboard":
        self.load_employee()
        self.load_tasks()
        return self

    def load_employee(self) -> None:
        self.profile_error = ""
        try:
            self.employee = self._employee_service.get_own(self._email)
        except DomainError:
            logger.exception("loading employee record for %s failed", self._email)
            self.employee = None
            self.profile_error = "Could not load your employee record"

    def load_tasks(self) -> None:
        self.tasks.error = ""
        try:
            self.tasks.items = list(self._task_service.list_mine(email=self._email))
        except DomainError:
            logger.exception("loading tasks for %s failed", self._email)
            self.tasks.error = "Could not load your tasks"

    def change_status(self, task_id: RecordId, status: str) -> bool:
        try:
            self._task_service.change_my_status(email=self._email, task_id=task_id, status=status)
        except ValidationError as e:
            self.tasks.error = str(e)
            return False
        except DomainError:
            logger.exception("status change for task %s failed", task_id)
            self.tasks.error = "Could not update task status"
            return False

        self.load_tasks()
        return True
