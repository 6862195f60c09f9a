from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import DomainError, ValidationError
from ..employees.model import Employee, EmployeeForm
from ..employees.service import EmployeeService
from ..remote.gateway import RecordId
from ..tasks.model import Task, TaskForm
from ..tasks.service import TaskService
from .section import Section

logger = logging.getLogger(__name__)


class ManagerDashboard:
    """Employees and tasks lists, each with its create/edit form.

    Every successful mutation closes the form and reloads the whole list from
    the remote store; nothing is merged locally.
    """

    def __init__(self, employees: EmployeeService, tasks: TaskService, *, current_role: Optional[Role]):
        self._employee_service = employees
        self._task_service = tasks
        self._role = current_role

        self.employees: Section[Employee] = Section()
        self.tasks: Section[Task] = Section()

    def load(self) -> "ManagerDashboard":
        self.load_employees()
        self.load_tasks()
        return self

    def load_employees(self) -> None:
        self.employees.error = ""
        try:
            self.employees.items = list(self._employee_service.list_all(current_role=self._role))
        except DomainError:
            logger.exception("loading employees failed")
            self.employees.error = "Could not load employees"

    def load_tasks(self) -> None:
        self.tasks.error = ""
        try:
            self.tasks.items = list(self._task_service.list_all(current_role=self._role))
        except DomainError:
            logger.exception("loading tasks failed")
            self.tasks.error = "Could not load tasks"

    # employees

    def start_create_employee(self) -> None:
        self.employees.editing = EmployeeForm()

    def start_edit_employee(self, employee_id: RecordId) -> None:
        employee = self._find(self.employees, employee_id)
        self.employees.editing = EmployeeForm.from_employee(employee) if employee else None

    def save_employee(self, form: EmployeeForm) -> bool:
        self.employees.error = ""
        try:
            self._employee_service.save(current_role=self._role, form=form)
        except ValidationError as e:
            self.employees.editing = form
            self.employees.error = str(e)
            return False
        except DomainError:
            logger.exception("saving employee failed")
            self.employees.editing = form
            self.employees.error = "Could not create employee" if form.is_new else "Could not update employee"
            return False

        self.employees.editing = None
        self.load_employees()
        return True

    # tasks

    def start_create_task(self) -> None:
        first_email = self.employees.items[0].email if self.employees.items else ""
        self.tasks.editing = TaskForm.blank(employee_email=first_email)

    def start_edit_task(self, task_id: RecordId) -> None:
        task = self._find(self.tasks, task_id)
        self.tasks.editing = TaskForm.from_task(task) if task else None

    def save_task(self, form: TaskForm) -> bool:
        self.tasks.error = ""
        try:
            self._task_service.save(current_role=self._role, form=form)
        except ValidationError as e:
            self.tasks.editing = form
            self.tasks.error = str(e)
            return False
        except DomainError:
            logger.exception("saving task failed")
            self.tasks.editing = form
            self.tasks.error = "Could not save task"
            return False

        self.tasks.editing = None
        self.load_tasks()
        return True

    def delete_task(self, task_id: RecordId, *, confirmed: bool) -> bool:
        """Delete only once the confirmation has been acknowledged."""

        if not confirmed:
            return False

        self.tasks.error = ""
        try:
            self._task_service.delete(current_role=self._role, task_id=task_id)
        except DomainError:
            logger.exception("deleting task %s failed", task_id)
            self.tasks.error = "Could not delete task"
            return False

        self.load_tasks()
        return True

    def find_task(self, task_id: RecordId) -> Optional[Task]:
        return self._find(self.tasks, task_id)

    @staticmethod
    def _find(section: Section, record_id: RecordId):
        for item in section.items:
            if str(item.id) == str(record_id):
                return item
        return None
