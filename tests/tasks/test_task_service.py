from __future__ import annotations

import pytest

from src.employee_system.employee_system.core.enums import Role
from src.employee_system.employee_system.core.exceptions import AuthorizationError, ValidationError
from src.employee_system.employee_system.tasks.model import TaskForm
from src.employee_system.employee_system.tasks.remote_task_repository import RemoteTaskRepository
from src.employee_system.employee_system.tasks.service import TaskService


@pytest.fixture
def service(gateway) -> TaskService:
    return TaskService(RemoteTaskRepository(gateway))


def test_manager_creates_task_with_empty_due_date(backend, service):
    form = TaskForm(title="Plan sprint", due_date="", employee_email="ben@example.com")

    service.save(current_role=Role.MANAGER, form=form)

    row = backend.tables["tasks"][0]
    assert row["title"] == "Plan sprint"
    assert row["due_date"] is None


def test_manager_updates_existing_task(backend, service):
    row = backend.add_row("tasks", title="old", employee_email="ben@example.com")
    form = TaskForm(id=str(row["id"]), title="new", status="done", due_date="2026-04-01", employee_email="cat@example.com")

    service.save(current_role=Role.MANAGER, form=form)

    stored = backend.row("tasks", row["id"])
    assert stored["title"] == "new"
    assert stored["employee_email"] == "cat@example.com"
    assert stored["due_date"] == "2026-04-01"
    assert len(backend.tables["tasks"]) == 1


def test_empty_assignee_is_rejected_without_remote_call(backend, service):
    with pytest.raises(ValidationError):
        service.save(current_role=Role.MANAGER, form=TaskForm(title="Orphan", employee_email=""))

    assert ("insert", "tasks") not in backend.calls


@pytest.mark.parametrize(
    "form",
    [
        TaskForm(title="", employee_email="ben@example.com"),
        TaskForm(title="x", status="blocked", employee_email="ben@example.com"),
        TaskForm(title="x", due_date="31/12/2026", employee_email="ben@example.com"),
    ],
)
def test_invalid_forms_raise_validation_error(service, form):
    with pytest.raises(ValidationError):
        service.save(current_role=Role.MANAGER, form=form)


@pytest.mark.parametrize("role", [Role.EMPLOYEE, None])
def test_only_managers_mutate_tasks(service, role):
    with pytest.raises(AuthorizationError):
        service.save(current_role=role, form=TaskForm(title="x", employee_email="ben@example.com"))
    with pytest.raises(AuthorizationError):
        service.delete(current_role=role, task_id=1)
    with pytest.raises(AuthorizationError):
        service.list_all(current_role=role)


def test_employee_changes_status_of_own_task(backend, service):
    row = backend.add_row("tasks", title="t", employee_email="ben@example.com")

    service.change_my_status(email="ben@example.com", task_id=str(row["id"]), status="in_progress")

    assert backend.row("tasks", row["id"])["status"] == "in_progress"


def test_employee_cannot_change_someone_elses_task(backend, service):
    row = backend.add_row("tasks", title="t", employee_email="cat@example.com")

    with pytest.raises(AuthorizationError):
        service.change_my_status(email="ben@example.com", task_id=row["id"], status="done")

    assert backend.row("tasks", row["id"])["status"] == "todo"
    assert ("update", "tasks") not in backend.calls


def test_unknown_status_is_rejected(backend, service):
    row = backend.add_row("tasks", title="t", employee_email="ben@example.com")

    with pytest.raises(ValidationError):
        service.change_my_status(email="ben@example.com", task_id=row["id"], status="archived")
