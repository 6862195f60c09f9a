from __future__ import annotations

import re

import pytest


@pytest.fixture
def as_manager(backend, sign_in):
    backend.add_user("boss@x.com", "pw", role="manager")
    sign_in("boss@x.com", "pw")


@pytest.fixture
def as_employee(backend, sign_in):
    backend.add_user("ben@x.com", "pw", role="employee")
    backend.add_row("employees", full_name="Ben", email="ben@x.com", role="employee", status="active")
    sign_in("ben@x.com", "pw")


def _employee_form(token, **overrides):
    data = {"id": "", "full_name": "Ann", "email": "ann@x.com", "role": "employee", "status": "active"}
    data.update(overrides)
    data["csrf_token"] = token
    return data


def test_manager_creates_employee_and_sees_it(as_manager, backend, client, form_token):
    resp = client.post("/employees/save", data=_employee_form(form_token()), follow_redirects=True)

    assert resp.status_code == 200
    assert b"Employee saved." in resp.data
    assert b"ann@x.com" in resp.data
    assert len(backend.tables["employees"]) == 1


def test_replayed_form_token_is_rejected(as_manager, backend, client, form_token):
    token = form_token()
    client.post("/employees/save", data=_employee_form(token))

    resp = client.post("/employees/save", data=_employee_form(token), follow_redirects=True)

    assert b"That form was already submitted." in resp.data
    assert len(backend.tables["employees"]) == 1


def test_missing_form_token_is_rejected(as_manager, backend, client):
    resp = client.post("/employees/save", data=_employee_form(""))

    assert resp.status_code == 302
    assert backend.tables["employees"] == []


def test_invalid_employee_form_rerenders_with_message(as_manager, backend, client, form_token):
    resp = client.post("/employees/save", data=_employee_form(form_token(), email="nope"))

    assert resp.status_code == 200
    assert b"Email is not a valid address" in resp.data
    assert b'value="nope"' in resp.data
    assert backend.tables["employees"] == []


def test_manager_edits_existing_employee(as_manager, backend, client, form_token):
    row = backend.add_row("employees", full_name="Ben", email="ben@x.com", role="employee", status="active")

    page = client.get(f"/dashboard?employee={row['id']}")
    assert b"Edit Employee" in page.data

    client.post(
        "/employees/save",
        data=_employee_form(form_token(), id=str(row["id"]), full_name="Ben B", email="ben@x.com"),
    )

    assert backend.row("employees", row["id"])["full_name"] == "Ben B"


def test_employee_cannot_post_manager_forms(as_employee, backend, client, form_token):
    resp = client.post("/employees/save", data=_employee_form(form_token()))

    assert resp.status_code == 403
    assert len(backend.tables["employees"]) == 1


def test_new_task_form_without_employees(as_manager, client):
    page = client.get("/dashboard?task=new")

    assert page.status_code == 200
    assert b"Add Task" in page.data
    assert b"No employees to assign" in page.data


def test_saving_task_without_assignee_is_blocked(as_manager, backend, client, form_token):
    resp = client.post(
        "/tasks/save",
        data={"title": "Orphan", "employee_email": "", "status": "todo", "csrf_token": form_token()},
    )

    assert resp.status_code == 200
    assert b"Choose an employee to assign this task to" in resp.data
    assert backend.tables["tasks"] == []


def test_manager_creates_task(as_manager, backend, client, form_token):
    backend.add_row("employees", full_name="Ben", email="ben@x.com", role="employee", status="active")

    client.post(
        "/tasks/save",
        data={
            "title": "Ship",
            "description": "",
            "employee_email": "ben@x.com",
            "status": "todo",
            "due_date": "2026-05-01",
            "csrf_token": form_token(),
        },
    )

    row = backend.tables["tasks"][0]
    assert (row["title"], row["due_date"]) == ("Ship", "2026-05-01")


def test_delete_asks_for_confirmation_first(as_manager, backend, client, form_token):
    row = backend.add_row("tasks", title="Doomed", employee_email="ben@x.com")

    page = client.get(f"/tasks/{row['id']}/delete")
    assert b"Delete this task?" in page.data
    assert b"Doomed" in page.data
    assert backend.row("tasks", row["id"]) is not None

    client.post(f"/tasks/{row['id']}/delete", data={"csrf_token": form_token()})
    assert backend.row("tasks", row["id"]) is not None

    client.post(f"/tasks/{row['id']}/delete", data={"csrf_token": form_token(), "confirm": "yes"})
    assert backend.row("tasks", row["id"]) is None


def test_confirm_page_for_missing_task_redirects(as_manager, client):
    resp = client.get("/tasks/999/delete")

    assert resp.status_code == 302


def test_employee_changes_own_task_status(as_employee, backend, client, form_token):
    row = backend.add_row("tasks", title="mine", employee_email="ben@x.com")

    resp = client.post(f"/my/tasks/{row['id']}/status", data={"status": "done", "csrf_token": form_token()})

    assert resp.status_code == 302
    assert backend.row("tasks", row["id"])["status"] == "done"
    assert backend.row("tasks", row["id"])["completed_at"] is not None


def test_employee_cannot_change_foreign_task(as_employee, backend, client, form_token):
    row = backend.add_row("tasks", title="theirs", employee_email="cat@x.com")

    resp = client.post(f"/my/tasks/{row['id']}/status", data={"status": "done", "csrf_token": form_token()})

    assert resp.status_code == 200
    assert b"Could not update task status" in resp.data
    assert backend.row("tasks", row["id"])["status"] == "todo"


def test_employee_dashboard_lists_own_tasks_only(as_employee, backend, client):
    backend.add_row("tasks", title="mine", employee_email="ben@x.com")
    backend.add_row("tasks", title="theirs", employee_email="cat@x.com")

    page = client.get("/dashboard")

    assert b"mine" in page.data
    assert b"theirs" not in page.data


def _submitted_assignee(html: str) -> str:
    """Value a browser would send for the assignee select."""

    select = re.search(r'<select name="employee_email">(.*?)</select>', html, re.S).group(1)
    options = re.findall(r'<option value="([^"]*)"([^>]*)>', select)
    selected = [value for value, attrs in options if "selected" in attrs]
    return selected[0] if selected else options[0][0]


def test_editing_task_keeps_assignee_missing_from_employee_list(as_manager, backend, client, form_token):
    backend.add_row("employees", full_name="Ada", email="ada@x.com", role="employee", status="active")
    row = backend.add_row("tasks", title="Old title", employee_email="gone@x.com")

    page = client.get(f"/dashboard?task={row['id']}")
    assignee = _submitted_assignee(page.get_data(as_text=True))
    assert assignee == "gone@x.com"

    client.post(
        "/tasks/save",
        data={
            "id": str(row["id"]),
            "title": "New title",
            "employee_email": assignee,
            "status": "todo",
            "csrf_token": form_token(),
        },
    )

    stored = backend.row("tasks", row["id"])
    assert stored["title"] == "New title"
    assert stored["employee_email"] == "gone@x.com"


def test_editing_task_keeps_assignee_when_employees_fail_to_load(as_manager, backend, client):
    row = backend.add_row("tasks", title="t", employee_email="ben@x.com")
    backend.fail("query", "employees")

    page = client.get(f"/dashboard?task={row['id']}")

    assert _submitted_assignee(page.get_data(as_text=True)) == "ben@x.com"
    assert b"No employees to assign" not in page.data


def test_unreadable_task_row_renders_section_error(as_manager, backend, client):
    backend.add_row("tasks", title="t", employee_email="ben@x.com", created_at="not-a-timestamp")

    page = client.get("/dashboard")

    assert page.status_code == 200
    assert b"Could not load tasks" in page.data
    assert b"Manage Employees" in page.data
