from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.employee_system.employee_system.container import build_container
from src.employee_system.employee_system.core.enums import Role
from src.employee_system.employee_system.employees.model import EmployeeForm
from src.employee_system.employee_system.tasks.model import TaskForm

DEMO_EMPLOYEES = [
    EmployeeForm(full_name="Ada Manager", email="manager@example.com", role="manager"),
    EmployeeForm(full_name="Ben Employee", email="employee@example.com"),
]

DEMO_TASKS = [
    TaskForm(title="Read onboarding guide", employee_email="employee@example.com"),
    TaskForm(title="Submit timesheet", status="in_progress", due_date="2026-12-31", employee_email="employee@example.com"),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(supabase_config=dict(settings.SUPABASE_CONFIG))

    email = os.getenv("DEMO_MANAGER_EMAIL", "manager@example.com")
    password = os.getenv("DEMO_MANAGER_PASSWORD")
    if not password:
        sys.exit("Set DEMO_MANAGER_PASSWORD (and optionally DEMO_MANAGER_EMAIL) first.")

    services = container.for_request()
    services.auth_service.sign_in(email, password)

    existing = {e.email for e in services.employee_service.list_all(current_role=Role.MANAGER)}
    for form in DEMO_EMPLOYEES:
        if form.email not in existing:
            services.employee_service.save(current_role=Role.MANAGER, form=form)

    for form in DEMO_TASKS:
        services.task_service.save(current_role=Role.MANAGER, form=form)

    services.auth_service.sign_out()
    print(f"OK: Seeded {len(DEMO_EMPLOYEES)} employees / {len(DEMO_TASKS)} tasks -> {container.conn.config.url}")


if __name__ == "__main__":
    main()
