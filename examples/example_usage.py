"""Example: use the service layer without Flask.

Signs in with EMAIL / PASSWORD from the environment and prints that user's tasks.
"""

import importlib
import os

from config import get_settings_module

from src.employee_system.employee_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(supabase_config=settings.SUPABASE_CONFIG)
    services = container.for_request()

    session = services.auth_service.sign_in(os.environ["EMAIL"], os.environ["PASSWORD"])
    for task in services.task_service.list_mine(email=session.email):
        print(task.status.label, task.title, task.due_date or "-")
    services.auth_service.sign_out()


if __name__ == "__main__":
    main()
