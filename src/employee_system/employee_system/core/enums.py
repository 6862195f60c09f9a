from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role tag carried by profiles and employee records."""

    EMPLOYEE = "employee"
    MANAGER = "manager"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TaskStatus(str, Enum):
    """Task workflow status as stored in the remote `tasks` table."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return {
            TaskStatus.TODO: "To Do",
            TaskStatus.IN_PROGRESS: "In Progress",
            TaskStatus.DONE: "Done",
        }[self]


class ResolverState(str, Enum):
    UNRESOLVED = "unresolved"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"
