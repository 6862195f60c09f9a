from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import date_input_value, parse_iso_date, parse_timestamp
from ..core.enums import TaskStatus
from ..remote.gateway import RecordId


@dataclass(frozen=True)
class Task:
    """Domain entity: one row of the remote `tasks` table."""

    id: RecordId
    title: str
    description: str
    status: TaskStatus
    due_date: Optional[date]
    employee_email: str
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Task":
        due = row.get("due_date")
        if isinstance(due, datetime):
            due = due.date()
        elif isinstance(due, str) and due:
            due = parse_iso_date(due[:10])
        return cls(
            id=row["id"],
            title=row.get("title") or "",
            description=row.get("description") or "",
            status=TaskStatus(row.get("status") or TaskStatus.TODO.value),
            due_date=due or None,
            employee_email=row.get("employee_email") or "",
            created_at=parse_timestamp(row.get("created_at")),
            completed_at=parse_timestamp(row.get("completed_at")),
        )


@dataclass(frozen=True)
class TaskDraft:
    """Validated values ready to be written; `id` is None for a new task."""

    id: Optional[RecordId]
    title: str
    description: str
    status: TaskStatus
    due_date: Optional[date]
    employee_email: str

    def to_record(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "employee_email": self.employee_email,
        }


@dataclass(frozen=True)
class TaskForm:
    """Raw values of the create/edit task form, exactly as typed."""

    id: str = ""
    title: str = ""
    description: str = ""
    status: str = TaskStatus.TODO.value
    due_date: str = ""
    employee_email: str = ""

    @property
    def is_new(self) -> bool:
        return not self.id

    @classmethod
    def blank(cls, employee_email: str = "") -> "TaskForm":
        return cls(employee_email=employee_email)

    @classmethod
    def from_task(cls, task: Task) -> "TaskForm":
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status.value,
            due_date=date_input_value(task.due_date),
            employee_email=task.employee_email,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TaskForm":
        blank = cls()
        return replace(
            blank,
            **{
                name: str(data.get(name) or "")
                for name in ("id", "title", "description", "status", "due_date", "employee_email")
                if data.get(name) is not None
            },
        )
