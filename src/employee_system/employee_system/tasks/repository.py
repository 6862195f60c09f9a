from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import TaskStatus
from ..remote.gateway import RecordId
from .model import Task, TaskDraft


class TaskRepository(Protocol):
    """Access to the remote `tasks` table.

    Every method lets RemoteOperationError propagate unchanged; the caller
    decides what the user sees.
    """

    def list_for_manager(self) -> Sequence[Task]:
        """All tasks, newest first."""

        raise NotImplementedError

    def list_for_employee(self, email: str) -> Sequence[Task]:
        """Tasks assigned to `email`, newest first."""

        raise NotImplementedError

    def create(self, draft: TaskDraft) -> None:
        raise NotImplementedError

    def update(self, draft: TaskDraft) -> None:
        raise NotImplementedError

    def update_status(self, task_id: RecordId, status: TaskStatus) -> None:
        """Patch only the status (and completed_at when it lands on done)."""

        raise NotImplementedError

    def delete(self, task_id: RecordId) -> None:
        raise NotImplementedError
