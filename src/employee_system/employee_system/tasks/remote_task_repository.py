from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.constants import TASK_COLUMNS, TASKS_TABLE
from ..core.enums import TaskStatus
from ..remote.base import parse_rows
from ..remote.gateway import Order, RecordId, RemoteStoreGateway
from .model import Task, TaskDraft
from .repository import TaskRepository

_NEWEST_FIRST = Order("created_at", descending=True)


class RemoteTaskRepository(TaskRepository):
    def __init__(self, gateway: RemoteStoreGateway, *, clock: Optional[Callable] = None):
        self._gateway = gateway
        self._clock = clock or now_utc

    def list_for_manager(self) -> Sequence[Task]:
        rows = self._gateway.query(TASKS_TABLE, columns=TASK_COLUMNS, order=_NEWEST_FIRST)
        return parse_rows(TASKS_TABLE, rows, Task.from_row)

    def list_for_employee(self, email: str) -> Sequence[Task]:
        rows = self._gateway.query(
            TASKS_TABLE,
            columns=TASK_COLUMNS,
            filters={"employee_email": email},
            order=_NEWEST_FIRST,
        )
        return parse_rows(TASKS_TABLE, rows, Task.from_row)

    def create(self, draft: TaskDraft) -> None:
        self._gateway.insert(TASKS_TABLE, draft.to_record())

    def update(self, draft: TaskDraft) -> None:
        if draft.id is None:
            raise ValueError("update needs a task id")
        self._gateway.update(TASKS_TABLE, draft.id, draft.to_record())

    def update_status(self, task_id: RecordId, status: TaskStatus) -> None:
        fields = {"status": status.value}
        # completed_at is only ever set here, never cleared
        if status == TaskStatus.DONE:
            fields["completed_at"] = self._clock().isoformat()
        self._gateway.update(TASKS_TABLE, task_id, fields)

    def delete(self, task_id: RecordId) -> None:
        self._gateway.delete(TASKS_TABLE, task_id)
