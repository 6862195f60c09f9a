from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Union

from ..auth.model import Session

RecordId = Union[int, str]
SessionCallback = Callable[[str, Optional[Session]], None]


@dataclass(frozen=True)
class Order:
    column: str
    descending: bool = False


class Subscription(Protocol):
    def unsubscribe(self) -> None:
        raise NotImplementedError


class RemoteStoreGateway(Protocol):
    """Boundary over the hosted auth + database service.

    Note (DIP): repositories and the session resolver depend on this
    interface, never on the Supabase client directly. Every method raises
    RemoteOperationError on backend failure; `sign_in` raises AuthError
    when the credentials are rejected.
    """

    def query(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[Order] = None,
    ) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def insert(self, table: str, record: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def update(self, table: str, record_id: RecordId, patch: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, table: str, record_id: RecordId) -> None:
        raise NotImplementedError

    def get_session(self) -> Optional[Session]:
        raise NotImplementedError

    def sign_in(self, email: str, password: str) -> Session:
        raise NotImplementedError

    def sign_out(self) -> None:
        raise NotImplementedError

    def on_session_change(self, callback: SessionCallback) -> Subscription:
        """Deliver (event, session|None) pairs until the subscription is released."""

        raise NotImplementedError
