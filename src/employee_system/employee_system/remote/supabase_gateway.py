from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from supabase import Client
from supabase_auth.errors import AuthApiError, AuthError as RemoteAuthError

from ..auth.model import Session
from ..core.exceptions import AuthError
from .base import remote_call, rows
from .connection import SupabaseConnection
from .gateway import Order, RecordId, RemoteStoreGateway, SessionCallback, Subscription

logger = logging.getLogger(__name__)


def _to_session(remote_session: Any) -> Optional[Session]:
    if remote_session is None or getattr(remote_session, "user", None) is None:
        return None
    return Session(
        user_id=str(remote_session.user.id),
        email=remote_session.user.email or "",
        access_token=remote_session.access_token,
        refresh_token=remote_session.refresh_token,
    )


class SupabaseGateway(RemoteStoreGateway):
    """RemoteStoreGateway backed by supabase-py (PostgREST tables + GoTrue auth).

    One gateway per request: the client is created lazily and, when the
    caller kept tokens from an earlier sign-in, the session is restored on it
    before the first call.
    """

    def __init__(self, conn_factory: SupabaseConnection, tokens: Optional[Mapping[str, str]] = None):
        self._conn_factory = conn_factory
        self._tokens = dict(tokens) if tokens else None
        self._client: Optional[Client] = None

    def _get_client(self) -> Client:
        if self._client is None:
            client = self._conn_factory.connect()
            if self._tokens:
                try:
                    client.auth.set_session(self._tokens["access_token"], self._tokens["refresh_token"])
                except (RemoteAuthError, KeyError) as e:
                    # expired or revoked tokens: carry on as anonymous
                    logger.info("stored session could not be restored: %s", e)
            self._client = client
        return self._client

    def query(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: Optional[Mapping[str, Any]] = None,
        order: Optional[Order] = None,
    ) -> List[Dict[str, Any]]:
        with remote_call(f"query {table}"):
            request = self._get_client().table(table).select(columns)
            for column, value in (filters or {}).items():
                request = request.eq(column, value)
            if order is not None:
                request = request.order(order.column, desc=order.descending)
            return rows(request.execute())

    def insert(self, table: str, record: Mapping[str, Any]) -> None:
        with remote_call(f"insert {table}"):
            self._get_client().table(table).insert([dict(record)]).execute()

    def update(self, table: str, record_id: RecordId, patch: Mapping[str, Any]) -> None:
        with remote_call(f"update {table}"):
            self._get_client().table(table).update(dict(patch)).eq("id", record_id).execute()

    def delete(self, table: str, record_id: RecordId) -> None:
        with remote_call(f"delete {table}"):
            self._get_client().table(table).delete().eq("id", record_id).execute()

    def get_session(self) -> Optional[Session]:
        with remote_call("get session"):
            return _to_session(self._get_client().auth.get_session())

    def sign_in(self, email: str, password: str) -> Session:
        with remote_call("sign in"):
            try:
                response = self._get_client().auth.sign_in_with_password({"email": email, "password": password})
            except AuthApiError as e:
                logger.info("sign in rejected for %s: %s", email, e)
                raise AuthError("Invalid email or password") from e

            session = _to_session(response.session)
            if session is None:
                raise AuthError("Invalid email or password")
            self._tokens = session.tokens()
            return session

    def sign_out(self) -> None:
        with remote_call("sign out"):
            self._get_client().auth.sign_out()
        self._tokens = None

    def on_session_change(self, callback: SessionCallback) -> Subscription:
        def relay(event: Any, remote_session: Any) -> None:
            callback(str(event), _to_session(remote_session))

        with remote_call("subscribe to session changes"):
            return self._get_client().auth.on_auth_state_change(relay)
