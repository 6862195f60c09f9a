from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

import pytest

from src.employee_system.employee_system.auth.model import Session
from src.employee_system.employee_system.core.exceptions import AuthError, RemoteOperationError


class InMemoryBackend:
    """Stand-in for the hosted project: tables, users and live sessions."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {"profiles": [], "employees": [], "tasks": []}
        self.users: dict[str, dict] = {}
        self.sessions: dict[str, Session] = {}
        self.failures: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str]] = []
        self._ids = itertools.count(1)
        self._tokens = itertools.count(1)
        self._created = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)

    # setup helpers

    def add_user(self, email: str, password: str, *, role: Optional[str] = "employee", full_name: str = "") -> str:
        user_id = f"user-{len(self.users) + 1}"
        self.users[email] = {"id": user_id, "password": password}
        if role is not None:
            self.tables["profiles"].append({"id": user_id, "full_name": full_name or email, "role": role})
        return user_id

    def add_row(self, table: str, **values: Any) -> dict:
        row = {"id": next(self._ids), **values}
        if table in ("employees", "tasks"):
            self._created += timedelta(minutes=1)
            row.setdefault("created_at", self._created.isoformat())
        if table == "tasks":
            row.setdefault("description", "")
            row.setdefault("status", "todo")
            row.setdefault("due_date", None)
            row.setdefault("completed_at", None)
        self.tables[table].append(row)
        return row

    def fail(self, operation: str, table: str) -> None:
        self.failures.add((operation, table))

    def row(self, table: str, record_id: Any) -> Optional[dict]:
        for r in self.tables[table]:
            if str(r["id"]) == str(record_id):
                return r
        return None

    def new_session(self, email: str) -> Session:
        n = next(self._tokens)
        session = Session(
            user_id=self.users[email]["id"],
            email=email,
            access_token=f"access-{n}",
            refresh_token=f"refresh-{n}",
        )
        self.sessions[session.access_token] = session
        return session

    def _check(self, operation: str, table: str) -> None:
        self.calls.append((operation, table))
        if (operation, table) in self.failures:
            raise RemoteOperationError(f"{operation} {table} failed")


class FakeSubscription:
    def __init__(self, callbacks: list, callback: Callable):
        self._callbacks = callbacks
        self._callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if self._callback in self._callbacks:
            self._callbacks.remove(self._callback)
        self.active = False


class InMemoryGateway:
    def __init__(self, backend: InMemoryBackend, tokens: Optional[dict] = None):
        self._backend = backend
        self._tokens = dict(tokens) if tokens else None
        self.callbacks: list[Callable] = []
        self.subscriptions: list[FakeSubscription] = []

    def query(self, table, *, columns="*", filters=None, order=None):
        self._backend._check("query", table)
        found = [
            dict(r)
            for r in self._backend.tables[table]
            if all(r.get(k) == v for k, v in (filters or {}).items())
        ]
        if order is not None:
            found.sort(key=lambda r: (r.get(order.column) is None, r.get(order.column)), reverse=order.descending)
        return found

    def insert(self, table, record):
        self._backend._check("insert", table)
        self._backend.add_row(table, **dict(record))

    def update(self, table, record_id, patch):
        self._backend._check("update", table)
        row = self._backend.row(table, record_id)
        if row is not None:
            row.update(dict(patch))

    def delete(self, table, record_id):
        self._backend._check("delete", table)
        self._backend.tables[table] = [r for r in self._backend.tables[table] if str(r["id"]) != str(record_id)]

    def get_session(self):
        self._backend._check("get_session", "auth")
        if not self._tokens:
            return None
        return self._backend.sessions.get(self._tokens.get("access_token"))

    def sign_in(self, email, password):
        self._backend._check("sign_in", "auth")
        user = self._backend.users.get(email)
        if user is None or user["password"] != password:
            raise AuthError("Invalid email or password")
        session = self._backend.new_session(email)
        self._tokens = session.tokens()
        self._notify("SIGNED_IN", session)
        return session

    def sign_out(self):
        self._backend._check("sign_out", "auth")
        if self._tokens:
            self._backend.sessions.pop(self._tokens.get("access_token"), None)
        self._tokens = None
        self._notify("SIGNED_OUT", None)

    def on_session_change(self, callback):
        self.callbacks.append(callback)
        subscription = FakeSubscription(self.callbacks, callback)
        self.subscriptions.append(subscription)
        return subscription

    def _notify(self, event, session):
        for callback in list(self.callbacks):
            callback(event, session)


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def gateway(backend) -> InMemoryGateway:
    return InMemoryGateway(backend)


@pytest.fixture
def make_gateway(backend):
    def make(tokens=None) -> InMemoryGateway:
        return InMemoryGateway(backend, tokens)

    return make


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def app(backend, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.employee_system.employee_system.main import create_app

    gateways: list[InMemoryGateway] = []

    def factory(tokens):
        gw = InMemoryGateway(backend, tokens)
        gateways.append(gw)
        return gw

    flask_app = create_app(gateway_factory=factory)
    flask_app.config["GATEWAYS"] = gateways
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def form_token(client):
    """Plant a one-shot submission token in the client's session and return it."""

    counter = itertools.count(1)

    def issue() -> str:
        token = f"token-{next(counter)}"
        with client.session_transaction() as sess:
            sess["form_tokens"] = list(sess.get("form_tokens", [])) + [token]
        return token

    return issue


@pytest.fixture
def sign_in(client):
    def do(email: str, password: str):
        return client.post("/", data={"email": email, "password": password})

    return do
