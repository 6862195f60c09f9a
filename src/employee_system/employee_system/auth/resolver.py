"""Session/role resolution.

The resolver owns the current Session and Profile for one request and picks
exactly one dashboard for them. It is the only place that decides between
the manager and the employee views.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import ResolverState, Role
from ..core.exceptions import RemoteOperationError
from ..remote.gateway import RemoteStoreGateway, Subscription
from .model import Profile, Session
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManagerView:
    session: Session
    profile: Profile


@dataclass(frozen=True)
class EmployeeView:
    session: Session
    profile: Optional[Profile]

    @property
    def email(self) -> str:
        return self.session.email


DashboardView = Union[ManagerView, EmployeeView]


def choose_view(session: Session, profile: Optional[Profile]) -> DashboardView:
    """`manager` is the single privileged role; anything else gets the employee view."""

    if profile is not None and profile.role == Role.MANAGER:
        return ManagerView(session=session, profile=profile)
    return EmployeeView(session=session, profile=profile)


class SessionResolver:
    """UNRESOLVED -> LOADING -> AUTHENTICATED | ANONYMOUS.

    Use as a context manager (or call start()/close()) so the session-change
    subscription is always released.
    """

    def __init__(self, gateway: RemoteStoreGateway, profiles: ProfileRepository):
        self._gateway = gateway
        self._profiles = profiles
        self._subscription: Optional[Subscription] = None

        self.state = ResolverState.UNRESOLVED
        self.session: Optional[Session] = None
        self.profile: Optional[Profile] = None
        self.view: Optional[DashboardView] = None

    def __enter__(self) -> "SessionResolver":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def start(self) -> None:
        self.state = ResolverState.LOADING
        try:
            session = self._gateway.get_session()
        except RemoteOperationError:
            logger.warning("could not restore session, continuing signed out")
            session = None
        self.resolve(session)

        try:
            self._subscription = self._gateway.on_session_change(self._on_session_change)
        except RemoteOperationError:
            logger.warning("session change notifications unavailable")

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_session_change(self, event: str, session: Optional[Session]) -> None:
        logger.debug("auth event %s", event)
        self.resolve(session)

    def resolve(self, session: Optional[Session]) -> None:
        """Re-resolve from scratch for `session`, dropping any earlier profile."""

        self.session = session
        self.profile = None
        self.view = None

        if session is None:
            self.state = ResolverState.ANONYMOUS
            return

        self.state = ResolverState.LOADING
        token = session.access_token
        profile = self._fetch_profile(session.user_id)

        # a newer session arrived while we were fetching; its own resolve wins
        if self.session is None or self.session.access_token != token:
            logger.debug("discarding profile for superseded session")
            return

        self.profile = profile
        self.view = choose_view(session, profile)
        self.state = ResolverState.AUTHENTICATED

    def _fetch_profile(self, user_id: str) -> Optional[Profile]:
        try:
            profile = self._profiles.get_by_id(user_id)
        except RemoteOperationError:
            logger.warning("profile lookup failed for user %s", user_id)
            return None
        if profile is None:
            logger.warning("no profile row for user %s", user_id)
        return profile

    @property
    def is_authenticated(self) -> bool:
        return self.state == ResolverState.AUTHENTICATED
