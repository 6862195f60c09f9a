from __future__ import annotations

from ..core.exceptions import AuthError
from ..remote.gateway import RemoteStoreGateway
from .model import Session


class AuthService:
    """Use case: sign in / sign out against the remote auth service."""

    def __init__(self, gateway: RemoteStoreGateway):
        self._gateway = gateway

    def sign_in(self, email: str, password: str) -> Session:
        email = (email or "").strip()
        if not email or not password:
            raise AuthError("Enter your email and password")
        return self._gateway.sign_in(email, password)

    def sign_out(self) -> None:
        self._gateway.sign_out()
