from __future__ import annotations

from typing import Optional, Protocol

from ..core.constants import PROFILE_COLUMNS, PROFILES_TABLE
from ..remote.base import parse_rows
from ..remote.gateway import RemoteStoreGateway
from .model import Profile


class ProfileRepository(Protocol):
    def get_by_id(self, user_id: str) -> Optional[Profile]:
        raise NotImplementedError


class RemoteProfileRepository(ProfileRepository):
    def __init__(self, gateway: RemoteStoreGateway):
        self._gateway = gateway

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        rows = self._gateway.query(PROFILES_TABLE, columns=PROFILE_COLUMNS, filters={"id": user_id})
        if len(rows) != 1:
            return None
        return parse_rows(PROFILES_TABLE, rows, Profile.from_row)[0]
