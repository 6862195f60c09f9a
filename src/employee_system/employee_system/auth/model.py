from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Session:
    """Credential bundle issued by the remote auth service.

    The tokens are what we keep in the signed Flask session cookie between requests.
    """

    user_id: str
    email: str
    access_token: str
    refresh_token: str

    def tokens(self) -> dict:
        return {"access_token": self.access_token, "refresh_token": self.refresh_token}


@dataclass(frozen=True)
class Profile:
    """Role-bearing record linked one-to-one with a session's user id.

    `role` is None when the stored value is not a known role.
    """

    id: str
    full_name: str
    role: Optional[Role]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Profile":
        try:
            role: Optional[Role] = Role(row.get("role"))
        except ValueError:
            role = None
        return cls(id=str(row["id"]), full_name=row.get("full_name") or "", role=role)
