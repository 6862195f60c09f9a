from __future__ import annotations

from dataclasses import dataclass

from supabase import Client, ClientOptions, create_client

from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SupabaseConfig:
    url: str
    anon_key: str

    def missing_settings(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_settings()


class SupabaseConnection:
    """Supabase client factory, built once per app by `build_container`.

    Note: We create one short-lived client per request; the client keeps the
    signed-in user's auth state in memory, so it must never be shared between users.
    """

    def __init__(self, config: SupabaseConfig):
        self._config = config

    @property
    def config(self) -> SupabaseConfig:
        return self._config

    def connect(self) -> Client:
        missing = self._config.missing_settings()
        if missing:
            raise ConfigurationError(f"Supabase is not configured (missing {', '.join(missing)})")
        return create_client(
            self._config.url,
            self._config.anon_key,
            options=ClientOptions(auto_refresh_token=False, persist_session=False),
        )
