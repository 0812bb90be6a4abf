from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from supabase import Client, create_client

from ..config.settings import SupabaseSettings


class SupabaseNotInitializedError(RuntimeError):
    """Raised when the Supabase client is requested without URL or key."""


@dataclass
class SupabaseGateway:
    """Lazily created Supabase client shared by the repositories."""

    settings: SupabaseSettings
    _client: Optional[Client] = None

    def ensure_client(self) -> Client:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase settings are incomplete; missing {missing}.")
        self._client = create_client(self.settings.url, self.settings.api_key)
        return self._client

    def is_ready(self) -> bool:
        return self.settings.is_configured

    def table(self, name: str):
        return self.ensure_client().table(name)
