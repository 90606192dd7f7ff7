"""
Supabase client integration.
Provides the service-role connection used by the repositories.
"""

from functools import lru_cache

from supabase import Client, ClientOptions, create_client

from ..core.config import settings
from ..domain.shared.exceptions import ConfigurationError


class SupabaseClient:
    """Wrapper for the Supabase client."""

    def __init__(self, url: str | None = None, service_key: str | None = None):
        self._url = url or settings.SUPABASE_URL
        self._service_key = service_key or settings.SUPABASE_SERVICE_KEY
        self._admin_client: Client | None = None

    @property
    def url(self) -> str:
        if not self._url:
            raise ConfigurationError("SUPABASE_URL")
        return self._url

    @property
    def service_key(self) -> str:
        if not self._service_key:
            raise ConfigurationError("SUPABASE_SERVICE_KEY")
        return self._service_key

    @property
    def admin(self) -> Client:
        """Get the Supabase admin client with service key (bypasses row level security)."""
        if not self._admin_client:
            self._admin_client = create_client(
                supabase_url=self.url,
                supabase_key=self.service_key,
                options=ClientOptions(
                    auto_refresh_token=False,
                    persist_session=False,
                ),
            )
        return self._admin_client


@lru_cache()
def get_supabase_client() -> SupabaseClient:
    """Get the singleton Supabase client instance."""
    return SupabaseClient()
