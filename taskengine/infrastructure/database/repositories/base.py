"""
Base repository for the Supabase-backed implementations.

Wraps PostgREST and transport errors so callers only see RepositoryError.
"""

from typing import Any

import httpx
from postgrest import APIError

from ....core.observability import get_logger
from ....domain.shared.exceptions import RepositoryError
from ...supabase import SupabaseClient, get_supabase_client

logger = get_logger(__name__)


class SupabaseRepository:
    """Shared query execution for repositories over one table."""

    table_name: str

    def __init__(self, client: SupabaseClient | None = None):
        self._client = client or get_supabase_client()

    def table(self, name: str | None = None) -> Any:
        return self._client.admin.table(name or self.table_name)

    def _execute(self, operation: str, query: Any) -> list[dict[str, Any]]:
        """
        Run a built query and return its rows.

        Raises:
            RepositoryError: If the request fails or returns an API error
        """
        try:
            response = query.execute()
        except APIError as e:
            logger.error(
                "Supabase query failed",
                table=self.table_name,
                operation=operation,
                error=e.message,
            )
            raise RepositoryError(operation, str(e.message), {"table": self.table_name}) from e
        except httpx.HTTPError as e:
            logger.error(
                "Supabase request failed",
                table=self.table_name,
                operation=operation,
                error=str(e),
            )
            raise RepositoryError(operation, str(e), {"table": self.table_name}) from e
        return list(response.data or [])

    def _map(self, operation: str, mapper, rows: list[dict[str, Any]]) -> list:
        """Map rows to entities, reporting malformed rows as repository errors."""
        try:
            return [mapper(row) for row in rows]
        except (KeyError, ValueError) as e:
            raise RepositoryError(
                operation, f"malformed row: {e}", {"table": self.table_name}
            ) from e
