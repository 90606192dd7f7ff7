"""Supabase implementation of the PartsRequestRepository interface."""

from uuid import UUID

from ....domain.maintenance.entities import PartsRequest
from ....domain.maintenance.repositories import PartsRequestRepository
from ..mappers import parts_request_from_row, parts_request_to_row
from .base import SupabaseRepository


class SupabasePartsRequestRepository(SupabaseRepository, PartsRequestRepository):
    table_name = "parts_requests"

    async def get_by_id(self, parts_request_id: UUID) -> PartsRequest | None:
        rows = self._execute(
            "get_parts_request",
            self.table().select("*").eq("id", str(parts_request_id)).limit(1),
        )
        requests = self._map("get_parts_request", parts_request_from_row, rows)
        return requests[0] if requests else None

    async def save(self, parts_request: PartsRequest) -> PartsRequest:
        self._execute(
            "save_parts_request",
            self.table()
            .update(parts_request_to_row(parts_request))
            .eq("id", str(parts_request.id)),
        )
        return parts_request
