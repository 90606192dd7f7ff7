"""Supabase implementation of the EngineerRepository interface."""

from uuid import UUID

from ....domain.maintenance.entities import MANAGER_ROLES, VIEWER_ROLE, Engineer
from ....domain.maintenance.repositories import EngineerRepository
from ..mappers import engineer_from_row
from .base import SupabaseRepository


class SupabaseEngineerRepository(SupabaseRepository, EngineerRepository):
    """Team members stored in the ``team`` table."""

    table_name = "team"

    async def get_by_id(self, engineer_id: UUID) -> Engineer | None:
        rows = self._execute(
            "get_engineer", self.table().select("*").eq("id", str(engineer_id)).limit(1)
        )
        engineers = self._map("get_engineer", engineer_from_row, rows)
        return engineers[0] if engineers else None

    async def get_eligible(self) -> list[Engineer]:
        rows = self._execute(
            "get_eligible_engineers", self.table().select("*").neq('"Role"', VIEWER_ROLE)
        )
        return self._map("get_eligible_engineers", engineer_from_row, rows)

    async def get_managers(self) -> list[Engineer]:
        rows = self._execute(
            "get_managers",
            self.table().select("*").in_('"Role"', sorted(MANAGER_ROLES)),
        )
        return self._map("get_managers", engineer_from_row, rows)
