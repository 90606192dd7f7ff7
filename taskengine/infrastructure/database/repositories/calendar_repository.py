"""Supabase implementation of the CalendarRepository interface."""

from datetime import date

from ....domain.maintenance.repositories import CalendarRepository
from ....domain.maintenance.value_objects import Holiday, LeaveRequest, LeaveStatus
from ..mappers import holiday_from_row, leave_from_row
from .base import SupabaseRepository


class SupabaseCalendarRepository(SupabaseRepository, CalendarRepository):
    """Holidays from ``holidays`` and leave from ``availability``."""

    table_name = "holidays"

    async def get_holidays(self, start: date, end: date) -> list[Holiday]:
        rows = self._execute(
            "get_holidays",
            self.table()
            .select("date, name, type")
            .gte("date", start.isoformat())
            .lte("date", end.isoformat()),
        )
        return self._map("get_holidays", holiday_from_row, rows)

    async def get_approved_leave(self, start: date, end: date) -> list[LeaveRequest]:
        rows = self._execute(
            "get_approved_leave",
            self.table("availability")
            .select("engineer_id, start_date, end_date, status")
            .eq("status", LeaveStatus.APPROVED.value)
            .lte("start_date", end.isoformat())
            .gte("end_date", start.isoformat()),
        )
        return self._map("get_approved_leave", leave_from_row, rows)
