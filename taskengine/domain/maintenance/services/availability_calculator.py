"""
AvailabilityCalculator Domain Service

Decides whether an engineer can take work on a given date, combining the
weekend/holiday calendar with approved leave.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from uuid import UUID

from ..entities.engineer import Engineer
from ..value_objects.calendar import LeaveRequest, WorkCalendar


class AvailabilityCalculator:
    """
    Pure availability check over a fixed calendar and leave set.

    Leave is indexed per engineer once at construction; requests that are not
    approved are dropped here so callers may pass the raw list.
    """

    def __init__(
        self, calendar: WorkCalendar, leave_requests: Iterable[LeaveRequest] = ()
    ):
        self.calendar = calendar
        self._leave: dict[UUID, list[LeaveRequest]] = defaultdict(list)
        for leave in leave_requests:
            if leave.is_approved:
                self._leave[leave.engineer_id].append(leave)

    def is_on_leave(self, engineer_id: UUID, check_date: date) -> bool:
        return any(leave.covers(check_date) for leave in self._leave.get(engineer_id, ()))

    def is_available(self, engineer_id: UUID, check_date: date) -> bool:
        """
        Check whether an engineer can be given work on a date.

        Args:
            engineer_id: Engineer to check
            check_date: Calendar day to check

        Returns:
            False on weekends, holidays and approved leave days
        """
        if self.calendar.is_non_work_day(check_date):
            return False
        return not self.is_on_leave(engineer_id, check_date)

    def available_engineers(
        self, engineers: Iterable[Engineer], check_date: date
    ) -> list[Engineer]:
        """Filter engineers to those available on a date, keeping order."""
        return [e for e in engineers if self.is_available(e.id, check_date)]
