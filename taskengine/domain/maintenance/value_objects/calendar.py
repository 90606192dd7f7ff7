"""
Work Calendar Value Objects

Holidays, leave requests and the weekend/holiday calendar used to decide which
days engineers can be given work.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from uuid import UUID

from pydantic import Field, model_validator

from ...shared.base import ValueObject
from ...shared.exceptions import ConstraintViolationError
from .enums import LeaveStatus

# Saturday and Sunday (date.weekday() numbering)
DEFAULT_WEEKEND_DAYS = frozenset({5, 6})

# Upper bound when searching forward for a work day
MAX_WORK_DAY_SEARCH = 366


class Holiday(ValueObject):
    """A single non-working calendar date."""

    holiday_date: date
    name: str
    holiday_type: str | None = None


class LeaveRequest(ValueObject):
    """An engineer's leave over an inclusive date range."""

    engineer_id: UUID
    start_date: date
    end_date: date
    status: LeaveStatus = LeaveStatus.PENDING

    @model_validator(mode="after")
    def _end_not_before_start(self) -> LeaveRequest:
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

    def covers(self, check_date: date) -> bool:
        """Check whether the leave spans the date (both ends inclusive)."""
        return self.start_date <= check_date <= self.end_date


class WorkCalendar(ValueObject):
    """
    Weekend and holiday calendar.

    A date is a non-work day if it falls on a weekend day or exactly matches
    a holiday date.
    """

    holidays: frozenset[date] = Field(default_factory=frozenset)
    weekend_days: frozenset[int] = DEFAULT_WEEKEND_DAYS

    @classmethod
    def from_holidays(cls, holidays: Iterable[Holiday]) -> WorkCalendar:
        return cls(holidays=frozenset(h.holiday_date for h in holidays))

    def is_weekend(self, check_date: date) -> bool:
        return check_date.weekday() in self.weekend_days

    def is_holiday(self, check_date: date) -> bool:
        return check_date in self.holidays

    def is_non_work_day(self, check_date: date) -> bool:
        return self.is_weekend(check_date) or self.is_holiday(check_date)

    def next_work_day(self, from_date: date) -> date:
        """
        Find the first work day on or after a date.

        Raises:
            ConstraintViolationError: If no work day exists within a year
        """
        candidate = from_date
        for _ in range(MAX_WORK_DAY_SEARCH):
            if not self.is_non_work_day(candidate):
                return candidate
            candidate += timedelta(days=1)
        raise ConstraintViolationError(
            f"No work day found within {MAX_WORK_DAY_SEARCH} days of {from_date}",
            {"from_date": from_date.isoformat()},
        )
