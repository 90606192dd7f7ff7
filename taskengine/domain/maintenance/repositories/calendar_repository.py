"""
Calendar Repository Interface

Defines the contract for holiday and leave lookups.
"""

from abc import ABC, abstractmethod
from datetime import date

from ..value_objects.calendar import Holiday, LeaveRequest


class CalendarRepository(ABC):
    """Abstract repository interface for holidays and engineer leave."""

    @abstractmethod
    async def get_holidays(self, start: date, end: date) -> list[Holiday]:
        """
        Retrieve holidays falling within a date range.

        Args:
            start: First date included
            end: Last date included

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def get_approved_leave(
        self, start: date, end: date
    ) -> list[LeaveRequest]:
        """
        Retrieve approved leave overlapping a date range.

        Args:
            start: First date of the range
            end: Last date of the range

        Returns:
            Approved leave requests with start_date <= end and end_date >= start

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass
