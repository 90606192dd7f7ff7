"""
Task Repository Interface

Defines the contract for maintenance task data access operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from uuid import UUID

from ..entities.task import Task


class TaskRepository(ABC):
    """
    Abstract repository interface for Task entities.

    Defines the contract that infrastructure layer must implement
    for task persistence and retrieval operations.
    """

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Task | None:
        """
        Retrieve a task by its ID.

        Args:
            task_id: Unique task identifier

        Returns:
            Task entity or None if not found

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def find_unassigned_open(self, start: date, end: date) -> list[Task]:
        """
        Retrieve open, unassigned tasks due within a window.

        Args:
            start: First due date included
            end: Last due date included

        Returns:
            Tasks with status Open and no assignee, asset details attached

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def count_open_load_by_assignee(self, on_date: date) -> dict[UUID, int]:
        """
        Count non-completed tasks due on a date, grouped by assignee.

        Args:
            on_date: Due date to count

        Returns:
            Mapping of engineer ID to task count; unassigned tasks are ignored

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def assign(self, task_id: UUID, engineer_id: UUID, notes: str) -> None:
        """
        Write an assignee and explanation note onto a task.

        Args:
            task_id: Task to update
            engineer_id: Engineer receiving the task
            notes: Explanation recorded on the task

        Raises:
            RepositoryError: If the update fails
        """
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """
        Insert a new task.

        Args:
            task: Task entity to insert

        Returns:
            The stored task

        Raises:
            RepositoryError: If the insert fails
        """
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """
        Persist changes to an existing task.

        Args:
            task: Task entity to update

        Returns:
            The stored task

        Raises:
            RepositoryError: If the update fails
        """
        pass
