"""
Engineer Repository Interface

Defines the contract for team member data access operations.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from ..entities.engineer import Engineer


class EngineerRepository(ABC):
    """Abstract repository interface for Engineer entities."""

    @abstractmethod
    async def get_by_id(self, engineer_id: UUID) -> Engineer | None:
        """
        Retrieve an engineer by ID.

        Returns:
            Engineer entity or None if not found

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def get_eligible(self) -> list[Engineer]:
        """
        Retrieve every team member whose role allows task assignment.

        Returns:
            Engineers with a role other than Viewer

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def get_managers(self) -> list[Engineer]:
        """
        Retrieve team members who receive run summaries.

        Returns:
            Engineers with the Admin, Access All or Manager role

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass
