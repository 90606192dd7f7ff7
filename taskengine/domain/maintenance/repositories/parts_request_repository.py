"""
Parts Request Repository Interface

Defines the contract for parts request data access operations.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from ..entities.parts_request import PartsRequest


class PartsRequestRepository(ABC):
    """Abstract repository interface for PartsRequest entities."""

    @abstractmethod
    async def get_by_id(self, parts_request_id: UUID) -> PartsRequest | None:
        """
        Retrieve a parts request by ID.

        Returns:
            PartsRequest entity or None if not found

        Raises:
            RepositoryError: If retrieval operation fails
        """
        pass

    @abstractmethod
    async def save(self, parts_request: PartsRequest) -> PartsRequest:
        """
        Persist changes to a parts request.

        Returns:
            The stored parts request

        Raises:
            RepositoryError: If the update fails
        """
        pass
