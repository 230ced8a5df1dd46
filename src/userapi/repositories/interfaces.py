"""Abstract base classes for repository interfaces.

Defines the contracts that concrete repository implementations must fulfill.
Services depend on these interfaces (not concrete classes) so that the
in-memory store can be swapped for a database-backed one, and so that tests
can mock data access.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

from src.userapi.domain.user import User

T = TypeVar("T")


class PageableRepositoryInterface(ABC, Generic[T]):
    """Abstract interface for a collection that can be read page by page.

    Supplies the two things the pagination engine needs from the query
    layer: the total number of matching items and one window of them.
    """

    @abstractmethod
    async def count(self) -> int:
        """Count all items in the collection.

        Returns:
            Non-negative item count
        """
        ...

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> list[T]:
        """List one window of the collection in a stable order.

        Args:
            offset: Number of items to skip
            limit: Maximum number of items to return

        Returns:
            Up to ``limit`` items; empty when ``offset`` is past the end
        """
        ...


class UserRepositoryInterface(PageableRepositoryInterface[User]):
    """Abstract interface for user storage and retrieval."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User identifier

        Returns:
            User if found, None otherwise
        """
        ...

    @abstractmethod
    async def add(self, user: User) -> User:
        """Store a new user.

        Args:
            user: User to store

        Returns:
            The stored user

        Raises:
            ValueError: If a user with the same ID already exists
        """
        ...
