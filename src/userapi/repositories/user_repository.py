"""In-memory repository for user storage."""

import asyncio
import logging
from uuid import UUID

from src.userapi.domain.user import User
from src.userapi.repositories.interfaces import UserRepositoryInterface

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepositoryInterface):
    """Process-local user store.

    Users are listed ordered by last name, then first name, then ID so that
    consecutive pages never overlap or skip entries.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        """Initialize repository, optionally seeded with users.

        Args:
            users: Initial users to store
        """
        self._users: dict[UUID, User] = {}
        self._lock = asyncio.Lock()
        for user in users or []:
            self._users[user.id] = user

    def _sorted(self) -> list[User]:
        return sorted(
            self._users.values(),
            key=lambda u: (u.last_name.lower(), u.first_name.lower(), str(u.id)),
        )

    async def count(self) -> int:
        async with self._lock:
            return len(self._users)

    async def list_page(self, offset: int, limit: int) -> list[User]:
        async with self._lock:
            return self._sorted()[offset : offset + limit]

    async def get_by_id(self, user_id: UUID) -> User | None:
        async with self._lock:
            return self._users.get(user_id)

    async def add(self, user: User) -> User:
        async with self._lock:
            if user.id in self._users:
                raise ValueError(f"User '{user.id}' already exists")
            self._users[user.id] = user
        logger.debug("Stored user %s", user.id)
        return user
