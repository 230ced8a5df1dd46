"""Service layer for user business logic."""

import logging
from uuid import UUID

from src.userapi.domain.pagination import PaginationRequest, PaginationResponse
from src.userapi.domain.user import User, UserCreate, UserResponse
from src.userapi.repositories.interfaces import UserRepositoryInterface
from src.userapi.services.pagination_service import PaginationService

logger = logging.getLogger(__name__)


class UserNotFoundError(Exception):
    """Raised when a user is not found."""


class UserService:
    """Business logic for user operations."""

    def __init__(
        self,
        repository: UserRepositoryInterface,
        pagination_service: PaginationService,
    ) -> None:
        """Initialize service with repository and pagination service.

        Args:
            repository: UserRepositoryInterface for data access
            pagination_service: PaginationService used for list endpoints
        """
        self._repository = repository
        self._pagination = pagination_service

    async def list_users(
        self, request: PaginationRequest, base: str
    ) -> PaginationResponse[list[UserResponse]]:
        """List one page of users.

        Args:
            request: Raw page/per_page from the client
            base: URL of the users collection

        Returns:
            Paginated response of public user representations
        """
        return await self._pagination.paginate_repository(
            self._repository, request, base, transform=UserResponse.from_user
        )

    async def get_user(self, user_id: UUID) -> UserResponse:
        """Get a single user.

        Args:
            user_id: User identifier

        Returns:
            Public user representation

        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return UserResponse.from_user(user)

    async def create_user(self, data: UserCreate) -> UserResponse:
        """Create a new user.

        Args:
            data: Validated user fields

        Returns:
            Public representation of the created user
        """
        user = await self._repository.add(
            User(
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
            )
        )
        logger.info("Created user %s", user.id)
        return UserResponse.from_user(user)
