"""API router for user management."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.userapi.api.dependencies import get_pagination_request, get_user_service
from src.userapi.domain.pagination import PaginationRequest, PaginationResponse
from src.userapi.domain.user import UserCreate, UserResponse
from src.userapi.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def collection_base_url(request: Request) -> str:
    """Return the request URL without its query string.

    Used as the ``base`` for pagination links, e.g.
    ``http://127.0.0.1:8000/api/v1/users``.
    """
    return str(request.url.replace(query="", fragment=""))


@router.get("", response_model=PaginationResponse[list[UserResponse]])
async def list_users(
    request: Request,
    pagination: Annotated[PaginationRequest, Depends(get_pagination_request)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> PaginationResponse[list[UserResponse]]:
    """List users one page at a time.

    Args:
        pagination: Raw ``page`` and ``per_page`` query parameters
            (defaults 1 and the configured page size; non-positive values
            fall back to those defaults)

    Returns:
        Paginated envelope with links, page metadata, and the users
    """
    return await service.list_users(pagination, collection_base_url(request))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Get a single user by ID.

    Raises:
        UserNotFoundError: Mapped to 404 by the app's exception handlers
    """
    return await service.get_user(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Create a new user."""
    return await service.create_user(data)
