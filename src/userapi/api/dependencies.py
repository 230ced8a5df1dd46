"""Centralized FastAPI dependency providers.

All repository and service construction is defined here so that
routers never manually instantiate dependencies or duplicate
configuration constants like the default page size.

The default page size is read from :func:`~src.userapi.config.get_settings`
so that ``USERAPI_DEFAULT_PER_PAGE`` is respected everywhere.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query

from src.userapi.config import Settings, get_settings
from src.userapi.domain.pagination import PaginationRequest
from src.userapi.repositories.interfaces import UserRepositoryInterface
from src.userapi.repositories.user_repository import InMemoryUserRepository
from src.userapi.services.pagination_service import PaginationService
from src.userapi.services.user_service import UserService

# ---------------------------------------------------------------------------
# Request parameter providers
# ---------------------------------------------------------------------------


def get_pagination_request(
    page: Annotated[int | None, Query(description="Page to return (1-indexed)")] = None,
    per_page: Annotated[int | None, Query(description="Items per page")] = None,
) -> PaginationRequest:
    """Dependency provider for raw pagination query parameters.

    Non-positive values are passed through unchanged; the pagination
    engine clamps them instead of rejecting the request.
    """
    return PaginationRequest(page=page, per_page=per_page)


# ---------------------------------------------------------------------------
# Repository providers
# ---------------------------------------------------------------------------


@lru_cache
def get_user_repository() -> UserRepositoryInterface:
    """Dependency provider for the process-wide user repository."""
    return InMemoryUserRepository()


# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_pagination_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PaginationService:
    """Dependency provider for PaginationService."""
    return PaginationService(default_per_page=settings.default_per_page)


def get_user_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
    pagination_service: Annotated[PaginationService, Depends(get_pagination_service)],
) -> UserService:
    """Dependency provider for UserService."""
    return UserService(repository, pagination_service)
