# Domain models package (Pydantic models)

from src.userapi.domain.pagination import (
    DEFAULT_PER_PAGE,
    Links,
    Pagination,
    PaginationRequest,
    PaginationResponse,
    build_links,
    compute_pagination,
    paginate,
)
from src.userapi.domain.user import User, UserCreate, UserResponse

__all__ = [
    "DEFAULT_PER_PAGE",
    "Links",
    "Pagination",
    "PaginationRequest",
    "PaginationResponse",
    "build_links",
    "compute_pagination",
    "paginate",
    "User",
    "UserCreate",
    "UserResponse",
]
