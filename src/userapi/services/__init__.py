# Services package (business logic layer)

from src.userapi.services.pagination_service import PaginationService
from src.userapi.services.user_service import UserNotFoundError, UserService

__all__ = [
    "PaginationService",
    "UserNotFoundError",
    "UserService",
]
