"""Service layer that pages through a repository."""

import logging
from collections.abc import Callable
from typing import Any

from src.userapi.domain.pagination import (
    DEFAULT_PER_PAGE,
    PaginationRequest,
    PaginationResponse,
    compute_pagination,
    paginate,
)
from src.userapi.repositories.interfaces import PageableRepositoryInterface

logger = logging.getLogger(__name__)


class PaginationService:
    """Fetches one page from a repository and wraps it in a response envelope.

    Counts the collection, computes the page window, loads only that window,
    and attaches navigation links built from the collection's base URL.
    """

    def __init__(self, default_per_page: int = DEFAULT_PER_PAGE) -> None:
        """Initialize service with the page size used for unusable requests.

        Args:
            default_per_page: Page size applied when the client omits
                ``per_page`` or sends a non-positive value
        """
        self.default_per_page = default_per_page

    async def paginate_repository(
        self,
        repository: PageableRepositoryInterface[Any],
        request: PaginationRequest,
        base: str,
        transform: Callable[[Any], Any] | None = None,
    ) -> PaginationResponse[list[Any]]:
        """Build a paginated response for *request* over *repository*.

        Args:
            repository: Collection to page through
            request: Raw page/per_page from the client
            base: Already-encoded URL of the collection
            transform: Optional per-item mapping applied to the page

        Returns:
            Response envelope whose data is the list of (transformed) items
        """
        total = await repository.count()
        pagination = compute_pagination(
            request.page, request.per_page, total, self.default_per_page
        )
        logger.debug(
            "Paging %s: page=%d per_page=%d offset=%d total=%d",
            base,
            pagination.page,
            pagination.per_page,
            pagination.offset,
            pagination.total,
        )

        items = await repository.list_page(pagination.offset, pagination.per_page)
        if transform is not None:
            items = [transform(item) for item in items]

        return paginate(pagination, items, base)
