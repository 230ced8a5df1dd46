"""Pagination engine for list endpoints.

Turns a requested page/page-size and a total item count into page
metadata, navigation links, and a response envelope wrapping an opaque
payload. Everything here is pure: no I/O, no clock, no shared state.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

DEFAULT_PER_PAGE = 10


class PaginationRequest(BaseModel):
    """Raw pagination query parameters as supplied by the client.

    Values are untrusted: either may be missing, zero, or negative.
    """

    model_config = ConfigDict(frozen=True)

    page: int | None = Field(default=None, description="Requested page (1-indexed)")
    per_page: int | None = Field(default=None, description="Requested page size")

    def resolve(
        self, total: int, default_per_page: int = DEFAULT_PER_PAGE
    ) -> "Pagination":
        """Compute page metadata for this request against *total* items."""
        return compute_pagination(self.page, self.per_page, total, default_per_page)


class Pagination(BaseModel):
    """Computed page metadata."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(description="Zero-indexed position of the first item")
    page: int = Field(ge=1, description="Current page (1-indexed)")
    per_page: int = Field(ge=1, description="Items per page")
    total: int = Field(ge=0, description="Total number of matching items")
    total_pages: int = Field(ge=0, description="Number of pages available")


class Links(BaseModel):
    """Navigation links for a paginated collection."""

    model_config = ConfigDict(frozen=True)

    base: str
    first: str
    last: str
    prev: str | None = None
    next: str | None = None


class PaginationResponse(BaseModel, Generic[T]):
    """Response envelope: links, page metadata, and the page payload."""

    model_config = ConfigDict(frozen=True)

    links: Links
    pagination: Pagination
    data: T


def compute_pagination(
    page: int | None,
    per_page: int | None,
    total: int,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> Pagination:
    """Normalize the requested window and compute page metadata.

    A missing or non-positive ``page`` becomes 1 and a missing or
    non-positive ``per_page`` becomes ``default_per_page``. The offset is
    not clamped against ``total``: a page past the end yields an offset
    beyond the data set, and the caller's query returns an empty page.

    Args:
        page: Requested page, 1-indexed
        per_page: Requested page size
        total: Total number of matching items (non-negative)
        default_per_page: Page size used when ``per_page`` is unusable

    Returns:
        Pagination metadata
    """
    if page is None or page <= 0:
        page = 1
    if per_page is None or per_page <= 0:
        per_page = default_per_page

    total_pages = (total + per_page - 1) // per_page
    offset = (page - 1) * per_page

    return Pagination(
        offset=offset,
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
    )


def _page_url(base: str, page: int, per_page: int) -> str:
    return f"{base}?page={page}&per_page={per_page}"


def build_links(pagination: Pagination, base: str) -> Links:
    """Build first/last/prev/next links for *pagination*.

    ``base`` is interpolated as-is and must already be URL-encoded. With no
    pages at all, ``last`` points at page 1 like ``first``.
    """
    per_page = pagination.per_page
    last_page = max(pagination.total_pages, 1)

    prev = None
    if pagination.page > 1:
        # A page past the end still links back to the last real page
        prev_page = max(min(pagination.page - 1, pagination.total_pages), 1)
        prev = _page_url(base, prev_page, per_page)

    next_ = None
    if pagination.page < pagination.total_pages:
        next_ = _page_url(base, pagination.page + 1, per_page)

    return Links(
        base=base,
        first=_page_url(base, 1, per_page),
        last=_page_url(base, last_page, per_page),
        prev=prev,
        next=next_,
    )


def paginate(pagination: Pagination, data: T, base: str) -> PaginationResponse[T]:
    """Wrap *data* in a response envelope with links for *pagination*."""
    return PaginationResponse(
        links=build_links(pagination, base),
        pagination=pagination,
        data=data,
    )
