"""
Pagination types for queries.

Provides standardized pagination for list queries.

Example:
    result = word_repository.list_with_stats(Pagination(page=2, page_size=20))
    for item in result.items:
        ...
    print(result.total, result.total_pages)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from lang_portal.exceptions import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    The page number is not clamped here: callers own that, and offsets are
    computed from whatever is passed. A page size below one has no meaningful
    page count and is rejected.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise InvalidArgumentError(f"Page size must be at least 1, got {self.page_size}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: List of items for the current page
        total: Total number of items matching the filter, ignoring pagination
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Number of items per page."""
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        """Total number of pages, ceil(total / page_size)."""
        return (self.total + self.pagination.page_size - 1) // self.pagination.page_size

    @property
    def has_next(self) -> bool:
        """Check if there is a next page."""
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there is a previous page."""
        return self.pagination.page > 1

    def map(self, fn: Callable[[T], U]) -> "PaginatedResult[U]":
        """Transform every item, keeping the pagination metadata."""
        return PaginatedResult(
            items=[fn(item) for item in self.items],
            total=self.total,
            pagination=self.pagination,
        )
