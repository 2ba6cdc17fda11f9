"""
Paginated query engine.

Runs a filtered, ordered, paged read against any select() projection and
returns the page together with the total number of matching rows. The count
is derived from the same statement (minus ordering and paging), so grouping
and filters always agree between the two.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, Row, Select, func, select
from sqlalchemy.orm import Session

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.exceptions import InvalidArgumentError
from lang_portal.infrastructure.common.store_errors import store_errors

T = TypeVar("T")


class PaginatedQueryEngine:
    """Executes paged reads for repositories."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def paginate(
        self,
        stmt: Select[Any],
        pagination: Pagination,
        order_by: Sequence[ColumnElement[Any]],
        row_mapper: Callable[[Row[Any]], T],
    ) -> PaginatedResult[T]:
        """
        Fetch one page of `stmt` and the total row count.

        Args:
            stmt: Projection with its filters (and grouping) applied, unordered
            pagination: Page parameters; offset is used as computed
            order_by: Sort key, must be non-empty so paging is stable
            row_mapper: Converts a result row into the item type

        Returns:
            PaginatedResult with the mapped page and the unpaged total

        Raises:
            InvalidArgumentError: If no sort key is given
        """
        if not order_by:
            raise InvalidArgumentError("Paginated queries require an explicit sort order")

        page_stmt = stmt.order_by(*order_by).offset(pagination.offset).limit(pagination.limit)
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())

        with store_errors(self.db):
            rows = self.db.execute(page_stmt).all()
            total = self.db.execute(count_stmt).scalar_one()

        return PaginatedResult(
            items=[row_mapper(row) for row in rows],
            total=total,
            pagination=pagination,
        )
