"""Building blocks shared by all application use cases."""

from .identifiers import to_entity_id
from .pagination import PaginatedResult, Pagination
from .unit_of_work import UnitOfWork

__all__ = ["PaginatedResult", "Pagination", "UnitOfWork", "to_entity_id"]
