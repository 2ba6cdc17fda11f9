from .paginated_query import PaginatedQueryEngine
from .store_errors import store_errors
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["PaginatedQueryEngine", "SqlAlchemyUnitOfWork", "store_errors"]
