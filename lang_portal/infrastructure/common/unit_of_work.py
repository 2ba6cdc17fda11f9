"""SQLAlchemy implementation of the UnitOfWork port."""

from sqlalchemy.orm import Session

from lang_portal.application.common.unit_of_work import UnitOfWork
from lang_portal.infrastructure.common.store_errors import store_errors


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to one SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        """Commit, translating store failures (the transaction is rolled back)."""
        with store_errors(self.db):
            self.db.commit()

    def rollback(self) -> None:
        """Discard everything written since the last commit."""
        self.db.rollback()
