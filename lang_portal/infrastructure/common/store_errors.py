"""Translation of SQLAlchemy failures into the application error taxonomy."""

from collections.abc import Generator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session

from lang_portal.exceptions import ConstraintViolationError, StoreUnavailableError

logger = structlog.get_logger(__name__)


@contextmanager
def store_errors(db: Session) -> Generator[None, None, None]:
    """
    Run store calls, rolling back and re-raising failures with their kind.

    IntegrityError becomes ConstraintViolationError. Connection-level errors
    (including a writer giving up on a locked SQLite file) become
    StoreUnavailableError. The original exception is chained.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        logger.warning("store_constraint_violation", error=str(e.orig))
        raise ConstraintViolationError(f"Write rejected by the store: {e.orig}") from e
    except (OperationalError, InterfaceError) as e:
        db.rollback()
        logger.error("store_unavailable", error=str(e.orig))
        raise StoreUnavailableError(f"Entity store unavailable: {e.orig}") from e
