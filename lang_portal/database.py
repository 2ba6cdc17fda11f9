"""Database configuration and session management."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lang_portal.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


def _is_in_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:  # noqa: ANN401
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(settings: Settings) -> Engine:
    """
    Build the SQLAlchemy engine for the configured store.

    SQLite connections get foreign key enforcement switched on, and writers
    wait at most SQLITE_BUSY_TIMEOUT_SECONDS for the write lock.
    """
    url = settings.DATABASE_URL

    if url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": settings.SQLITE_BUSY_TIMEOUT_SECONDS,
        }
        if _is_in_memory_sqlite(url):
            engine = create_engine(
                url,
                echo=settings.DATABASE_ECHO,
                connect_args=connect_args,
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(url, echo=settings.DATABASE_ECHO, connect_args=connect_args)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        echo=settings.DATABASE_ECHO,
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,
    )


class Database:
    """
    Entity store handle.

    Owns the engine and the session factory. Construct one explicitly and
    hand it (or sessions created from it) to the components that need it;
    separate instances are fully isolated, which is what tests rely on.
    """

    def __init__(self, settings: Settings) -> None:
        self.engine = create_database_engine(settings)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )
        logger.info("Database engine created for %s", self.engine.url.render_as_string())

    def create_tables(self) -> None:
        """Create all tables. Schema migrations are managed outside the core."""
        Base.metadata.create_all(self.engine)

    def drop_tables(self) -> None:
        """Drop all tables."""
        Base.metadata.drop_all(self.engine)

    def session(self) -> Session:
        """Provide a new session. Caller is responsible for closing it."""
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Yield a session that is closed on exit."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        """Dispose the engine and its connection pool."""
        self.engine.dispose()
