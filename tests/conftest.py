"""Pytest configuration and fixtures."""

from collections.abc import Generator, Iterable
from datetime import datetime
from typing import Any

import pytest
from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from lang_portal import models
from lang_portal.application.study.use_cases.session_recorder_use_case import (
    SessionRecorderUseCase,
)
from lang_portal.application.study.use_cases.study_analytics_use_case import (
    StudyAnalyticsUseCase,
)
from lang_portal.application.study.use_cases.study_session_query_use_case import (
    StudySessionQueryUseCase,
)
from lang_portal.application.vocabulary.use_cases.group_query_use_case import GroupQueryUseCase
from lang_portal.application.vocabulary.use_cases.word_query_use_case import WordQueryUseCase
from lang_portal.config import Settings
from lang_portal.core import container
from lang_portal.database import Database
from lang_portal.infrastructure.common.di import inject_use_case

# Test database (in-memory SQLite, single shared connection)
TEST_SETTINGS = Settings(DATABASE_URL="sqlite:///:memory:", ENVIRONMENT="test")

test_database = Database(TEST_SETTINGS)

# Activity id present in the built-in catalog
DEFAULT_ACTIVITY_ID = 1


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    test_database.create_tables()

    session = test_database.session()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        test_database.drop_tables()


# --- Use cases resolved through the container ---


@pytest.fixture
def word_query_use_case(db_session: Session) -> WordQueryUseCase:
    return inject_use_case(container.word_query_use_case)(db_session)


@pytest.fixture
def group_query_use_case(db_session: Session) -> GroupQueryUseCase:
    return inject_use_case(container.group_query_use_case)(db_session)


@pytest.fixture
def study_session_query_use_case(db_session: Session) -> StudySessionQueryUseCase:
    return inject_use_case(container.study_session_query_use_case)(db_session)


@pytest.fixture
def session_recorder_use_case(db_session: Session) -> SessionRecorderUseCase:
    return inject_use_case(container.session_recorder_use_case)(db_session)


@pytest.fixture
def study_analytics_use_case(db_session: Session) -> StudyAnalyticsUseCase:
    return inject_use_case(container.study_analytics_use_case)(db_session)


# --- Helpers for building history directly in the store ---


def create_test_word(
    db_session: Session,
    native_text: str = "hola",
    translated_text: str = "hello",
    metadata: Any = None,
    created_at: datetime | None = None,
) -> models.Word:
    """Helper function to create a word."""
    word = models.Word(
        native_text=native_text,
        translated_text=translated_text,
        metadata_json=metadata,
    )
    if created_at is not None:
        word.created_at = created_at
    db_session.add(word)
    db_session.commit()
    db_session.refresh(word)
    return word


def create_test_group(
    db_session: Session,
    name: str = "Basics",
    words: Iterable[models.Word] = (),
) -> models.Group:
    """Helper function to create a group holding the given words."""
    group = models.Group(name=name)
    db_session.add(group)
    db_session.flush()
    for word in words:
        db_session.execute(insert(models.words_groups).values(group_id=group.id, word_id=word.id))
    db_session.commit()
    db_session.refresh(group)
    return group


def create_test_session(
    db_session: Session,
    group: models.Group,
    activity_id: int = DEFAULT_ACTIVITY_ID,
    created_at: datetime | None = None,
) -> models.StudySession:
    """Helper function to create a study session."""
    session = models.StudySession(group_id=group.id, study_activity_id=activity_id)
    if created_at is not None:
        session.created_at = created_at
    db_session.add(session)
    db_session.commit()
    db_session.refresh(session)
    return session


def create_test_review(
    db_session: Session,
    session: models.StudySession,
    word: models.Word,
    correct: bool = True,
    created_at: datetime | None = None,
) -> models.WordReview:
    """Helper function to record a review outcome."""
    review = models.WordReview(
        study_session_id=session.id,
        word_id=word.id,
        correct=correct,
    )
    if created_at is not None:
        review.created_at = created_at
    db_session.add(review)
    db_session.commit()
    db_session.refresh(review)
    return review


def count_rows(db_session: Session, model: type[models.Base]) -> int:
    """Number of rows currently stored for a model."""
    return db_session.execute(select(func.count()).select_from(model)).scalar_one()
