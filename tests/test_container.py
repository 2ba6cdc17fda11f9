"""Tests for container wiring and database bootstrap."""

import pytest
from dependency_injector import errors
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from lang_portal.application.vocabulary.use_cases.word_query_use_case import WordQueryUseCase
from lang_portal.config import Settings
from lang_portal.core import container, create_database
from lang_portal.infrastructure.common.di import inject_use_case


class TestInjectUseCase:
    def test_use_case_is_bound_to_given_session(self, db_session: Session) -> None:
        use_case = inject_use_case(container.word_query_use_case)(db_session)

        assert isinstance(use_case, WordQueryUseCase)
        assert use_case.word_repository.db is db_session  # type: ignore[attr-defined]

    def test_override_is_reset_afterwards(self, db_session: Session) -> None:
        inject_use_case(container.word_query_use_case)(db_session)

        with pytest.raises(errors.Error):
            container.db()


def test_create_database_creates_schema() -> None:
    database = create_database(Settings(DATABASE_URL="sqlite:///:memory:", ENVIRONMENT="test"))
    try:
        tables = set(inspect(database.engine).get_table_names())
    finally:
        database.dispose()

    assert {"words", "groups", "words_groups", "study_sessions", "word_review_items"} <= tables
