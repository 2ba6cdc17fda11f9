"""Tests for recording and querying study sessions."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.orm import Session

from lang_portal.application.study.use_cases.session_recorder_use_case import (
    SessionRecorderUseCase,
)
from lang_portal.application.study.use_cases.study_session_query_use_case import (
    StudySessionQueryUseCase,
)
from lang_portal.domain.common.value_objects import StudySessionId, WordId
from lang_portal.domain.study.entities import WordReview
from lang_portal.exceptions import (
    ConstraintViolationError,
    GroupNotFoundError,
    StudyActivityNotFoundError,
    StudySessionNotFoundError,
    WordNotFoundError,
)
from lang_portal.infrastructure.study.repositories import WordReviewRepository
from lang_portal.models import StudySession as StudySessionORM
from lang_portal.models import WordReview as WordReviewORM
from tests.conftest import (
    DEFAULT_ACTIVITY_ID,
    count_rows,
    create_test_group,
    create_test_review,
    create_test_session,
    create_test_word,
)


class TestStartSession:
    def test_creates_session(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        group = create_test_group(db_session)

        session = session_recorder_use_case.start_session(group.id, DEFAULT_ACTIVITY_ID)

        assert session.id.is_persisted
        assert session.group_id.value == group.id
        assert session.activity_id.value == DEFAULT_ACTIVITY_ID
        assert session.created_at is not None
        assert session.created_at.tzinfo is not None
        assert count_rows(db_session, StudySessionORM) == 1

    def test_ids_increase(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        group = create_test_group(db_session)

        first = session_recorder_use_case.start_session(group.id, DEFAULT_ACTIVITY_ID)
        second = session_recorder_use_case.start_session(group.id, DEFAULT_ACTIVITY_ID)

        assert second.id.value > first.id.value

    def test_missing_group(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        with pytest.raises(GroupNotFoundError):
            session_recorder_use_case.start_session(999, DEFAULT_ACTIVITY_ID)

        assert count_rows(db_session, StudySessionORM) == 0

    def test_unknown_activity(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        group = create_test_group(db_session)

        with pytest.raises(StudyActivityNotFoundError) as exc_info:
            session_recorder_use_case.start_session(group.id, 999)

        assert exc_info.value.activity_id == 999
        assert count_rows(db_session, StudySessionORM) == 0


class TestRecordReview:
    def test_appends_review(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        word = create_test_word(db_session)
        group = create_test_group(db_session, words=[word])
        session = create_test_session(db_session, group)

        review = session_recorder_use_case.record_review(session.id, word.id, correct=True)

        assert review.id.is_persisted
        assert review.session_id.value == session.id
        assert review.word_id.value == word.id
        assert review.correct is True
        assert review.created_at is not None

    def test_repeated_reviews_are_kept(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        word = create_test_word(db_session)
        session = create_test_session(db_session, create_test_group(db_session, words=[word]))

        first = session_recorder_use_case.record_review(session.id, word.id, correct=False)
        second = session_recorder_use_case.record_review(session.id, word.id, correct=True)

        assert first.id != second.id
        assert count_rows(db_session, WordReviewORM) == 2

    def test_word_outside_session_group_is_accepted(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        outsider = create_test_word(db_session, "fuera")
        session = create_test_session(db_session, create_test_group(db_session))

        session_recorder_use_case.record_review(session.id, outsider.id, correct=True)

        assert count_rows(db_session, WordReviewORM) == 1

    def test_missing_session_leaves_history_unchanged(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        word = create_test_word(db_session)
        session = create_test_session(db_session, create_test_group(db_session, words=[word]))
        create_test_review(db_session, session, word)

        with pytest.raises(StudySessionNotFoundError) as exc_info:
            session_recorder_use_case.record_review(999, word.id, correct=True)

        assert exc_info.value.session_id == 999
        assert count_rows(db_session, WordReviewORM) == 1

    def test_missing_word(
        self, db_session: Session, session_recorder_use_case: SessionRecorderUseCase
    ) -> None:
        session = create_test_session(db_session, create_test_group(db_session))

        with pytest.raises(WordNotFoundError):
            session_recorder_use_case.record_review(session.id, 999, correct=False)

        assert count_rows(db_session, WordReviewORM) == 0

    def test_store_rejects_dangling_references(self, db_session: Session) -> None:
        repository = WordReviewRepository(db_session)
        word = create_test_word(db_session)

        with pytest.raises(ConstraintViolationError):
            repository.add(
                WordReview.create(
                    session_id=StudySessionId(12345), word_id=WordId(word.id), correct=True
                )
            )

        # The session is usable again after the rollback
        assert count_rows(db_session, WordReviewORM) == 0


class TestQuerySessions:
    def test_list_sessions_newest_first(
        self, db_session: Session, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        verbs = create_test_group(db_session, "Verbs")
        nouns = create_test_group(db_session, "Nouns")
        older = create_test_session(db_session, verbs, created_at=datetime(2024, 2, 1, tzinfo=UTC))
        newer = create_test_session(db_session, nouns, created_at=datetime(2024, 2, 2, tzinfo=UTC))

        result = study_session_query_use_case.list_sessions(page=1, per_page=10)

        assert result.total == 2
        assert [s.session.id.value for s in result.items] == [newer.id, older.id]
        assert [s.group_name for s in result.items] == ["Nouns", "Verbs"]
        assert result.items[0].session.created_at == datetime(2024, 2, 2, tzinfo=UTC)

    def test_same_timestamp_ties_break_by_id(
        self, db_session: Session, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        group = create_test_group(db_session)
        at = datetime(2024, 2, 1, tzinfo=UTC)
        sessions = [create_test_session(db_session, group, created_at=at) for _ in range(3)]

        result = study_session_query_use_case.list_sessions(page=1, per_page=10)

        assert [s.session.id.value for s in result.items] == [s.id for s in reversed(sessions)]

    def test_activity_outside_catalog_has_no_name(
        self, db_session: Session, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        session = create_test_session(db_session, create_test_group(db_session), activity_id=77)

        summary = study_session_query_use_case.get_session(session.id)

        assert summary.activity_name is None
        assert summary.session.activity_id.value == 77

    def test_get_session(
        self, db_session: Session, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        session = create_test_session(db_session, create_test_group(db_session, "Travel"))

        summary = study_session_query_use_case.get_session(session.id)

        assert summary.session.id.value == session.id
        assert summary.group_name == "Travel"
        assert summary.activity_name == "Vocabulary Quiz"

    def test_get_missing_session(
        self, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        with pytest.raises(StudySessionNotFoundError):
            study_session_query_use_case.get_session(5)

    def test_session_words_are_distinct_and_most_recent_first(
        self, db_session: Session, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        a = create_test_word(db_session, "a")
        b = create_test_word(db_session, "b")
        c = create_test_word(db_session, "c")
        session = create_test_session(db_session, create_test_group(db_session, words=[a, b, c]))
        other = create_test_session(db_session, create_test_group(db_session, "Other"))
        create_test_review(db_session, session, a, created_at=datetime(2024, 1, 1, 10, tzinfo=UTC))
        create_test_review(db_session, session, b, created_at=datetime(2024, 1, 1, 11, tzinfo=UTC))
        create_test_review(db_session, session, a, created_at=datetime(2024, 1, 1, 12, tzinfo=UTC))
        create_test_review(db_session, other, c, created_at=datetime(2024, 1, 1, 13, tzinfo=UTC))

        result = study_session_query_use_case.list_session_words(session.id, page=1, per_page=10)

        assert result.total == 2
        assert [word.native_text for word in result.items] == ["a", "b"]

    def test_session_words_of_missing_session(
        self, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        with pytest.raises(StudySessionNotFoundError):
            study_session_query_use_case.list_session_words(3, page=1, per_page=10)


class TestActivities:
    def test_list_activities(self, study_session_query_use_case: StudySessionQueryUseCase) -> None:
        activities = study_session_query_use_case.list_activities()

        assert [activity.name for activity in activities] == ["Vocabulary Quiz"]

    def test_get_activity(self, study_session_query_use_case: StudySessionQueryUseCase) -> None:
        activity = study_session_query_use_case.get_activity(DEFAULT_ACTIVITY_ID)

        assert activity.name == "Vocabulary Quiz"
        assert activity.description == "Practice your vocabulary with flashcards"
        assert activity.thumbnail_url == "https://example.com/thumbnail.jpg"

    def test_get_unknown_activity(
        self, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        with pytest.raises(StudyActivityNotFoundError):
            study_session_query_use_case.get_activity(404)

    def test_sessions_by_activity(
        self, db_session: Session, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        word = create_test_word(db_session)
        group = create_test_group(db_session, "Colors", words=[word])
        reviewed = create_test_session(
            db_session, group, created_at=datetime(2024, 4, 1, 8, tzinfo=UTC)
        )
        create_test_review(
            db_session, reviewed, word, created_at=datetime(2024, 4, 1, 8, 5, tzinfo=UTC)
        )
        create_test_review(
            db_session, reviewed, word, created_at=datetime(2024, 4, 1, 8, 9, tzinfo=UTC)
        )
        empty = create_test_session(db_session, group, created_at=datetime(2024, 4, 2, tzinfo=UTC))
        create_test_session(db_session, group, activity_id=77)

        result = study_session_query_use_case.list_sessions_by_activity(
            DEFAULT_ACTIVITY_ID, page=1, per_page=10
        )

        assert result.total == 2
        first, second = result.items
        assert first.session_id == empty.id
        assert first.end_time is None
        assert first.review_items_count == 0
        assert second.session_id == reviewed.id
        assert second.group_name == "Colors"
        assert second.activity_name == "Vocabulary Quiz"
        assert second.start_time == datetime(2024, 4, 1, 8, tzinfo=UTC)
        assert second.end_time == datetime(2024, 4, 1, 8, 9, tzinfo=UTC)
        assert second.review_items_count == 2

    def test_sessions_by_unknown_activity(
        self, study_session_query_use_case: StudySessionQueryUseCase
    ) -> None:
        with pytest.raises(StudyActivityNotFoundError):
            study_session_query_use_case.list_sessions_by_activity(404, page=1, per_page=10)
