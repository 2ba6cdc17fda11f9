"""Repository for Word domain entities."""

from typing import Any

from sqlalchemy import Row, Select, func, select
from sqlalchemy.orm import Session

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.vocabulary.use_cases.dtos import WordStats, WordWithStats
from lang_portal.domain.common.value_objects import GroupId, StudySessionId, WordId
from lang_portal.domain.vocabulary.entities import Word
from lang_portal.infrastructure.common.paginated_query import PaginatedQueryEngine
from lang_portal.infrastructure.common.store_errors import store_errors
from lang_portal.infrastructure.vocabulary.mappers.word_mapper import WordMapper
from lang_portal.models import Word as WordORM
from lang_portal.models import WordReview as WordReviewORM
from lang_portal.models import words_groups

# Review counts are always derived from the review history, never stored
_correct_count = (
    select(func.count(WordReviewORM.id))
    .where(WordReviewORM.word_id == WordORM.id, WordReviewORM.correct.is_(True))
    .correlate(WordORM)
    .scalar_subquery()
    .label("correct_count")
)
_wrong_count = (
    select(func.count(WordReviewORM.id))
    .where(WordReviewORM.word_id == WordORM.id, WordReviewORM.correct.is_(False))
    .correlate(WordORM)
    .scalar_subquery()
    .label("wrong_count")
)

_NEWEST_FIRST = (WordORM.created_at.desc(), WordORM.id.desc())


class WordRepository:
    """Repository for Word domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordMapper()
        self.query_engine = PaginatedQueryEngine(db)

    def find_by_id(self, word_id: WordId) -> Word | None:
        """
        Find a word by ID.

        Args:
            word_id: The word ID

        Returns:
            Word entity if found, None otherwise
        """
        stmt = select(WordORM).where(WordORM.id == word_id.value)
        with store_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_with_stats(self, word_id: WordId) -> WordWithStats | None:
        """
        Find a word by ID together with its review counts.

        Args:
            word_id: The word ID

        Returns:
            WordWithStats if found, None otherwise
        """
        stmt = self._with_stats().where(WordORM.id == word_id.value)
        with store_errors(self.db):
            row = self.db.execute(stmt).one_or_none()
        return self._to_word_with_stats(row) if row else None

    def list_with_stats(self, pagination: Pagination) -> PaginatedResult[WordWithStats]:
        """
        List all words with review counts, newest first.

        Args:
            pagination: Page parameters

        Returns:
            Page of WordWithStats and the total number of words
        """
        return self.query_engine.paginate(
            self._with_stats(),
            pagination,
            order_by=_NEWEST_FIRST,
            row_mapper=self._to_word_with_stats,
        )

    def list_by_group(
        self, group_id: GroupId, pagination: Pagination
    ) -> PaginatedResult[WordWithStats]:
        """
        List the words of a group with review counts, newest first.

        Args:
            group_id: The group ID
            pagination: Page parameters

        Returns:
            Page of WordWithStats and the number of words in the group
        """
        stmt = (
            self._with_stats()
            .join(words_groups, words_groups.c.word_id == WordORM.id)
            .where(words_groups.c.group_id == group_id.value)
        )
        return self.query_engine.paginate(
            stmt,
            pagination,
            order_by=_NEWEST_FIRST,
            row_mapper=self._to_word_with_stats,
        )

    def list_by_session(
        self, session_id: StudySessionId, pagination: Pagination
    ) -> PaginatedResult[Word]:
        """
        List distinct words reviewed in a session, most recently reviewed first.

        Args:
            session_id: The study session ID
            pagination: Page parameters

        Returns:
            Page of Word entities and the number of distinct reviewed words
        """
        stmt = (
            select(WordORM)
            .join(WordReviewORM, WordReviewORM.word_id == WordORM.id)
            .where(WordReviewORM.study_session_id == session_id.value)
            .group_by(WordORM.id)
        )
        return self.query_engine.paginate(
            stmt,
            pagination,
            order_by=(func.max(WordReviewORM.created_at).desc(), func.max(WordReviewORM.id).desc()),
            row_mapper=lambda row: self.mapper.to_domain(row[0]),
        )

    def add(self, word: Word) -> Word:
        """
        Insert a new word.

        Args:
            word: Unpersisted word entity

        Returns:
            Word with store-assigned id and created_at
        """
        orm_model = self.mapper.to_orm(word)
        with store_errors(self.db):
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    @staticmethod
    def _with_stats() -> Select[Any]:
        return select(WordORM, _correct_count, _wrong_count)

    def _to_word_with_stats(self, row: Row[Any]) -> WordWithStats:
        return WordWithStats(
            word=self.mapper.to_domain(row[0]),
            stats=WordStats(correct_count=row.correct_count, wrong_count=row.wrong_count),
        )
