"""Repository for Group domain entities and word membership."""

from typing import Any

from sqlalchemy import Row, case, distinct, func, insert, select
from sqlalchemy.orm import Session

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.vocabulary.use_cases.dtos import GroupStats, GroupSummary
from lang_portal.domain.common.value_objects import GroupId, WordId
from lang_portal.domain.vocabulary.entities import Group
from lang_portal.infrastructure.common.paginated_query import PaginatedQueryEngine
from lang_portal.infrastructure.common.store_errors import store_errors
from lang_portal.infrastructure.vocabulary.mappers.group_mapper import GroupMapper
from lang_portal.models import Group as GroupORM
from lang_portal.models import WordReview as WordReviewORM
from lang_portal.models import words_groups
from lang_portal.utils import ensure_utc


class GroupRepository:
    """Repository for Group domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GroupMapper()
        self.query_engine = PaginatedQueryEngine(db)

    def find_by_id(self, group_id: GroupId) -> Group | None:
        """Find a group by ID, None if it does not exist."""
        stmt = select(GroupORM).where(GroupORM.id == group_id.value)
        with store_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_word(self, word_id: WordId) -> list[Group]:
        """All groups containing the word, ordered by name."""
        stmt = (
            select(GroupORM)
            .join(words_groups, words_groups.c.group_id == GroupORM.id)
            .where(words_groups.c.word_id == word_id.value)
            .order_by(GroupORM.name, GroupORM.id)
        )
        with store_errors(self.db):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm_model) for orm_model in orm_models]

    def list_summaries(self, pagination: Pagination) -> PaginatedResult[GroupSummary]:
        """List groups ordered by name, each with the number of words it holds."""
        stmt = (
            select(GroupORM, func.count(words_groups.c.word_id).label("word_count"))
            .outerjoin(words_groups, words_groups.c.group_id == GroupORM.id)
            .group_by(GroupORM.id)
        )

        def to_summary(row: Row[Any]) -> GroupSummary:
            return GroupSummary(group=self.mapper.to_domain(row[0]), word_count=row.word_count)

        return self.query_engine.paginate(
            stmt,
            pagination,
            order_by=(GroupORM.name, GroupORM.id),
            row_mapper=to_summary,
        )

    def get_stats(self, group_id: GroupId) -> GroupStats:
        """
        Aggregate the review history of the group's words.

        Words without reviews count towards total_words only; they do not
        pull the success rate down.
        """
        reviewed_word = case(
            (WordReviewORM.id.is_not(None), words_groups.c.word_id),
        )
        review_score = case(
            (WordReviewORM.correct.is_(True), 100.0),
            (WordReviewORM.correct.is_(False), 0.0),
        )
        stmt = (
            select(
                func.count(distinct(words_groups.c.word_id)).label("total_words"),
                func.count(distinct(reviewed_word)).label("studied_words"),
                func.coalesce(func.avg(review_score), 0.0).label("success_rate"),
                func.max(WordReviewORM.created_at).label("last_studied_at"),
            )
            .select_from(words_groups)
            .outerjoin(WordReviewORM, WordReviewORM.word_id == words_groups.c.word_id)
            .where(words_groups.c.group_id == group_id.value)
        )
        with store_errors(self.db):
            row = self.db.execute(stmt).one()

        return GroupStats(
            total_words=row.total_words,
            studied_words=row.studied_words,
            success_rate=float(row.success_rate),
            last_studied_at=ensure_utc(row.last_studied_at) if row.last_studied_at else None,
        )

    def add(self, group: Group) -> Group:
        """Insert a new group and return it with its store-assigned fields."""
        orm_model = self.mapper.to_orm(group)
        with store_errors(self.db):
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def add_word(self, group_id: GroupId, word_id: WordId) -> None:
        """
        Add a word to a group.

        Raises:
            ConstraintViolationError: If either side does not exist or the
                word is already a member
        """
        stmt = insert(words_groups).values(group_id=group_id.value, word_id=word_id.value)
        with store_errors(self.db):
            self.db.execute(stmt)
