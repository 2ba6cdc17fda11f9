"""Repository for StudySession domain entities."""

from typing import Any

from sqlalchemy import Row, Select, func, select
from sqlalchemy.orm import Session

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.study.protocols.study_session_repository import (
    ActivitySessionRow,
    StudySessionRow,
)
from lang_portal.domain.common.value_objects import GroupId, StudyActivityId, StudySessionId
from lang_portal.domain.study.entities import StudySession
from lang_portal.infrastructure.common.paginated_query import PaginatedQueryEngine
from lang_portal.infrastructure.common.store_errors import store_errors
from lang_portal.infrastructure.study.mappers.study_session_mapper import StudySessionMapper
from lang_portal.models import Group as GroupORM
from lang_portal.models import StudySession as StudySessionORM
from lang_portal.models import WordReview as WordReviewORM
from lang_portal.utils import ensure_utc

_NEWEST_FIRST = (StudySessionORM.created_at.desc(), StudySessionORM.id.desc())


class StudySessionRepository:
    """Repository for StudySession domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudySessionMapper()
        self.query_engine = PaginatedQueryEngine(db)

    def find_by_id(self, session_id: StudySessionId) -> StudySession | None:
        """Find a session by ID, None if it does not exist."""
        stmt = select(StudySessionORM).where(StudySessionORM.id == session_id.value)
        with store_errors(self.db):
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_row(self, session_id: StudySessionId) -> StudySessionRow | None:
        """Find a session by ID together with its group name."""
        stmt = self._with_group_name().where(StudySessionORM.id == session_id.value)
        with store_errors(self.db):
            row = self.db.execute(stmt).one_or_none()
        return self._to_session_row(row) if row else None

    def find_latest(self) -> ActivitySessionRow | None:
        """The most recently started session with its review aggregates."""
        stmt = self._with_review_aggregates().order_by(*_NEWEST_FIRST).limit(1)
        with store_errors(self.db):
            row = self.db.execute(stmt).one_or_none()
        return self._to_activity_row(row) if row else None

    def list_rows(
        self, pagination: Pagination, group_id: GroupId | None = None
    ) -> PaginatedResult[StudySessionRow]:
        """
        List sessions with their group names, newest first.

        Args:
            pagination: Page parameters
            group_id: Restrict to sessions of this group when given

        Returns:
            Page of StudySessionRow and the number of matching sessions
        """
        stmt = self._with_group_name()
        if group_id is not None:
            stmt = stmt.where(StudySessionORM.group_id == group_id.value)

        return self.query_engine.paginate(
            stmt,
            pagination,
            order_by=_NEWEST_FIRST,
            row_mapper=self._to_session_row,
        )

    def list_by_activity(
        self, activity_id: StudyActivityId, pagination: Pagination
    ) -> PaginatedResult[ActivitySessionRow]:
        """
        List sessions started with an activity, newest first.

        Each row carries the time of the session's last review and the number
        of reviews it holds.
        """
        stmt = self._with_review_aggregates().where(
            StudySessionORM.study_activity_id == activity_id.value
        )
        return self.query_engine.paginate(
            stmt,
            pagination,
            order_by=_NEWEST_FIRST,
            row_mapper=self._to_activity_row,
        )

    def add(self, session: StudySession) -> StudySession:
        """Insert a new session and return it with its store-assigned fields."""
        orm_model = self.mapper.to_orm(session)
        with store_errors(self.db):
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    @staticmethod
    def _with_group_name() -> Select[Any]:
        return select(StudySessionORM, GroupORM.name.label("group_name")).join(
            GroupORM, GroupORM.id == StudySessionORM.group_id
        )

    @staticmethod
    def _with_review_aggregates() -> Select[Any]:
        return (
            select(
                StudySessionORM,
                GroupORM.name.label("group_name"),
                func.max(WordReviewORM.created_at).label("last_review_at"),
                func.count(WordReviewORM.id).label("review_count"),
            )
            .join(GroupORM, GroupORM.id == StudySessionORM.group_id)
            .outerjoin(WordReviewORM, WordReviewORM.study_session_id == StudySessionORM.id)
            .group_by(StudySessionORM.id, GroupORM.name)
        )

    def _to_session_row(self, row: Row[Any]) -> StudySessionRow:
        return StudySessionRow(session=self.mapper.to_domain(row[0]), group_name=row.group_name)

    def _to_activity_row(self, row: Row[Any]) -> ActivitySessionRow:
        return ActivitySessionRow(
            session=self.mapper.to_domain(row[0]),
            group_name=row.group_name,
            last_review_at=ensure_utc(row.last_review_at) if row.last_review_at else None,
            review_count=row.review_count,
        )
