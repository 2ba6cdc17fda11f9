"""Aggregation queries over the whole study history."""

from datetime import datetime

from sqlalchemy import case, distinct, func, select
from sqlalchemy.orm import Session

from lang_portal.infrastructure.common.store_errors import store_errors
from lang_portal.models import StudySession as StudySessionORM
from lang_portal.models import Word as WordORM
from lang_portal.models import WordReview as WordReviewORM
from lang_portal.utils import ensure_utc


class StudyAnalyticsRepository:
    """Read-only aggregates. Nothing here is cached or stored."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def review_success_rate(self) -> float:
        """Percentage (0-100) of correct reviews across all history, 0 if none."""
        score = case((WordReviewORM.correct.is_(True), 100.0), else_=0.0)
        stmt = select(func.coalesce(func.avg(score), 0.0))
        with store_errors(self.db):
            return float(self.db.execute(stmt).scalar_one())

    def count_sessions(self) -> int:
        stmt = select(func.count(StudySessionORM.id))
        with store_errors(self.db):
            return self.db.execute(stmt).scalar_one()

    def count_active_groups(self, since: datetime) -> int:
        """Distinct groups with at least one session started at or after `since` (UTC)."""
        stmt = select(func.count(distinct(StudySessionORM.group_id))).where(
            StudySessionORM.created_at >= since
        )
        with store_errors(self.db):
            return self.db.execute(stmt).scalar_one()

    def session_timestamps(self) -> list[datetime]:
        stmt = select(StudySessionORM.created_at)
        with store_errors(self.db):
            timestamps = self.db.execute(stmt).scalars().all()
        return [ensure_utc(timestamp) for timestamp in timestamps]

    def count_studied_words(self) -> int:
        """Distinct words with at least one review."""
        stmt = select(func.count(distinct(WordReviewORM.word_id)))
        with store_errors(self.db):
            return self.db.execute(stmt).scalar_one()

    def count_words(self) -> int:
        stmt = select(func.count(WordORM.id))
        with store_errors(self.db):
            return self.db.execute(stmt).scalar_one()
