"""Repository for WordReview domain entities."""

from sqlalchemy.orm import Session

from lang_portal.domain.study.entities import WordReview
from lang_portal.infrastructure.common.store_errors import store_errors
from lang_portal.infrastructure.study.mappers.word_review_mapper import WordReviewMapper


class WordReviewRepository:
    """Append-only store of review outcomes."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordReviewMapper()

    def add(self, review: WordReview) -> WordReview:
        """
        Append a review.

        Raises:
            ConstraintViolationError: If the session or word does not exist
        """
        orm_model = self.mapper.to_orm(review)
        with store_errors(self.db):
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
