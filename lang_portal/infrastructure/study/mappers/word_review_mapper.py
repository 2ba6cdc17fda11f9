"""Mapper for WordReview ORM ↔ Domain conversion."""

from lang_portal.domain.common.value_objects import StudySessionId, WordId, WordReviewId
from lang_portal.domain.study.entities import WordReview
from lang_portal.models import WordReview as WordReviewORM
from lang_portal.utils import ensure_utc


class WordReviewMapper:
    """Mapper for WordReview ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: WordReviewORM) -> WordReview:
        return WordReview(
            id=WordReviewId(orm_model.id),
            word_id=WordId(orm_model.word_id),
            session_id=StudySessionId(orm_model.study_session_id),
            correct=orm_model.correct,
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: WordReview) -> WordReviewORM:
        return WordReviewORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            word_id=domain_entity.word_id.value,
            study_session_id=domain_entity.session_id.value,
            correct=domain_entity.correct,
        )
