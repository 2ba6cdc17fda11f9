"""Mapper for StudySession ORM ↔ Domain conversion."""

from lang_portal.domain.common.value_objects import GroupId, StudyActivityId, StudySessionId
from lang_portal.domain.study.entities import StudySession
from lang_portal.models import StudySession as StudySessionORM
from lang_portal.utils import ensure_utc


class StudySessionMapper:
    """Mapper for StudySession ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudySessionORM) -> StudySession:
        """Convert ORM model to domain entity."""
        return StudySession(
            id=StudySessionId(orm_model.id),
            group_id=GroupId(orm_model.group_id),
            activity_id=StudyActivityId(orm_model.study_activity_id),
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: StudySession) -> StudySessionORM:
        """Convert a new domain entity to an ORM model."""
        return StudySessionORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            group_id=domain_entity.group_id.value,
            study_activity_id=domain_entity.activity_id.value,
        )
