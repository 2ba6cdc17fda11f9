"""Mapper for StudyActivity schema → Domain conversion."""

from lang_portal.domain.common.value_objects import StudyActivityId
from lang_portal.domain.study.entities import StudyActivity
from lang_portal.infrastructure.study.schemas.study_activity_schemas import StudyActivitySchema


class StudyActivityMapper:
    """Activities are read from configuration only, so there is no reverse mapping."""

    def to_domain(self, schema: StudyActivitySchema) -> StudyActivity:
        return StudyActivity(
            id=StudyActivityId(schema.id),
            name=schema.name,
            description=schema.description,
            thumbnail_url=schema.thumbnail_url,
        )
