"""Static, read-only study activity catalog."""

from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

import structlog
from pydantic import TypeAdapter

from lang_portal.config import Settings
from lang_portal.domain.common.value_objects import StudyActivityId
from lang_portal.domain.study.entities import StudyActivity
from lang_portal.infrastructure.study.mappers.study_activity_mapper import StudyActivityMapper
from lang_portal.infrastructure.study.schemas.study_activity_schemas import (
    DEFAULT_STUDY_ACTIVITIES,
    StudyActivitySchema,
)

logger = structlog.get_logger(__name__)

_activity_list_adapter = TypeAdapter(list[StudyActivitySchema])


class StaticStudyActivityCatalog:
    """
    Activity catalog fixed at construction time.

    Sessions only store the activity id; names and descriptions are resolved
    here. The catalog cannot be modified once built.
    """

    def __init__(self, activities: Iterable[StudyActivity]) -> None:
        by_id: dict[StudyActivityId, StudyActivity] = {}
        for activity in activities:
            if activity.id in by_id:
                raise ValueError(f"Duplicate study activity id {activity.id}")
            by_id[activity.id] = activity
        self._activities = MappingProxyType(by_id)

    @classmethod
    def from_schemas(cls, schemas: Iterable[StudyActivitySchema]) -> "StaticStudyActivityCatalog":
        mapper = StudyActivityMapper()
        return cls(mapper.to_domain(schema) for schema in schemas)

    @classmethod
    def default(cls) -> "StaticStudyActivityCatalog":
        """Catalog with the built-in activities."""
        return cls.from_schemas(DEFAULT_STUDY_ACTIVITIES)

    @classmethod
    def from_file(cls, path: Path) -> "StaticStudyActivityCatalog":
        """
        Load the catalog from a JSON array of activity objects.

        Raises:
            pydantic.ValidationError: If the file content is not a valid catalog
            ValueError: If two activities share an id
        """
        schemas = _activity_list_adapter.validate_json(path.read_bytes())
        logger.info("loaded_study_activity_catalog", path=str(path), count=len(schemas))
        return cls.from_schemas(schemas)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticStudyActivityCatalog":
        """Use STUDY_ACTIVITIES_FILE when set, the built-in catalog otherwise."""
        if settings.STUDY_ACTIVITIES_FILE is not None:
            return cls.from_file(settings.STUDY_ACTIVITIES_FILE)
        return cls.default()

    def find_by_id(self, activity_id: StudyActivityId) -> StudyActivity | None:
        return self._activities.get(activity_id)

    def list_all(self) -> list[StudyActivity]:
        """All activities ordered by id."""
        return sorted(self._activities.values(), key=lambda activity: activity.id.value)
