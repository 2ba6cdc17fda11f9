from dataclasses import dataclass

from lang_portal.domain.common.entity import Entity
from lang_portal.domain.common.value_objects import StudyActivityId


@dataclass(frozen=True, eq=False)
class StudyActivity(Entity[StudyActivityId]):
    """Study activity as described by the static catalog. Never persisted."""

    id: StudyActivityId
    name: str
    description: str = ""
    thumbnail_url: str | None = None
