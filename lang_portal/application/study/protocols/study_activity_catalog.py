from typing import Protocol

from lang_portal.domain.common.value_objects import StudyActivityId
from lang_portal.domain.study.entities import StudyActivity


class StudyActivityCatalogProtocol(Protocol):
    """Read-only lookup of study activities, keyed by id."""

    def find_by_id(self, activity_id: StudyActivityId) -> StudyActivity | None: ...

    def list_all(self) -> list[StudyActivity]: ...
