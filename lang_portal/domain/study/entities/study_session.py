"""
StudySession entity.
"""

from dataclasses import dataclass
from datetime import datetime

from lang_portal.domain.common.entity import Entity
from lang_portal.domain.common.value_objects import GroupId, StudyActivityId, StudySessionId


@dataclass(frozen=True, eq=False)
class StudySession(Entity[StudySessionId]):
    """
    Study session.

    Business Rules:
    - Must reference an existing group (enforced by the store)
    - Activity id refers to the static activity catalog
    - Immutable once created; created_at is assigned by the store
    """

    id: StudySessionId
    group_id: GroupId
    activity_id: StudyActivityId
    created_at: datetime | None = None

    @classmethod
    def create(cls, group_id: GroupId, activity_id: StudyActivityId) -> "StudySession":
        """Create a new study session (ID and timestamp are assigned on insert)."""
        return cls(id=StudySessionId.generate(), group_id=group_id, activity_id=activity_id)
