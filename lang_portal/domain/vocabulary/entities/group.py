"""
Group entity.
"""

from dataclasses import dataclass
from datetime import datetime

from lang_portal.domain.common.entity import Entity
from lang_portal.domain.common.exceptions import ValidationError
from lang_portal.domain.common.value_objects import GroupId


@dataclass(frozen=True, eq=False)
class Group(Entity[GroupId]):
    """
    A named collection of words.

    Names need not be unique. Membership is many-to-many and lives in the
    store, not on the entity.
    """

    id: GroupId
    name: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Group name cannot be empty", field="name")

    @classmethod
    def create(cls, name: str) -> "Group":
        """Create a new group (ID will be 0 until persisted)."""
        return cls(id=GroupId.generate(), name=name.strip())
