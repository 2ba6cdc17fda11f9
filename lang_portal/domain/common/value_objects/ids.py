from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class WordId(EntityId):
    """Strongly-typed word identifier."""


@dataclass(frozen=True)
class GroupId(EntityId):
    """Strongly-typed group identifier."""


@dataclass(frozen=True)
class StudySessionId(EntityId):
    """Strongly-typed study session identifier."""


@dataclass(frozen=True)
class WordReviewId(EntityId):
    """Strongly-typed word review identifier."""


@dataclass(frozen=True)
class StudyActivityId(EntityId):
    """Identifier of an entry in the static study activity catalog."""
