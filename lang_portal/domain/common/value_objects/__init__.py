"""Value objects shared across the domain."""

from .ids import GroupId, StudyActivityId, StudySessionId, WordId, WordReviewId

__all__ = [
    "GroupId",
    "StudyActivityId",
    "StudySessionId",
    "WordId",
    "WordReviewId",
]
