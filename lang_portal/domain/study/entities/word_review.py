"""
WordReview entity.
"""

from dataclasses import dataclass
from datetime import datetime

from lang_portal.domain.common.entity import Entity
from lang_portal.domain.common.value_objects import StudySessionId, WordId, WordReviewId


@dataclass(frozen=True, eq=False)
class WordReview(Entity[WordReviewId]):
    """
    Recorded outcome of reviewing one word in one session.

    Business Rules:
    - Append-only: never updated or deleted
    - Repeated reviews of the same word in the same session are separate rows
    """

    id: WordReviewId
    word_id: WordId
    session_id: StudySessionId
    correct: bool
    created_at: datetime | None = None

    @classmethod
    def create(cls, session_id: StudySessionId, word_id: WordId, correct: bool) -> "WordReview":
        """Create a new review (ID and timestamp are assigned on insert)."""
        return cls(
            id=WordReviewId.generate(),
            word_id=word_id,
            session_id=session_id,
            correct=correct,
        )
