"""DTOs returned by study use cases."""

from dataclasses import dataclass
from datetime import datetime

from lang_portal.domain.study.entities import StudySession


@dataclass
class StudySessionSummary:
    """Session with the names needed to display it."""

    session: StudySession
    group_name: str
    activity_name: str | None


@dataclass
class LastStudySession:
    """The most recently started session and how many reviews it holds."""

    session: StudySession
    group_name: str
    activity_name: str | None
    reviewed_words: int


@dataclass
class ActivitySessionItem:
    """
    Session listed under its activity.

    Attributes:
        session_id: Session identifier
        group_name: Name of the studied group
        activity_name: Catalog name of the activity
        start_time: When the session was started
        end_time: Time of the last review, None if nothing was reviewed
        review_items_count: Number of reviews recorded in the session
    """

    session_id: int
    group_name: str
    activity_name: str
    start_time: datetime | None
    end_time: datetime | None
    review_items_count: int


@dataclass(frozen=True)
class QuickStats:
    """Snapshot of global study statistics."""

    success_rate: float
    total_study_sessions: int
    total_active_groups: int
    study_streak_days: int


@dataclass(frozen=True)
class StudyProgress:
    """How much of the vocabulary has been studied at least once."""

    total_words_studied: int
    total_available_words: int
