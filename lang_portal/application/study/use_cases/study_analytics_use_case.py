"""Use case for derived study statistics."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from lang_portal.application.study.protocols.study_activity_catalog import (
    StudyActivityCatalogProtocol,
)
from lang_portal.application.study.protocols.study_analytics_repository import (
    StudyAnalyticsRepositoryProtocol,
)
from lang_portal.application.study.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from lang_portal.application.study.use_cases.dtos import (
    LastStudySession,
    QuickStats,
    StudyProgress,
)
from lang_portal.domain.study.services import StudyStreakCalculator
from lang_portal.utils import utc_now

DEFAULT_ACTIVE_GROUP_WINDOW_DAYS = 30


class StudyAnalyticsUseCase:
    """
    Read-only aggregation over the study history.

    Nothing computed here is stored; every call recomputes from the current
    history, so two calls with no writes in between return equal results.
    """

    def __init__(
        self,
        analytics_repository: StudyAnalyticsRepositoryProtocol,
        session_repository: StudySessionRepositoryProtocol,
        activity_catalog: StudyActivityCatalogProtocol,
        streak_calculator: StudyStreakCalculator | None = None,
        clock: Callable[[], datetime] = utc_now,
        active_group_window_days: int = DEFAULT_ACTIVE_GROUP_WINDOW_DAYS,
    ) -> None:
        self.analytics_repository = analytics_repository
        self.session_repository = session_repository
        self.activity_catalog = activity_catalog
        self.streak_calculator = streak_calculator or StudyStreakCalculator()
        self.clock = clock
        self.active_group_window_days = active_group_window_days

    def get_quick_stats(self) -> QuickStats:
        """
        Snapshot of success rate, session count, active groups and streak.

        Active groups are groups with a session started within the trailing
        window (30 days by default) ending now.
        """
        since = self.clock().astimezone(UTC) - timedelta(days=self.active_group_window_days)

        return QuickStats(
            success_rate=self.analytics_repository.review_success_rate(),
            total_study_sessions=self.analytics_repository.count_sessions(),
            total_active_groups=self.analytics_repository.count_active_groups(since),
            study_streak_days=self.streak_calculator.from_timestamps(
                self.analytics_repository.session_timestamps()
            ),
        )

    def get_study_progress(self) -> StudyProgress:
        """Distinct studied words against the total vocabulary size."""
        return StudyProgress(
            total_words_studied=self.analytics_repository.count_studied_words(),
            total_available_words=self.analytics_repository.count_words(),
        )

    def get_last_session(self) -> LastStudySession | None:
        """
        The most recently started session.

        Returns:
            LastStudySession, or None when no session has been started yet
        """
        row = self.session_repository.find_latest()
        if row is None:
            return None

        activity = self.activity_catalog.find_by_id(row.session.activity_id)
        return LastStudySession(
            session=row.session,
            group_name=row.group_name,
            activity_name=activity.name if activity else None,
            reviewed_words=row.review_count,
        )
