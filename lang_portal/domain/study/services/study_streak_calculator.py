"""Domain service for consecutive-day study streaks."""

from collections.abc import Iterable
from datetime import date, datetime
from itertools import pairwise

from lang_portal.utils import utc_date


class StudyStreakCalculator:
    """Stateless domain service computing the current study streak."""

    @staticmethod
    def calculate(session_dates: Iterable[date]) -> int:
        """
        Count the most recent run of consecutive study days.

        Distinct dates are walked from newest to oldest. The run ends at the
        first pair of neighbouring dates more than one day apart; every date
        before that break counts toward the streak.

        Args:
            session_dates: Calendar dates on which sessions were started,
                duplicates allowed, any order

        Returns:
            Streak length in days, 0 when there are no dates
        """
        dates = sorted(set(session_dates), reverse=True)
        if not dates:
            return 0

        streak = 1
        for newer, older in pairwise(dates):
            if (newer - older).days > 1:
                break
            streak += 1
        return streak

    @classmethod
    def from_timestamps(cls, timestamps: Iterable[datetime]) -> int:
        """Calculate the streak from session start timestamps (UTC calendar days)."""
        return cls.calculate(utc_date(ts) for ts in timestamps)
