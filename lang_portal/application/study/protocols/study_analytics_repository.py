"""Protocol for the read-only aggregation queries behind study analytics."""

from datetime import datetime
from typing import Protocol


class StudyAnalyticsRepositoryProtocol(Protocol):
    def review_success_rate(self) -> float:
        """Percentage (0-100) of correct reviews across all history, 0 if none."""
        ...

    def count_sessions(self) -> int:
        """Number of study sessions ever started."""
        ...

    def count_active_groups(self, since: datetime) -> int:
        """Distinct groups with at least one session started at or after `since`."""
        ...

    def session_timestamps(self) -> list[datetime]:
        """Start timestamps of all sessions."""
        ...

    def count_studied_words(self) -> int:
        """Distinct words with at least one review."""
        ...

    def count_words(self) -> int:
        """Total number of words."""
        ...
