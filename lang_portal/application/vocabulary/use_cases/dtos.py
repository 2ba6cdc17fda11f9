"""DTOs returned by vocabulary use cases."""

from dataclasses import dataclass, field
from datetime import datetime

from lang_portal.domain.vocabulary.entities import Group, Word


@dataclass(frozen=True)
class WordStats:
    """Review counts derived from the review history at read time."""

    correct_count: int = 0
    wrong_count: int = 0

    @property
    def total_reviews(self) -> int:
        """Number of reviews recorded for the word."""
        return self.correct_count + self.wrong_count


@dataclass
class WordWithStats:
    """Word combined with its derived review counts."""

    word: Word
    stats: WordStats


@dataclass
class WordDetails:
    """Single-word view: stats plus the groups that contain the word."""

    word: Word
    stats: WordStats
    groups: list[Group] = field(default_factory=list)


@dataclass
class GroupSummary:
    """Group as shown in listings."""

    group: Group
    word_count: int


@dataclass(frozen=True)
class GroupStats:
    """
    Aggregate study statistics for the words of a group.

    Attributes:
        total_words: Distinct words in the group
        studied_words: Distinct words in the group with at least one review
        success_rate: Percentage (0-100) of correct reviews, 0 without reviews
        last_studied_at: Most recent review of any word in the group
    """

    total_words: int
    studied_words: int
    success_rate: float
    last_studied_at: datetime | None = None


@dataclass
class GroupDetails:
    """Single-group view."""

    group: Group
    stats: GroupStats
