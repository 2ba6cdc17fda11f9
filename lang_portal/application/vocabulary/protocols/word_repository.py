"""Protocol for Word repository in vocabulary context."""

from typing import Protocol

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.vocabulary.use_cases.dtos import WordWithStats
from lang_portal.domain.common.value_objects import GroupId, StudySessionId, WordId
from lang_portal.domain.vocabulary.entities import Word


class WordRepositoryProtocol(Protocol):
    """Protocol for Word repository operations."""

    def find_by_id(self, word_id: WordId) -> Word | None:
        """
        Find a word by ID.

        Args:
            word_id: The word ID

        Returns:
            Word entity if found, None otherwise
        """
        ...

    def find_with_stats(self, word_id: WordId) -> WordWithStats | None:
        """
        Find a word by ID together with its review counts.

        Args:
            word_id: The word ID

        Returns:
            WordWithStats if found, None otherwise
        """
        ...

    def list_with_stats(self, pagination: Pagination) -> PaginatedResult[WordWithStats]:
        """List all words with review counts, newest first."""
        ...

    def list_by_group(
        self, group_id: GroupId, pagination: Pagination
    ) -> PaginatedResult[WordWithStats]:
        """List the words of a group with review counts, newest first."""
        ...

    def list_by_session(
        self, session_id: StudySessionId, pagination: Pagination
    ) -> PaginatedResult[Word]:
        """List distinct words reviewed in a session, most recently reviewed first."""
        ...

    def add(self, word: Word) -> Word:
        """
        Insert a new word.

        Args:
            word: Unpersisted word entity

        Returns:
            Word with store-assigned id and created_at
        """
        ...
