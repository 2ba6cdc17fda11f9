"""Use case for reading words and their derived statistics."""

from lang_portal.application.common.identifiers import to_entity_id
from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.vocabulary.protocols.group_repository import (
    GroupRepositoryProtocol,
)
from lang_portal.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from lang_portal.application.vocabulary.use_cases.dtos import WordDetails, WordWithStats
from lang_portal.domain.common.value_objects import WordId
from lang_portal.exceptions import WordNotFoundError


class WordQueryUseCase:
    """Use case for reading words."""

    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        group_repository: GroupRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.word_repository = word_repository
        self.group_repository = group_repository

    def list_words(self, page: int, per_page: int) -> PaginatedResult[WordWithStats]:
        """
        List words with their correct/wrong counts, newest first.

        Args:
            page: Page number (1-indexed, not clamped)
            per_page: Page size

        Returns:
            Page of WordWithStats and the total word count

        Raises:
            InvalidArgumentError: If per_page is below 1
        """
        return self.word_repository.list_with_stats(Pagination(page=page, page_size=per_page))

    def get_word(self, word_id: int) -> WordDetails:
        """
        Get a single word with its stats and the groups it belongs to.

        Args:
            word_id: ID of the word

        Returns:
            WordDetails

        Raises:
            WordNotFoundError: If the word does not exist
        """
        word_id_vo = to_entity_id(WordId, word_id, WordNotFoundError)

        word_with_stats = self.word_repository.find_with_stats(word_id_vo)
        if not word_with_stats:
            raise WordNotFoundError(word_id)

        return WordDetails(
            word=word_with_stats.word,
            stats=word_with_stats.stats,
            groups=self.group_repository.find_by_word(word_id_vo),
        )
