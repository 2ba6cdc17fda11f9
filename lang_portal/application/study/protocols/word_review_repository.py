from typing import Protocol

from lang_portal.domain.study.entities import WordReview


class WordReviewRepositoryProtocol(Protocol):
    def add(self, review: WordReview) -> WordReview:
        """
        Append a review.

        Never merges with earlier reviews of the same word and session.

        Returns:
            WordReview with store-assigned id and created_at
        """
        ...
