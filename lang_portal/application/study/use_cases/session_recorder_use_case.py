"""Use case for recording study history: starting sessions and appending reviews."""

import structlog

from lang_portal.application.common.identifiers import to_entity_id
from lang_portal.application.common.unit_of_work import UnitOfWork
from lang_portal.application.study.protocols.study_activity_catalog import (
    StudyActivityCatalogProtocol,
)
from lang_portal.application.study.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from lang_portal.application.study.protocols.word_review_repository import (
    WordReviewRepositoryProtocol,
)
from lang_portal.application.vocabulary.protocols.group_repository import (
    GroupRepositoryProtocol,
)
from lang_portal.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from lang_portal.domain.common.value_objects import (
    GroupId,
    StudyActivityId,
    StudySessionId,
    WordId,
)
from lang_portal.domain.study.entities import StudySession, WordReview
from lang_portal.exceptions import (
    GroupNotFoundError,
    StudyActivityNotFoundError,
    StudySessionNotFoundError,
    WordNotFoundError,
)

logger = structlog.get_logger(__name__)


class SessionRecorderUseCase:
    """
    Transactional writer for study sessions and word reviews.

    Each operation runs in its own unit of work: the existence checks and the
    insert share one transaction, and any failure rolls everything back before
    it reaches the caller. Failures are never retried here.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        group_repository: GroupRepositoryProtocol,
        word_repository: WordRepositoryProtocol,
        session_repository: StudySessionRepositoryProtocol,
        review_repository: WordReviewRepositoryProtocol,
        activity_catalog: StudyActivityCatalogProtocol,
    ) -> None:
        """Initialize use case with the unit of work and repository protocols."""
        self.uow = uow
        self.group_repository = group_repository
        self.word_repository = word_repository
        self.session_repository = session_repository
        self.review_repository = review_repository
        self.activity_catalog = activity_catalog

    def start_session(self, group_id: int, activity_id: int) -> StudySession:
        """
        Start a study session for a group with a catalog activity.

        Args:
            group_id: ID of the group being studied
            activity_id: ID of the activity in the catalog

        Returns:
            Persisted StudySession with its store-assigned id and created_at

        Raises:
            GroupNotFoundError: If the group does not exist
            StudyActivityNotFoundError: If the activity is not in the catalog
            ConstraintViolationError: If the group vanished before the insert
        """
        group_id_vo = to_entity_id(GroupId, group_id, GroupNotFoundError)
        activity_id_vo = to_entity_id(StudyActivityId, activity_id, StudyActivityNotFoundError)

        if not self.activity_catalog.find_by_id(activity_id_vo):
            raise StudyActivityNotFoundError(activity_id)

        with self.uow:
            if not self.group_repository.find_by_id(group_id_vo):
                raise GroupNotFoundError(group_id)

            session = self.session_repository.add(
                StudySession.create(group_id=group_id_vo, activity_id=activity_id_vo)
            )
            self.uow.commit()

        logger.info(
            "started_study_session",
            session_id=session.id.value,
            group_id=group_id,
            activity_id=activity_id,
        )
        return session

    def record_review(self, session_id: int, word_id: int, correct: bool) -> WordReview:
        """
        Append one review outcome to a session.

        Repeated calls for the same session and word create separate reviews;
        the full history is kept.

        Args:
            session_id: ID of the study session
            word_id: ID of the reviewed word
            correct: Whether the learner got the word right

        Returns:
            Persisted WordReview with its store-assigned id and created_at

        Raises:
            StudySessionNotFoundError: If the session does not exist
            WordNotFoundError: If the word does not exist
            ConstraintViolationError: If a referent vanished before the insert
        """
        session_id_vo = to_entity_id(StudySessionId, session_id, StudySessionNotFoundError)
        word_id_vo = to_entity_id(WordId, word_id, WordNotFoundError)

        with self.uow:
            if not self.session_repository.find_by_id(session_id_vo):
                raise StudySessionNotFoundError(session_id)
            if not self.word_repository.find_by_id(word_id_vo):
                raise WordNotFoundError(word_id)

            review = self.review_repository.add(
                WordReview.create(session_id=session_id_vo, word_id=word_id_vo, correct=correct)
            )
            self.uow.commit()

        logger.info(
            "recorded_word_review",
            review_id=review.id.value,
            session_id=session_id,
            word_id=word_id,
            correct=correct,
        )
        return review
