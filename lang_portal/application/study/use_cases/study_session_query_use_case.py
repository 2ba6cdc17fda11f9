"""Use case for querying study sessions and the activity catalog."""

from lang_portal.application.common.identifiers import to_entity_id
from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.study.protocols.study_activity_catalog import (
    StudyActivityCatalogProtocol,
)
from lang_portal.application.study.protocols.study_session_repository import (
    ActivitySessionRow,
    StudySessionRepositoryProtocol,
    StudySessionRow,
)
from lang_portal.application.study.use_cases.dtos import ActivitySessionItem, StudySessionSummary
from lang_portal.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from lang_portal.domain.common.value_objects import StudyActivityId, StudySessionId
from lang_portal.domain.study.entities import StudyActivity
from lang_portal.domain.vocabulary.entities import Word
from lang_portal.exceptions import StudyActivityNotFoundError, StudySessionNotFoundError


def build_session_summary(
    row: StudySessionRow, activity_catalog: StudyActivityCatalogProtocol
) -> StudySessionSummary:
    """Attach the catalog name of the session's activity (None if not in the catalog)."""
    activity = activity_catalog.find_by_id(row.session.activity_id)
    return StudySessionSummary(
        session=row.session,
        group_name=row.group_name,
        activity_name=activity.name if activity else None,
    )


class StudySessionQueryUseCase:
    """Use case for reading study sessions."""

    def __init__(
        self,
        session_repository: StudySessionRepositoryProtocol,
        word_repository: WordRepositoryProtocol,
        activity_catalog: StudyActivityCatalogProtocol,
    ) -> None:
        self.session_repository = session_repository
        self.word_repository = word_repository
        self.activity_catalog = activity_catalog

    def list_sessions(self, page: int, per_page: int) -> PaginatedResult[StudySessionSummary]:
        """
        List all study sessions, newest first.

        This is a read-only operation (no commit needed).

        Args:
            page: Page number (1-indexed, not clamped)
            per_page: Page size

        Returns:
            Page of StudySessionSummary

        Raises:
            InvalidArgumentError: If per_page is below 1
        """
        rows = self.session_repository.list_rows(Pagination(page=page, page_size=per_page))
        return rows.map(lambda row: build_session_summary(row, self.activity_catalog))

    def get_session(self, session_id: int) -> StudySessionSummary:
        """
        Get a single study session.

        Raises:
            StudySessionNotFoundError: If the session does not exist
        """
        row = self.session_repository.find_row(
            to_entity_id(StudySessionId, session_id, StudySessionNotFoundError)
        )
        if not row:
            raise StudySessionNotFoundError(session_id)
        return build_session_summary(row, self.activity_catalog)

    def list_session_words(
        self, session_id: int, page: int, per_page: int
    ) -> PaginatedResult[Word]:
        """
        List distinct words reviewed in a session, most recently reviewed first.

        Raises:
            StudySessionNotFoundError: If the session does not exist
        """
        pagination = Pagination(page=page, page_size=per_page)
        session_id_vo = to_entity_id(StudySessionId, session_id, StudySessionNotFoundError)
        if not self.session_repository.find_by_id(session_id_vo):
            raise StudySessionNotFoundError(session_id)
        return self.word_repository.list_by_session(session_id_vo, pagination)

    def list_sessions_by_activity(
        self, activity_id: int, page: int, per_page: int
    ) -> PaginatedResult[ActivitySessionItem]:
        """
        List sessions started with an activity, newest first.

        Each item carries the group name, the start time, the time of the last
        review (None when nothing was reviewed) and the number of reviews.

        Raises:
            StudyActivityNotFoundError: If the activity is not in the catalog
        """
        pagination = Pagination(page=page, page_size=per_page)
        activity = self.get_activity(activity_id)
        rows = self.session_repository.list_by_activity(activity.id, pagination)

        def to_item(row: ActivitySessionRow) -> ActivitySessionItem:
            return ActivitySessionItem(
                session_id=row.session.id.value,
                group_name=row.group_name,
                activity_name=activity.name,
                start_time=row.session.created_at,
                end_time=row.last_review_at,
                review_items_count=row.review_count,
            )

        return rows.map(to_item)

    def get_activity(self, activity_id: int) -> StudyActivity:
        """
        Look up an activity in the catalog.

        Raises:
            StudyActivityNotFoundError: If the activity is not in the catalog
        """
        activity = self.activity_catalog.find_by_id(
            to_entity_id(StudyActivityId, activity_id, StudyActivityNotFoundError)
        )
        if not activity:
            raise StudyActivityNotFoundError(activity_id)
        return activity

    def list_activities(self) -> list[StudyActivity]:
        """All catalog activities ordered by id."""
        return self.activity_catalog.list_all()
