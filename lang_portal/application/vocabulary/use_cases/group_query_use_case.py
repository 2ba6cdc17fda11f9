"""Use case for reading groups, their words, sessions and statistics."""

from lang_portal.application.common.identifiers import to_entity_id
from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.study.protocols.study_activity_catalog import (
    StudyActivityCatalogProtocol,
)
from lang_portal.application.study.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from lang_portal.application.study.use_cases.dtos import StudySessionSummary
from lang_portal.application.study.use_cases.study_session_query_use_case import (
    build_session_summary,
)
from lang_portal.application.vocabulary.protocols.group_repository import (
    GroupRepositoryProtocol,
)
from lang_portal.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from lang_portal.application.vocabulary.use_cases.dtos import (
    GroupDetails,
    GroupStats,
    GroupSummary,
    WordWithStats,
)
from lang_portal.domain.common.value_objects import GroupId
from lang_portal.domain.vocabulary.entities import Group
from lang_portal.exceptions import GroupNotFoundError


class GroupQueryUseCase:
    """Use case for reading groups."""

    def __init__(
        self,
        group_repository: GroupRepositoryProtocol,
        word_repository: WordRepositoryProtocol,
        session_repository: StudySessionRepositoryProtocol,
        activity_catalog: StudyActivityCatalogProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.group_repository = group_repository
        self.word_repository = word_repository
        self.session_repository = session_repository
        self.activity_catalog = activity_catalog

    def list_groups(self, page: int, per_page: int) -> PaginatedResult[GroupSummary]:
        """List groups ordered by name, each with its word count."""
        return self.group_repository.list_summaries(Pagination(page=page, page_size=per_page))

    def get_group(self, group_id: int) -> GroupDetails:
        """
        Get a group together with its study statistics.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        group = self._require_group(group_id)
        return GroupDetails(group=group, stats=self.group_repository.get_stats(group.id))

    def get_group_stats(self, group_id: int) -> GroupStats:
        """
        Get study statistics for a group.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        group = self._require_group(group_id)
        return self.group_repository.get_stats(group.id)

    def list_group_words(
        self, group_id: int, page: int, per_page: int
    ) -> PaginatedResult[WordWithStats]:
        """
        List the words of a group with their review counts.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        pagination = Pagination(page=page, page_size=per_page)
        group = self._require_group(group_id)
        return self.word_repository.list_by_group(group.id, pagination)

    def list_group_sessions(
        self, group_id: int, page: int, per_page: int
    ) -> PaginatedResult[StudySessionSummary]:
        """
        List study sessions started against a group, newest first.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        pagination = Pagination(page=page, page_size=per_page)
        group = self._require_group(group_id)
        rows = self.session_repository.list_rows(pagination, group_id=group.id)
        return rows.map(lambda row: build_session_summary(row, self.activity_catalog))

    def _require_group(self, group_id: int) -> Group:
        group_id_vo = to_entity_id(GroupId, group_id, GroupNotFoundError)
        group = self.group_repository.find_by_id(group_id_vo)
        if not group:
            raise GroupNotFoundError(group_id)
        return group
