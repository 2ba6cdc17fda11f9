"""Protocol for Group repository in vocabulary context."""

from typing import Protocol

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.application.vocabulary.use_cases.dtos import GroupStats, GroupSummary
from lang_portal.domain.common.value_objects import GroupId, WordId
from lang_portal.domain.vocabulary.entities import Group


class GroupRepositoryProtocol(Protocol):
    def find_by_id(self, group_id: GroupId) -> Group | None: ...

    def find_by_word(self, word_id: WordId) -> list[Group]: ...

    def list_summaries(self, pagination: Pagination) -> PaginatedResult[GroupSummary]: ...

    def get_stats(self, group_id: GroupId) -> GroupStats: ...

    def add(self, group: Group) -> Group: ...

    def add_word(self, group_id: GroupId, word_id: WordId) -> None: ...
