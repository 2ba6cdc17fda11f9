from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from lang_portal.application.common.pagination import PaginatedResult, Pagination
from lang_portal.domain.common.value_objects import GroupId, StudyActivityId, StudySessionId
from lang_portal.domain.study.entities import StudySession


@dataclass
class StudySessionRow:
    """Session joined with the name of its group."""

    session: StudySession
    group_name: str


@dataclass
class ActivitySessionRow:
    """Session joined with its group name and review aggregates."""

    session: StudySession
    group_name: str
    last_review_at: datetime | None
    review_count: int


class StudySessionRepositoryProtocol(Protocol):
    def find_by_id(self, session_id: StudySessionId) -> StudySession | None: ...

    def find_row(self, session_id: StudySessionId) -> StudySessionRow | None: ...

    def find_latest(self) -> ActivitySessionRow | None: ...

    def list_rows(
        self, pagination: Pagination, group_id: GroupId | None = None
    ) -> PaginatedResult[StudySessionRow]: ...

    def list_by_activity(
        self, activity_id: StudyActivityId, pagination: Pagination
    ) -> PaginatedResult[ActivitySessionRow]: ...

    def add(self, session: StudySession) -> StudySession: ...
