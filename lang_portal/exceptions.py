"""Exception hierarchy for the study-tracking core.

Every failure keeps its kind (the exception class) so that an adapter layer
can map it to a transport-specific response. Nothing here is retried.
"""


class LangPortalError(Exception):
    """Base exception for all lang-portal errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class NotFoundError(LangPortalError):
    """Referenced entity does not exist."""


class WordNotFoundError(NotFoundError):
    """Word not found error."""

    def __init__(self, word_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with word ID or custom message."""
        self.word_id = word_id
        if message:
            super().__init__(message)
        elif word_id is not None:
            super().__init__(f"Word with id {word_id} not found")
        else:
            super().__init__("Word not found")


class GroupNotFoundError(NotFoundError):
    """Group not found error."""

    def __init__(self, group_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with group ID or custom message."""
        self.group_id = group_id
        if message:
            super().__init__(message)
        elif group_id is not None:
            super().__init__(f"Group with id {group_id} not found")
        else:
            super().__init__("Group not found")


class StudySessionNotFoundError(NotFoundError):
    """Study session not found error."""

    def __init__(self, session_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with session ID or custom message."""
        self.session_id = session_id
        if message:
            super().__init__(message)
        elif session_id is not None:
            super().__init__(f"Study session with id {session_id} not found")
        else:
            super().__init__("Study session not found")


class StudyActivityNotFoundError(NotFoundError):
    """Study activity is not part of the activity catalog."""

    def __init__(self, activity_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with activity ID or custom message."""
        self.activity_id = activity_id
        if message:
            super().__init__(message)
        elif activity_id is not None:
            super().__init__(f"Study activity with id {activity_id} not found")
        else:
            super().__init__("Study activity not found")


class ConstraintViolationError(LangPortalError):
    """A write would break referential integrity or a uniqueness rule."""


class InvalidArgumentError(LangPortalError):
    """Caller passed an argument the core cannot work with."""


class StoreUnavailableError(LangPortalError):
    """The underlying entity store could not be reached."""
