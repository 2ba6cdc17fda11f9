"""Small helpers shared across layers."""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to aware UTC.

    The store keeps UTC timestamps; some backends (SQLite) hand them back
    without tzinfo, in which case they are tagged as UTC rather than converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def utc_date(value: datetime) -> date:
    """Calendar date (UTC) of a timestamp."""
    return ensure_utc(value).date()
