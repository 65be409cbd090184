"""Common time helpers shared across models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def from_unix_ms(ms: int | float | None) -> datetime | None:
    """Convert a Unix-millisecond timestamp to an aware UTC datetime.

    The backend uses 0 (or omits the field) for "no timestamp".
    """
    if not ms:
        return None
    return datetime.fromtimestamp(ms / 1000, UTC)
