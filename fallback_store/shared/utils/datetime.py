"""
UTC datetime utilities for consistent timezone handling.

Record timestamps are stored as ISO-8601 strings of timezone-aware UTC
datetimes; tokens carry epoch milliseconds. Use these helpers instead of
datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string (record timestamp format)."""
    return utc_now().isoformat()


def to_epoch_ms(dt: datetime) -> int:
    """
    Convert a datetime to integer milliseconds since the Unix epoch.
    Naive datetimes are assumed to be UTC.

    Args:
        dt: Datetime to convert

    Returns:
        Milliseconds since epoch
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp() * 1000)


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """
    Create a UTC-aware datetime from a millisecond Unix timestamp.
    Common in JavaScript/APIs that use milliseconds.

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        UTC-aware datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)
