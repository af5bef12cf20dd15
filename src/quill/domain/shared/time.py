"""Time utilities for the domain layer."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def advance_timestamp(previous: datetime) -> datetime:
    """Return the current time, but never earlier than or equal to ``previous``.

    Clocks can return the same value twice within one tick, and rows read
    back from some backends lose sub-tick precision.
    """
    now = utc_now()
    previous = ensure_tz_aware(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
