# src/profile_stage/db/time.py
"""Timezone helpers for stored timestamps."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps.

    SQLite drops the offset of ``DateTime(timezone=True)`` columns; every
    timestamp this service writes is UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
