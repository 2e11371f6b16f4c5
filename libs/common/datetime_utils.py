"""Datetime utilities for timezone-aware UTC timestamps.

Usage:
    from libs.common.datetime_utils import utc_now

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
"""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from libs.common.config import get_settings


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime.

    Always use this for timestamps in the database.
    """
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC.

    SQLite hands back naive values even for ``DateTime(timezone=True)``
    columns, so anything read back from the database goes through here
    before arithmetic against ``utc_now()``.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def hours_between(start: time, end: time) -> float:
    """Length of a same-day time range in hours (negative if end < start)."""
    anchor = date.min
    delta = datetime.combine(anchor, end) - datetime.combine(anchor, start)
    return delta.total_seconds() / 3600


def to_local(value: datetime) -> datetime:
    """Convert to the configured ``TIMEZONE`` for wall-clock dates and times."""
    local_tz = ZoneInfo(get_settings().TIMEZONE)
    return ensure_utc(value).astimezone(local_tz)
