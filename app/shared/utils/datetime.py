"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC. Calendar
boundaries (start of day, week, month) are computed in a configured
local timezone and returned as UTC instants.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime, time, timedelta, tzinfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_timestamp(value: datetime | date | str) -> datetime:
    """
    Parse a timestamp into a UTC-aware datetime.

    Accepts datetime, date (midnight UTC), or an ISO-8601 string. A trailing
    "Z" is accepted; naive values are treated as UTC.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Not a timestamp: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def _local_midnight(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz).astimezone(UTC)


def start_of_day(now: datetime, tz: tzinfo) -> datetime:
    """Return local midnight of the day containing now, as a UTC instant."""
    return _local_midnight(now.astimezone(tz).date(), tz)


def start_of_next_day(now: datetime, tz: tzinfo) -> datetime:
    """Return local midnight of the day after now, as a UTC instant."""
    return _local_midnight(now.astimezone(tz).date() + timedelta(days=1), tz)


def start_of_week(now: datetime, tz: tzinfo) -> datetime:
    """Return local midnight of the most recent Sunday (weeks start on Sunday)."""
    local_day = now.astimezone(tz).date()
    days_since_sunday = (local_day.weekday() + 1) % 7
    return _local_midnight(local_day - timedelta(days=days_since_sunday), tz)


def start_of_month(now: datetime, tz: tzinfo) -> datetime:
    """Return local midnight of the first day of now's calendar month."""
    return _local_midnight(now.astimezone(tz).date().replace(day=1), tz)
