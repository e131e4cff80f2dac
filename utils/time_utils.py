"""Reference timestamp coercion and formatting utilities for naturaltime."""

from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Optional, Union

TimestampLike = Union[datetime, date, int, float, str]


def to_reference_datetime(
    timestamp: Optional[TimestampLike],
    clock: Callable[[], datetime] = datetime.now,
) -> datetime:
    """
    Coerce a timestamp-like value into a concrete datetime.

    Accepts:
    - None or "": absent, the clock is read at call time
    - datetime: returned unchanged
    - date: midnight of that day
    - int/float: epoch milliseconds, UTC
    - str: ISO 8601, a trailing "Z" meaning UTC

    Args:
        timestamp: Reference value, or None to use the clock
        clock: Callable returning the current time

    Returns:
        The reference point in time

    Raises:
        ValueError: If a string is not valid ISO 8601
        TypeError: If the value is of an unsupported type
    """
    if timestamp is None or timestamp == "":
        return clock()

    if isinstance(timestamp, datetime):
        return timestamp
    if isinstance(timestamp, date):
        return datetime.combine(timestamp, time())
    if isinstance(timestamp, (int, float)):
        return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
    if isinstance(timestamp, str):
        value = timestamp.strip()
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)

    raise TypeError(f"unsupported reference timestamp type: {type(timestamp).__name__}")


def format_rfc3339(moment: datetime) -> str:
    """Format a datetime as RFC 3339, rendering UTC as "Z"."""
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def format_duration(duration: timedelta) -> str:
    """
    Format a duration into human-readable string.

    Returns format like "1d2h30m" or "45m" or "30s".
    Seconds are only shown if less than 60 seconds total or if there's a remainder.

    Args:
        duration: Duration to format

    Returns:
        Formatted duration string
    """
    seconds = int(duration.total_seconds())
    if seconds < 60:
        return f"{seconds}s"

    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0:
        parts.append(f"{secs}s")

    return "".join(parts)
