"""Data models for resolved time expressions."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from utils.time_utils import format_rfc3339


@dataclass(frozen=True)
class MatchResult:
    """One interpretation found in an expression.

    ``date`` is always the primary resolved moment. ``start`` and ``end`` are
    only set when the match describes a range boundary; they stay None
    otherwise and are left out of ``to_dict()`` entirely.
    """
    date: datetime
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def has_range(self) -> bool:
        """Whether the match carries any range boundary."""
        return self.start is not None or self.end is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain mapping, omitting absent boundaries."""
        result: Dict[str, Any] = {}
        if self.start is not None:
            result["start"] = self.start
        if self.end is not None:
            result["end"] = self.end
        result["date"] = self.date
        return result


@dataclass(frozen=True)
class TimeRange:
    """A half-open interval [start, end).

    The start is inclusive and the end exclusive. Stored as a start plus a
    non-negative duration.
    """
    start: datetime
    duration: timedelta = timedelta(0)

    @classmethod
    def create(cls, start: datetime, duration: timedelta) -> 'TimeRange':
        """Create a range, clamping negative durations to zero."""
        if duration < timedelta(0):
            duration = timedelta(0)
        return cls(start, duration)

    @classmethod
    def from_times(cls, start: datetime, end: datetime) -> 'TimeRange':
        """Create a range from two times; an end before start gives an empty range."""
        if end < start:
            return cls(start, timedelta(0))
        return cls(start, end - start)

    @property
    def end(self) -> datetime:
        """When the range ends (exclusive)."""
        return self.start + self.duration

    def contains(self, moment: datetime) -> bool:
        """Check if start <= moment < end."""
        return self.start <= moment < self.end

    def contains_range(self, other: 'TimeRange') -> bool:
        """Check if another range is fully inside this one."""
        return other.start >= self.start and other.end <= self.end

    def overlaps(self, other: 'TimeRange') -> bool:
        """
        Check if two ranges share any common time point.

        Ranges that only touch (one ends exactly where the other starts)
        do not overlap.
        """
        return (
            self.end >= other.start
            and self.start <= other.end
            and self.end != other.start
            and other.end != self.start
        )

    def intersection(self, other: 'TimeRange') -> 'TimeRange':
        """
        Get the overlapping part of two ranges.

        Returns a zero-duration range at the later start when they don't overlap.
        """
        if not self.overlaps(other):
            return TimeRange(max(self.start, other.start), timedelta(0))

        start = max(self.start, other.start)
        end = min(self.end, other.end)
        return TimeRange(start, end - start)

    def union(self, other: 'TimeRange') -> 'TimeRange':
        """Smallest range containing both (meaningful for overlapping or adjacent ranges)."""
        start = min(self.start, other.start)
        end = max(self.end, other.end)
        return TimeRange(start, end - start)

    def is_all_day(self) -> bool:
        """Whether the range has zero duration."""
        return self.duration == timedelta(0)

    def __str__(self) -> str:
        return f"[{format_rfc3339(self.start)}, {format_rfc3339(self.end)})"
