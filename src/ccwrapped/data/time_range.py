"""Resolve period arguments such as ``week`` or ``2024`` into time windows."""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass

_YEAR_RE = re.compile(r"^\d{4}$")
_ALL_TIME_START = (2000, 1, 1)


@dataclass(frozen=True)
class TimeRange:
    """Inclusive ``[start, end]`` window with a display label."""

    start: dt.datetime
    end: dt.datetime
    label: str

    def contains(self, moment: dt.datetime) -> bool:
        return self.start <= moment <= self.end

    def contains_date(self, day: dt.date) -> bool:
        """Check a calendar day, taken at midnight in the window's timezone."""
        return self.contains(dt.datetime.combine(day, dt.time.min, tzinfo=self.start.tzinfo))

    def contains_timestamp_ms(self, timestamp_ms: int) -> bool:
        """Check an epoch-milliseconds timestamp; unrepresentable ones are outside."""
        try:
            moment = dt.datetime.fromtimestamp(timestamp_ms / 1000, tz=self.start.tzinfo)
        except (ValueError, OverflowError, OSError):
            return False
        return self.contains(moment)


def parse_time_range(period: str | None, now: dt.datetime) -> TimeRange:
    """Build the window for a period argument, ending at ``now``.

    Args:
        period: 'year' (default), 'month', 'week', 'all', or a four-digit year.
        now: Current time, supplied by the caller.

    Raises:
        ValueError: If the period is not recognised.
    """
    tz = now.tzinfo
    match period:
        case None | "" | "year":
            return TimeRange(dt.datetime(now.year, 1, 1, tzinfo=tz), now, str(now.year))
        case "month":
            return TimeRange(now - dt.timedelta(days=30), now, "Last 30 Days")
        case "week":
            return TimeRange(now - dt.timedelta(days=7), now, "Last 7 Days")
        case "all":
            return TimeRange(dt.datetime(*_ALL_TIME_START, tzinfo=tz), now, "All Time")

    if _YEAR_RE.match(period):
        year = int(period)
        return TimeRange(
            dt.datetime(year, 1, 1, tzinfo=tz),
            dt.datetime.combine(dt.date(year, 12, 31), dt.time.max, tzinfo=tz),
            str(year),
        )

    raise ValueError(
        f"Invalid time range: {period}. "
        "Use: year, month, week, all, or a specific year (e.g., 2024)"
    )
