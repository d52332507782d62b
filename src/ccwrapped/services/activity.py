"""Activity metrics: totals, most active day, streaks, longest session."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from ccwrapped.models.metrics import ActivityMetrics, LongestSession, MostActiveDay
from ccwrapped.models.records import DailyActivity, LongestSessionRecord
from ccwrapped.services._numbers import round_half_up

_MS_PER_HOUR = 60 * 60 * 1000


def calculate_activity_metrics(
    daily_activity: Sequence[DailyActivity],
    longest_session: LongestSessionRecord | None = None,
) -> ActivityMetrics:
    """Aggregate daily activity records into totals and streaks."""
    total_messages = sum(day.message_count for day in daily_activity)
    total_sessions = sum(day.session_count for day in daily_activity)
    total_tool_calls = sum(day.tool_call_count for day in daily_activity)

    avg_messages_per_session = (
        round_half_up(total_messages / total_sessions) if total_sessions > 0 else 0
    )

    busiest = most_active_day(daily_activity)

    return ActivityMetrics(
        total_messages=total_messages,
        total_sessions=total_sessions,
        total_tool_calls=total_tool_calls,
        avg_messages_per_session=avg_messages_per_session,
        most_active_day=(
            MostActiveDay(
                date=format_display_date(busiest.date),
                message_count=busiest.message_count,
            )
            if busiest is not None
            else None
        ),
        days_active=len({day.date for day in daily_activity}),
        longest_streak=calculate_streak(daily_activity),
        longest_session=_format_longest_session(longest_session),
    )


def most_active_day(daily_activity: Sequence[DailyActivity]) -> DailyActivity | None:
    """Return the day with the most messages.

    The running maximum starts at zero and only a strictly greater count
    replaces it, so the earliest record wins ties and days with no messages
    never qualify.
    """
    best: DailyActivity | None = None
    for day in daily_activity:
        if day.message_count > (best.message_count if best is not None else 0):
            best = day
    return best


def calculate_streak(daily_activity: Sequence[DailyActivity]) -> int:
    """Longest run of consecutive calendar days that have activity records."""
    if not daily_activity:
        return 0

    ordered = sorted(daily_activity, key=lambda day: day.date)
    max_streak = 1
    current = 1
    for prev, curr in zip(ordered, ordered[1:]):
        if (curr.date - prev.date).days == 1:
            current += 1
            max_streak = max(max_streak, current)
        else:
            current = 1
    return max_streak


def format_display_date(value: dt.date) -> str:
    """Format a date as e.g. ``January 5, 2025``."""
    return f"{value:%B} {value.day}, {value.year}"


def _format_longest_session(record: LongestSessionRecord | None) -> LongestSession | None:
    if record is None:
        return None
    return LongestSession(
        message_count=record.message_count,
        duration=record.duration,
        duration_hours=round_half_up(record.duration / _MS_PER_HOUR),
        date=format_display_date(record.timestamp.astimezone().date()),
    )
