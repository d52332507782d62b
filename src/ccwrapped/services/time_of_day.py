"""Time-of-day metrics: peak hours, coding persona, busiest weekday."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ccwrapped.models.metrics import PeakHour, PersonaInfo, TimeMetrics
from ccwrapped.models.personas import (
    AFTERNOON_HOURS,
    MORNING_HOURS,
    NIGHT_HOURS,
    Persona,
    persona_profile,
)
from ccwrapped.models.records import DailyActivity

PEAK_HOUR_LIMIT = 3


def calculate_time_metrics(
    hour_counts: Mapping[int, int],
    daily_activity: Sequence[DailyActivity],
) -> TimeMetrics:
    """Summarise when the user is most active."""
    profile = persona_profile(determine_persona(hour_counts))
    return TimeMetrics(
        peak_hours=peak_hours(hour_counts),
        persona=PersonaInfo(
            name=profile.name,
            emoji=profile.emoji,
            description=profile.description,
        ),
        busiest_day_of_week=busiest_day_of_week(daily_activity),
    )


def peak_hours(
    hour_counts: Mapping[int, int], limit: int = PEAK_HOUR_LIMIT
) -> tuple[PeakHour, ...]:
    """Top hours by count; ties go to the earlier hour."""
    ranked = sorted(hour_counts.items(), key=lambda item: (-item[1], item[0]))
    return tuple(
        PeakHour(hour=format_hour(hour), hour_num=hour, count=count)
        for hour, count in ranked[:limit]
    )


def format_hour(hour: int) -> str:
    """Format an hour of day (0-23) on the 12-hour clock."""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def determine_persona(hour_counts: Mapping[int, int]) -> Persona:
    """Classify the histogram by its dominant time-of-day window."""
    night = sum(count for hour, count in hour_counts.items() if hour in NIGHT_HOURS)
    morning = sum(count for hour, count in hour_counts.items() if hour in MORNING_HOURS)
    afternoon = sum(count for hour, count in hour_counts.items() if hour in AFTERNOON_HOURS)

    if night > morning and night > afternoon:
        return Persona.NIGHT_OWL
    if morning > afternoon:
        return Persona.MORNING_ARCHITECT
    return Persona.AFTERNOON_OPTIMIZER


def busiest_day_of_week(daily_activity: Sequence[DailyActivity]) -> str | None:
    """Weekday name with the most messages, or None without records."""
    totals: dict[str, int] = {}
    for day in daily_activity:
        name = f"{day.date:%A}"
        totals[name] = totals.get(name, 0) + day.message_count
    if not totals:
        return None
    # max() keeps the first weekday seen on ties
    return max(totals, key=lambda name: totals[name])
