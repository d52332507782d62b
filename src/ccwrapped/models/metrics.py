"""Computed metrics models.

Every model here is frozen and serializes with camelCase aliases, so
``model_dump(by_alias=True)`` yields the persisted digest document.
"""

from __future__ import annotations

from ccwrapped.models.base import FrozenCamelModel


class MostActiveDay(FrozenCamelModel):
    date: str
    message_count: int


class LongestSession(FrozenCamelModel):
    """Longest session with its duration rounded to whole hours."""

    message_count: int
    duration: int
    duration_hours: int
    date: str


class ActivityMetrics(FrozenCamelModel):
    """Totals, streaks and most active day."""

    total_messages: int = 0
    total_sessions: int = 0
    total_tool_calls: int = 0
    avg_messages_per_session: int = 0
    most_active_day: MostActiveDay | None = None
    days_active: int = 0
    longest_streak: int = 0
    longest_session: LongestSession | None = None


class PeakHour(FrozenCamelModel):
    hour: str
    hour_num: int
    count: int


class PersonaInfo(FrozenCamelModel):
    name: str
    emoji: str
    description: str


class TimeMetrics(FrozenCamelModel):
    """Peak hours, persona and busiest weekday."""

    peak_hours: tuple[PeakHour, ...] = ()
    persona: PersonaInfo
    busiest_day_of_week: str | None = None


class ModelShare(FrozenCamelModel):
    """One model's share of the total token count."""

    name: str
    tokens: int
    percentage: int


class CacheEfficiency(FrozenCamelModel):
    cache_read_tokens: int
    cache_creation_tokens: int
    efficiency_ratio: int


class ModelMetrics(FrozenCamelModel):
    """Token usage by model."""

    preferred_model: ModelShare | None = None
    total_tokens: int = 0
    cache_efficiency: CacheEfficiency | None = None
    model_breakdown: tuple[ModelShare, ...] = ()


class CommandCount(FrozenCamelModel):
    command: str
    count: int


class ProjectActivity(FrozenCamelModel):
    path: str
    name: str
    count: int


class CommandMetrics(FrozenCamelModel):
    """Slash-command usage and the busiest project."""

    top_commands: tuple[CommandCount, ...] = ()
    command_diversity: int = 0
    total_commands: int = 0
    most_active_project: ProjectActivity | None = None


class Insight(FrozenCamelModel):
    title: str
    description: str


class MetricsResult(FrozenCamelModel):
    """The full usage digest."""

    activity: ActivityMetrics
    time: TimeMetrics
    model: ModelMetrics
    commands: CommandMetrics
    insights: tuple[Insight, ...] = ()
