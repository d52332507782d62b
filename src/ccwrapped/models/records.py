"""Input record models for the stats cache and command history."""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from ccwrapped.models.base import CamelModel


class DailyActivity(CamelModel):
    """Message, session and tool-call counts for one calendar day."""

    date: dt.date
    message_count: int = 0
    session_count: int = 0
    tool_call_count: int = 0


class DailyModelTokens(CamelModel):
    """Tokens consumed per model on one calendar day."""

    date: dt.date
    tokens_by_model: dict[str, int] = Field(default_factory=dict)


class LongestSessionRecord(CamelModel):
    """The single longest session recorded in the stats cache."""

    message_count: int = 0
    duration: int = 0  # milliseconds
    timestamp: dt.datetime


class ModelUsage(CamelModel):
    """Lifetime cache token usage for one model."""

    cache_read_input_tokens: int = 0
    cache_creation_input_tokens: int = 0


class StatsSnapshot(CamelModel):
    """Contents of ``stats-cache.json``, optionally narrowed to a time range.

    Only ``daily_activity`` and ``daily_model_tokens`` are filtered by the
    loader; the remaining fields are lifetime aggregates passed through as-is.
    """

    daily_activity: list[DailyActivity] = Field(default_factory=list)
    daily_model_tokens: list[DailyModelTokens] = Field(default_factory=list)
    hour_counts: dict[int, int] = Field(default_factory=dict)
    longest_session: LongestSessionRecord | None = None
    model_usage: dict[str, ModelUsage] | None = None
    total_sessions: int = 0
    total_messages: int = 0
    first_session_date: str | None = None


class HistoryEvent(CamelModel):
    """One line of ``history.jsonl``: a prompt or slash command."""

    display: str | None = None
    project: str | None = None
    timestamp: int = 0  # milliseconds since epoch
