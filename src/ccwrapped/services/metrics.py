"""Metrics facade: runs every aggregator and the insight rules."""

from __future__ import annotations

from collections.abc import Sequence

from ccwrapped.models.metrics import MetricsResult
from ccwrapped.models.records import HistoryEvent, StatsSnapshot
from ccwrapped.services.activity import calculate_activity_metrics
from ccwrapped.services.commands import calculate_command_metrics
from ccwrapped.services.insights import generate_insights
from ccwrapped.services.model_usage import calculate_model_metrics
from ccwrapped.services.time_of_day import calculate_time_metrics


def calculate_metrics(stats: StatsSnapshot, history: Sequence[HistoryEvent]) -> MetricsResult:
    """Compute the usage digest from range-filtered stats and history.

    Pure and deterministic: filtering and clock reads happen upstream.
    """
    activity = calculate_activity_metrics(stats.daily_activity, stats.longest_session)
    time = calculate_time_metrics(stats.hour_counts, stats.daily_activity)
    model = calculate_model_metrics(stats.daily_model_tokens, stats.model_usage)
    commands = calculate_command_metrics(history)

    return MetricsResult(
        activity=activity,
        time=time,
        model=model,
        commands=commands,
        insights=generate_insights(activity, time, model, commands),
    )
