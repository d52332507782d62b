"""Model usage metrics: token totals per model and cache efficiency."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ccwrapped.models.metrics import CacheEfficiency, ModelMetrics, ModelShare
from ccwrapped.models.records import DailyModelTokens, ModelUsage
from ccwrapped.services._numbers import percentage, round_half_up
from ccwrapped.services.model_names import format_model_name


def calculate_model_metrics(
    daily_model_tokens: Sequence[DailyModelTokens],
    model_usage: Mapping[str, ModelUsage] | None = None,
) -> ModelMetrics:
    """Aggregate per-day token counts by model."""
    totals = tokens_by_model(daily_model_tokens)
    total_tokens = sum(totals.values())

    # sorted() is stable: equal totals keep first-seen order
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    breakdown = tuple(
        ModelShare(
            name=format_model_name(model_id),
            tokens=tokens,
            percentage=percentage(tokens, total_tokens),
        )
        for model_id, tokens in ranked
    )

    return ModelMetrics(
        preferred_model=breakdown[0] if breakdown else None,
        total_tokens=total_tokens,
        cache_efficiency=calculate_cache_efficiency(model_usage),
        model_breakdown=breakdown,
    )


def tokens_by_model(daily_model_tokens: Sequence[DailyModelTokens]) -> dict[str, int]:
    """Sum tokens per model ID, in first-seen order."""
    totals: dict[str, int] = {}
    for day in daily_model_tokens:
        for model_id, tokens in day.tokens_by_model.items():
            totals[model_id] = totals.get(model_id, 0) + tokens
    return totals


def calculate_cache_efficiency(
    model_usage: Mapping[str, ModelUsage] | None,
) -> CacheEfficiency | None:
    """Ratio of cache reads to cache writes across all models.

    Returns None when usage is missing or nothing was ever written to cache.
    """
    if model_usage is None:
        return None

    cache_read = sum(usage.cache_read_input_tokens for usage in model_usage.values())
    cache_creation = sum(usage.cache_creation_input_tokens for usage in model_usage.values())
    if cache_creation == 0:
        return None

    return CacheEfficiency(
        cache_read_tokens=cache_read,
        cache_creation_tokens=cache_creation,
        efficiency_ratio=round_half_up(cache_read / cache_creation),
    )
