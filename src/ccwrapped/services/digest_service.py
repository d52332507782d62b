"""Digest service: load range-filtered data and compute metrics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from ccwrapped.data.parser import load_history, load_stats_cache
from ccwrapped.data.time_range import TimeRange, parse_time_range
from ccwrapped.models.metrics import MetricsResult
from ccwrapped.services.metrics import calculate_metrics

if TYPE_CHECKING:
    import datetime as dt

    from ccwrapped.config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Digest:
    """Metrics together with the window they cover."""

    time_range: TimeRange
    metrics: MetricsResult


class DigestService:
    """Service that builds usage digests from the Claude data directory."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def build_digest(self, period: str | None, now: dt.datetime) -> Result[Digest, str]:
        """Build the digest for a period ending at ``now``."""
        try:
            time_range = parse_time_range(period, now)
        except ValueError as exc:
            return Err(str(exc))

        try:
            stats = load_stats_cache(self._config.stats_cache_path, time_range)
            history = load_history(self._config.history_path, time_range)
        except FileNotFoundError as exc:
            return Err(str(exc))
        except (OSError, ValueError) as exc:
            return Err(f"Failed to load Claude Code data: {exc}")

        logger.info(
            "Loaded %d activity days and %d history events for %s",
            len(stats.daily_activity),
            len(history),
            time_range.label,
        )
        return Ok(Digest(time_range=time_range, metrics=calculate_metrics(stats, history)))
