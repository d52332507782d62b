"""Load the Claude Code stats cache and command history for a time range."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ccwrapped.models.records import HistoryEvent, StatsSnapshot

if TYPE_CHECKING:
    from ccwrapped.data.time_range import TimeRange

logger = logging.getLogger(__name__)


def load_stats_cache(path: Path, time_range: TimeRange) -> StatsSnapshot:
    """Parse ``stats-cache.json`` and keep daily records inside the range.

    Raises:
        FileNotFoundError: If the stats cache does not exist.
        ValueError: If the file is not a valid stats cache document.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Stats file not found at {path}. Have you used Claude Code yet?")

    try:
        stats = StatsSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise ValueError(f"Invalid stats cache {path}: {exc.error_count()} error(s)") from exc

    return stats.model_copy(
        update={
            "daily_activity": [
                day for day in stats.daily_activity if time_range.contains_date(day.date)
            ],
            "daily_model_tokens": [
                day for day in stats.daily_model_tokens if time_range.contains_date(day.date)
            ],
        }
    )


def load_history(path: Path, time_range: TimeRange) -> list[HistoryEvent]:
    """Parse ``history.jsonl`` and keep events inside the range.

    A missing file is not an error: command stats are simply empty.
    """
    if not path.is_file():
        logger.warning("History file not found at %s. Command stats will be limited.", path)
        return []
    return [
        event
        for event in _iter_history_events(path)
        if time_range.contains_timestamp_ms(event.timestamp)
    ]


def _iter_history_events(path: Path) -> Generator[HistoryEvent]:
    # invalid UTF-8 bytes decode to U+FFFD
    with open(path, encoding="utf-8", errors="replace") as file:
        for line_num, line in enumerate(file, 1):
            line = line.strip()
            if not line:
                continue
            try:
                raw = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("Invalid JSON at %s:%d", path, line_num)
                continue
            if not isinstance(raw, dict):
                logger.warning("Unexpected history entry at %s:%d", path, line_num)
                continue
            try:
                yield HistoryEvent.model_validate(raw)
            except ValidationError:
                logger.warning("Invalid history entry at %s:%d", path, line_num)
