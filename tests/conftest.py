"""Shared fixtures for ccwrapped tests."""

from __future__ import annotations

import datetime as dt
import shutil
import time
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from ccwrapped.config import Config
from ccwrapped.data.time_range import TimeRange, parse_time_range
from ccwrapped.models.records import DailyActivity

SAMPLE_STATS_PATH = Path(__file__).parent / "data" / "sample_stats_cache.json"
SAMPLE_HISTORY_PATH = Path(__file__).parent / "data" / "sample_history.jsonl"

FIXED_NOW = dt.datetime(2025, 6, 1, 12, 0)


def make_day(date: str, messages: int = 1, sessions: int = 1, tools: int = 0) -> DailyActivity:
    """Build a daily activity record from an ISO date."""
    return DailyActivity(
        date=dt.date.fromisoformat(date),
        message_count=messages,
        session_count=sessions,
        tool_call_count=tools,
    )


@pytest.fixture
def fixed_now() -> dt.datetime:
    return FIXED_NOW


@pytest.fixture
def year_2025() -> TimeRange:
    """The whole of 2025."""
    return parse_time_range("2025", FIXED_NOW)


@pytest.fixture
def tmp_claude_dir(tmp_path: Path) -> Path:
    """Create a temporary Claude directory with sample stats and history."""
    claude_dir = tmp_path / ".claude"
    claude_dir.mkdir()
    shutil.copy(SAMPLE_STATS_PATH, claude_dir / "stats-cache.json")
    shutil.copy(SAMPLE_HISTORY_PATH, claude_dir / "history.jsonl")
    return claude_dir


@pytest.fixture
def test_config(tmp_claude_dir: Path) -> Config:
    """Config pointing at temporary test data."""
    return Config(claude_dir=tmp_claude_dir)


@pytest.fixture
def local_timezone(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """Switch the process-local timezone to a POSIX TZ string for one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")

    def apply(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield apply
    monkeypatch.undo()
    time.tzset()
