"""Tests for the digest and export services."""

from __future__ import annotations

import datetime as dt
import json
from pathlib import Path

from result import Err, Ok

from ccwrapped.config import Config
from ccwrapped.services.digest_service import DigestService
from ccwrapped.services.export_service import (
    format_number,
    render_text_summary,
    write_metrics_json,
)


class TestDigestService:
    def test_build_digest(self, test_config: Config, fixed_now: dt.datetime) -> None:
        result = DigestService(test_config).build_digest("2025", fixed_now)
        assert isinstance(result, Ok)
        digest = result.ok_value
        assert digest.time_range.label == "2025"
        assert digest.metrics.activity.total_messages == 240
        assert digest.metrics.commands.total_commands == 4

    def test_default_period_is_current_year(
        self, test_config: Config, fixed_now: dt.datetime
    ) -> None:
        result = DigestService(test_config).build_digest(None, fixed_now)
        assert isinstance(result, Ok)
        assert result.ok_value.time_range.label == "2025"

    def test_invalid_period(self, test_config: Config, fixed_now: dt.datetime) -> None:
        result = DigestService(test_config).build_digest("decade", fixed_now)
        assert isinstance(result, Err)
        assert "Invalid time range" in result.err_value

    def test_missing_stats_cache(self, tmp_path: Path, fixed_now: dt.datetime) -> None:
        result = DigestService(Config(claude_dir=tmp_path)).build_digest("year", fixed_now)
        assert isinstance(result, Err)
        assert "Stats file not found" in result.err_value

    def test_corrupt_stats_cache(self, tmp_path: Path, fixed_now: dt.datetime) -> None:
        (tmp_path / "stats-cache.json").write_text("{not json")
        result = DigestService(Config(claude_dir=tmp_path)).build_digest("year", fixed_now)
        assert isinstance(result, Err)
        assert result.err_value.startswith("Failed to load Claude Code data")

    def test_missing_history_still_builds(
        self, test_config: Config, fixed_now: dt.datetime
    ) -> None:
        test_config.history_path.unlink()
        result = DigestService(test_config).build_digest("2025", fixed_now)
        assert isinstance(result, Ok)
        assert result.ok_value.metrics.commands.total_commands == 0
        assert result.ok_value.metrics.commands.most_active_project is None


class TestExport:
    def test_write_metrics_json_creates_directories(
        self, test_config: Config, fixed_now: dt.datetime, tmp_path: Path
    ) -> None:
        digest = DigestService(test_config).build_digest("2025", fixed_now).unwrap()
        target = tmp_path / "out" / "nested" / "wrapped.json"
        write_metrics_json(digest.metrics, target)
        document = json.loads(target.read_text())
        assert document["activity"]["longestStreak"] == 3
        assert document["insights"][0]["title"] == "Marathon Coder"

    def test_render_text_summary(self, test_config: Config, fixed_now: dt.datetime) -> None:
        digest = DigestService(test_config).build_digest("2025", fixed_now).unwrap()
        text = render_text_summary(digest.metrics, digest.time_range.label)
        assert "Your 2025 in Code" in text
        assert "You sent 240 messages across 6 sessions" in text
        assert "Most active day: March 4, 2025 (120 messages)" in text
        assert "Afternoon Optimizer" in text
        assert "Busiest day: Tuesday" in text
        assert "Total Tokens: 10,000" in text
        assert "Cache Efficiency: 10x" in text
        assert "Most active project: alpha (2 prompts)" in text
        assert "* Plugin Enthusiast:" in text

    def test_format_number(self) -> None:
        assert format_number(1234567) == "1,234,567"
        assert format_number(0) == "0"
