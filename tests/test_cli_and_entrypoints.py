"""CLI and entrypoint tests."""

from __future__ import annotations

import json
import runpy
from pathlib import Path

from typer.testing import CliRunner

from ccwrapped.cli import app


def test_cli_prints_summary(tmp_claude_dir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--period", "2025", "--claude-dir", str(tmp_claude_dir)])
    assert result.exit_code == 0
    assert "Loading your Claude Code data" in result.output
    assert "Your 2025 in Code" in result.output
    assert "Thanks for using Claude Code Wrapped!" in result.output


def test_cli_writes_json(tmp_claude_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "reports" / "wrapped.json"
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["--period", "2025", "--json", str(target), "--claude-dir", str(tmp_claude_dir)],
    )
    assert result.exit_code == 0
    assert "Loading" not in result.output
    document = json.loads(target.read_text())
    assert document["model"]["preferredModel"]["percentage"] == 70


def test_cli_missing_data_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--claude-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "Stats file not found" in result.output
    assert "Make sure you have used Claude Code" in result.output


def test_cli_invalid_period_in_json_mode_skips_hint(
    tmp_claude_dir: Path, tmp_path: Path
) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "--period",
            "decade",
            "--json",
            str(tmp_path / "out.json"),
            "--claude-dir",
            str(tmp_claude_dir),
        ],
    )
    assert result.exit_code == 1
    assert "Invalid time range" in result.output
    assert "Make sure you have used Claude Code" not in result.output
    assert not (tmp_path / "out.json").exists()


def test_cli_unwritable_json_target_exits_with_error(
    tmp_claude_dir: Path, tmp_path: Path
) -> None:
    runner = CliRunner()
    # the target is an existing directory
    result = runner.invoke(
        app,
        ["--period", "2025", "--json", str(tmp_path), "--claude-dir", str(tmp_claude_dir)],
    )
    assert result.exit_code == 1
    assert "Error: Failed to write" in result.output
    assert isinstance(result.exception, SystemExit)


def test_python_module_entrypoint_invokes_cli_app(monkeypatch) -> None:
    called = {"count": 0}

    def fake_app() -> None:
        called["count"] += 1

    monkeypatch.setattr("ccwrapped.cli.app", fake_app)
    runpy.run_module("ccwrapped.__main__", run_name="__main__")
    assert called["count"] == 1
