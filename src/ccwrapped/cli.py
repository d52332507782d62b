"""Typer CLI for ccwrapped."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Err

from ccwrapped.config import Config
from ccwrapped.services.digest_service import DigestService
from ccwrapped.services.export_service import render_text_summary, write_metrics_json

app = typer.Typer(
    name="ccwrapped",
    help="Claude Code Wrapped: your Claude Code usage, summarised.",
)


@app.command()
def wrapped(
    period: Annotated[
        str,
        typer.Option("--period", help="year, month, week, all, or a year such as 2024"),
    ] = "year",
    json_path: Annotated[
        Path | None,
        typer.Option("--json", help="Write the metrics as JSON to this path instead"),
    ] = None,
    claude_dir: Annotated[
        Path | None,
        typer.Option("--claude-dir", help="Path to Claude data directory"),
    ] = None,
) -> None:
    """Show your Claude Code Wrapped summary."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    config = Config(
        claude_dir=claude_dir or Path.home() / ".claude",
    )

    if json_path is None:
        typer.echo("Loading your Claude Code data...\n")

    result = DigestService(config).build_digest(period, dt.datetime.now())
    if isinstance(result, Err):
        typer.echo(f"Error: {result.err_value}", err=True)
        if json_path is None:
            typer.echo("Make sure you have used Claude Code before running /wrapped.", err=True)
            typer.echo(f"Data files are stored in {config.claude_dir}", err=True)
        raise typer.Exit(code=1)

    digest = result.ok_value
    if json_path is not None:
        try:
            write_metrics_json(digest.metrics, json_path)
        except OSError as exc:
            typer.echo(f"Error: Failed to write {json_path}: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        return

    typer.echo(render_text_summary(digest.metrics, digest.time_range.label))
    typer.echo("\nThanks for using Claude Code Wrapped!")
