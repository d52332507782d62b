"""Command metrics from the prompt history."""

from __future__ import annotations

import re
from collections.abc import Sequence

from ccwrapped.models.metrics import CommandCount, CommandMetrics, ProjectActivity
from ccwrapped.models.records import HistoryEvent

_COMMAND_RE = re.compile(r"^/\w+", re.ASCII)
TOP_COMMAND_LIMIT = 5


def extract_command(display: str) -> str | None:
    """Return the leading slash command (e.g. ``/plugin``), if any."""
    match = _COMMAND_RE.match(display)
    return match.group(0) if match else None


def calculate_command_metrics(history: Sequence[HistoryEvent]) -> CommandMetrics:
    """Rank slash commands and find the project with the most prompts."""
    if not history:
        return CommandMetrics(
            top_commands=(),
            command_diversity=0,
            total_commands=0,
            most_active_project=None,
        )

    command_counts: dict[str, int] = {}
    project_counts: dict[str, int] = {}
    for event in history:
        command = extract_command(event.display or "")
        if command is not None:
            command_counts[command] = command_counts.get(command, 0) + 1
        if event.project:
            project_counts[event.project] = project_counts.get(event.project, 0) + 1

    ranked = sorted(command_counts.items(), key=lambda item: item[1], reverse=True)
    return CommandMetrics(
        top_commands=tuple(
            CommandCount(command=command, count=count)
            for command, count in ranked[:TOP_COMMAND_LIMIT]
        ),
        command_diversity=len(command_counts),
        total_commands=len(history),
        most_active_project=_most_active_project(project_counts),
    )


def _most_active_project(project_counts: dict[str, int]) -> ProjectActivity | None:
    if not project_counts:
        return None
    path = max(project_counts, key=lambda p: project_counts[p])
    return ProjectActivity(
        path=path,
        name=path.split("/")[-1] or path,
        count=project_counts[path],
    )
