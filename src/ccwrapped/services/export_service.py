"""Export the usage digest as a JSON document or a plain-text summary."""

from __future__ import annotations

import json
from pathlib import Path

from ccwrapped.models.metrics import MetricsResult


def export_metrics_json(metrics: MetricsResult) -> str:
    """Serialize metrics with the camelCase field names of the digest document."""
    return json.dumps(metrics.model_dump(mode="json", by_alias=True), indent=2, default=str)


def write_metrics_json(metrics: MetricsResult, path: Path) -> None:
    """Write the JSON digest, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(export_metrics_json(metrics), encoding="utf-8")


def format_number(value: int) -> str:
    return f"{value:,}"


def render_text_summary(metrics: MetricsResult, label: str) -> str:
    """Render the digest as plain text, one section per metric group."""
    activity = metrics.activity
    time = metrics.time
    model = metrics.model
    commands = metrics.commands

    lines: list[str] = []
    lines.append("CLAUDE CODE WRAPPED")
    lines.append(f"Your {label} in Code")
    lines.append("")

    lines.append("## Activity")
    lines.append(
        f"You sent {format_number(activity.total_messages)} messages "
        f"across {format_number(activity.total_sessions)} sessions"
    )
    lines.append(f"Made {format_number(activity.total_tool_calls)} tool calls")
    lines.append(f"Active on {activity.days_active} unique days")
    lines.append(f"Longest streak: {activity.longest_streak} days")
    if activity.most_active_day:
        lines.append(
            f"Most active day: {activity.most_active_day.date} "
            f"({activity.most_active_day.message_count} messages)"
        )
    if activity.longest_session:
        lines.append(
            f"Longest session: {activity.longest_session.duration_hours} hours, "
            f"{activity.longest_session.message_count} messages "
            f"({activity.longest_session.date})"
        )
    lines.append("")

    lines.append("## Peak Hours")
    if time.peak_hours:
        lines.append("You code most at:")
        for peak in time.peak_hours:
            lines.append(f"  {peak.hour:>5}  {format_number(peak.count)}")
    lines.append(f"Your Persona: {time.persona.emoji} {time.persona.name}")
    lines.append(f"({time.persona.description})")
    if time.busiest_day_of_week:
        lines.append(f"Busiest day: {time.busiest_day_of_week}")
    lines.append("")

    lines.append("## Model Usage")
    for share in model.model_breakdown:
        lines.append(f"  {share.name:<20} {share.percentage:>3}%  {format_number(share.tokens)}")
    lines.append(f"Total Tokens: {format_number(model.total_tokens)}")
    if model.cache_efficiency:
        lines.append(
            f"Cache Hits: {format_number(model.cache_efficiency.cache_read_tokens)} tokens"
        )
        lines.append(f"Cache Efficiency: {model.cache_efficiency.efficiency_ratio}x")
    lines.append("")

    lines.append("## Commands")
    for entry in commands.top_commands:
        lines.append(f"  {entry.command:<20} {entry.count}")
    lines.append(
        f"{commands.command_diversity} unique commands, "
        f"{format_number(commands.total_commands)} prompts"
    )
    if commands.most_active_project:
        lines.append(
            f"Most active project: {commands.most_active_project.name} "
            f"({commands.most_active_project.count} prompts)"
        )

    if metrics.insights:
        lines.append("")
        lines.append("## Insights")
        for insight in metrics.insights:
            lines.append(f"* {insight.title}: {insight.description}")

    return "\n".join(lines)
