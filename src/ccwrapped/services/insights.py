"""Rule-based insight badges."""

from __future__ import annotations

from ccwrapped.models.metrics import (
    ActivityMetrics,
    CommandMetrics,
    Insight,
    ModelMetrics,
    TimeMetrics,
)

MARATHON_HOURS = 10
STREAK_DAYS = 7
EXPLORER_COMMANDS = 10
POWER_USER_MESSAGES = 50
PLUGIN_COMMAND = "/plugin"


def generate_insights(
    activity: ActivityMetrics,
    time: TimeMetrics,
    model: ModelMetrics,
    commands: CommandMetrics,
) -> tuple[Insight, ...]:
    """Evaluate badge rules in priority order.

    ``time`` and ``model`` are accepted so every aggregate is available to
    rules, though no current rule reads them.
    """
    insights: list[Insight] = []

    session = activity.longest_session
    if session is not None and session.duration_hours > MARATHON_HOURS:
        insights.append(
            Insight(
                title="Marathon Coder",
                description=(
                    f"Your longest session lasted {session.duration_hours} hours! "
                    "That's dedication!"
                ),
            )
        )

    if activity.longest_streak >= STREAK_DAYS:
        insights.append(
            Insight(
                title="Consistency Champion",
                description=f"{activity.longest_streak} day coding streak! You're on fire!",
            )
        )

    if commands.command_diversity >= EXPLORER_COMMANDS:
        insights.append(
            Insight(
                title="Feature Explorer",
                description=(
                    f"You used {commands.command_diversity} different commands. "
                    "You know Claude Code well!"
                ),
            )
        )
    elif commands.top_commands and commands.top_commands[0].command == PLUGIN_COMMAND:
        insights.append(
            Insight(
                title="Plugin Enthusiast",
                description=f"You love exploring plugins! {PLUGIN_COMMAND} was your top command.",
            )
        )

    if activity.avg_messages_per_session > POWER_USER_MESSAGES:
        insights.append(
            Insight(
                title="Power User",
                description=(
                    f"Average of {activity.avg_messages_per_session} messages per session. "
                    "You get things done!"
                ),
            )
        )

    return tuple(insights)
