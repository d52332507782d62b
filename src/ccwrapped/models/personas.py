"""Coding persona definitions and display metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Persona(StrEnum):
    """Time-of-day window that dominates a user's activity."""

    NIGHT_OWL = "night_owl"
    MORNING_ARCHITECT = "morning_architect"
    AFTERNOON_OPTIMIZER = "afternoon_optimizer"


@dataclass(frozen=True)
class PersonaProfile:
    """Display metadata for one persona."""

    persona: Persona
    name: str
    emoji: str
    description: str


PERSONA_PROFILES: tuple[PersonaProfile, ...] = (
    PersonaProfile(Persona.NIGHT_OWL, "Night Owl", "🦉", "Peak productivity after dark"),
    PersonaProfile(
        Persona.MORNING_ARCHITECT, "Morning Architect", "🌅", "Peak productivity in early hours"
    ),
    PersonaProfile(
        Persona.AFTERNOON_OPTIMIZER, "Afternoon Optimizer", "☀️", "Peak productivity in afternoon"
    ),
)
PROFILE_BY_PERSONA: dict[Persona, PersonaProfile] = {p.persona: p for p in PERSONA_PROFILES}

# Inclusive hour ranges; 18-21 belong to no window.
NIGHT_HOURS: frozenset[int] = frozenset((*range(22, 24), *range(0, 5)))
MORNING_HOURS: frozenset[int] = frozenset(range(5, 12))
AFTERNOON_HOURS: frozenset[int] = frozenset(range(12, 18))


def persona_profile(persona: Persona) -> PersonaProfile:
    """Return display metadata for a persona."""
    return PROFILE_BY_PERSONA[persona]
