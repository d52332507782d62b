"""Pydantic models for ccwrapped."""

from ccwrapped.models.metrics import (
    ActivityMetrics,
    CacheEfficiency,
    CommandCount,
    CommandMetrics,
    Insight,
    LongestSession,
    MetricsResult,
    ModelMetrics,
    ModelShare,
    MostActiveDay,
    PeakHour,
    PersonaInfo,
    ProjectActivity,
    TimeMetrics,
)
from ccwrapped.models.personas import (
    PERSONA_PROFILES,
    Persona,
    PersonaProfile,
    persona_profile,
)
from ccwrapped.models.records import (
    DailyActivity,
    DailyModelTokens,
    HistoryEvent,
    LongestSessionRecord,
    ModelUsage,
    StatsSnapshot,
)

__all__ = [
    "ActivityMetrics",
    "CacheEfficiency",
    "CommandCount",
    "CommandMetrics",
    "DailyActivity",
    "DailyModelTokens",
    "HistoryEvent",
    "Insight",
    "LongestSession",
    "LongestSessionRecord",
    "MetricsResult",
    "ModelMetrics",
    "ModelShare",
    "ModelUsage",
    "MostActiveDay",
    "PeakHour",
    "Persona",
    "PersonaInfo",
    "PersonaProfile",
    "ProjectActivity",
    "StatsSnapshot",
    "TimeMetrics",
    "PERSONA_PROFILES",
    "persona_profile",
]
