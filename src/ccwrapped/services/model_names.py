"""Model family lookup and display names."""

from __future__ import annotations

from enum import StrEnum


class ModelFamily(StrEnum):
    """Model families recognised by substring, in match priority order."""

    OPUS = "opus"
    SONNET = "sonnet"


MODEL_DISPLAY_NAMES: dict[ModelFamily, str] = {
    ModelFamily.OPUS: "Claude Opus 4.5",
    ModelFamily.SONNET: "Claude Sonnet 4.5",
}


def model_family(model_id: str) -> ModelFamily | None:
    """Return the first family whose key appears in the model ID."""
    for family in ModelFamily:
        if family.value in model_id:
            return family
    return None


def format_model_name(model_id: str) -> str:
    """Friendly name for a model ID, or the ID itself when unrecognised."""
    family = model_family(model_id)
    if family is None:
        return model_id
    return MODEL_DISPLAY_NAMES[family]
