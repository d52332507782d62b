"""Shared pydantic base classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model that reads and writes the camelCase keys used on disk."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, protected_namespaces=()
    )


class FrozenCamelModel(CamelModel):
    """Immutable camelCase model for computed results."""

    model_config = ConfigDict(frozen=True)
