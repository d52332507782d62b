"""Configuration for ccwrapped."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    claude_dir: Path = field(default_factory=lambda: Path.home() / ".claude")

    @property
    def stats_cache_path(self) -> Path:
        return self.claude_dir / "stats-cache.json"

    @property
    def history_path(self) -> Path:
        return self.claude_dir / "history.jsonl"
