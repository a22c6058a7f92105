"""Configuration models for Language Alchemist."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from alchemist.core.synthesis import DEFAULT_MAX_EXPANSION_DEPTH


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stdout when unset")


class SynthesisSettings(BaseModel):
    """Word generation settings."""

    model_config = ConfigDict(extra="forbid")

    sample_count: int = Field(default=24, gt=0, description="Words per sample batch")
    max_expansion_depth: int = Field(
        default=DEFAULT_MAX_EXPANSION_DEPTH,
        gt=0,
        description="Variable nesting beyond which expansion emits nothing",
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    workspace_path: str = "alchemist_workspace.json"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    synthesis: SynthesisSettings = Field(default_factory=SynthesisSettings)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("alchemist.yaml")


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "SynthesisSettings",
]
