"""Application configuration."""

from alchemist.core.config.loader import (
    LOG_LEVEL_ENV_VAR,
    WORKSPACE_ENV_VAR,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from alchemist.core.config.models import AppConfig, LoggingConfig, SynthesisSettings

__all__ = [
    # Models
    "AppConfig",
    "LoggingConfig",
    "SynthesisSettings",
    # Loading
    "LOG_LEVEL_ENV_VAR",
    "WORKSPACE_ENV_VAR",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
