"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from alchemist.core.config.models import AppConfig, LoggingConfig
from alchemist.core.utils.json import read_json
from alchemist.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

WORKSPACE_ENV_VAR = "ALCHEMIST_WORKSPACE"
LOG_LEVEL_ENV_VAR = "ALCHEMIST_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("alchemist.json")
        'json'
        >>> detect_format("alchemist.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Invalid YAML in {path}: expected a mapping")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files fall back to defaults. Environment variables
    ``ALCHEMIST_WORKSPACE`` and ``ALCHEMIST_LOG_LEVEL`` override the
    corresponding file values.

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
        logger.debug("Loaded app config from %s", path)
    else:
        config = AppConfig()

    return _apply_env_overrides(config)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config (loads the default if None)."""
    if config is None:
        config = load_app_config()
    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    workspace = os.getenv(WORKSPACE_ENV_VAR)
    level = os.getenv(LOG_LEVEL_ENV_VAR)

    if workspace:
        logger.debug("Loaded %s from environment", WORKSPACE_ENV_VAR)
        config = config.model_copy(update={"workspace_path": workspace})
    if level:
        logger.debug("Loaded %s from environment", LOG_LEVEL_ENV_VAR)
        logging_config = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": level.upper()}
        )
        config = config.model_copy(update={"logging": logging_config})
    return config


__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "WORKSPACE_ENV_VAR",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
