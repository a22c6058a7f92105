"""Shared utilities for Language Alchemist."""

from alchemist.core.utils.json import read_json, write_json
from alchemist.core.utils.logging import StructuredJSONFormatter, configure_logging, get_logger

__all__ = [
    "StructuredJSONFormatter",
    "configure_logging",
    "get_logger",
    "read_json",
    "write_json",
]
