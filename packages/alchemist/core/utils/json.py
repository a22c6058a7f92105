"""JSON file helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def write_json(path: str | Path, obj: Any) -> None:
    """Write object to JSON file with pretty formatting.

    Parent directories are created as needed. ``obj`` must already be
    plain JSON data (e.g. ``model_dump(mode="json")`` output).

    Args:
        path: Output file path
        obj: Object to serialize

    Raises:
        TypeError: If ``obj`` holds values JSON cannot represent
    """
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    path_obj.write_text(json.dumps(obj, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug("Wrote %s", path_obj)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse a JSON file holding an object.

    Raises:
        ValueError: If the document is not a JSON object
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data


__all__ = [
    "read_json",
    "write_json",
]
