"""JSON helpers shared by the exporters and the config loader."""

from __future__ import annotations

from enum import Enum
import json
import logging
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _to_jsonable(obj: Any) -> Any:
    """``default`` hook for ``json.dumps``.

    Pydantic models are dumped in JSON mode, enums by value, numpy values as
    Python scalars/lists and paths as strings. Anything else is an error so
    unexpected objects never end up silently stringified in a palette file.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps_json(obj: Any) -> str:
    """Serialize ``obj`` as indented UTF-8 JSON (no trailing newline)."""
    return json.dumps(obj, indent=2, ensure_ascii=False, default=_to_jsonable)


def write_json(path: str | Path, obj: Any) -> Path:
    """Write ``obj`` to ``path``, creating parent directories.

    Returns:
        The path written.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dumps_json(obj) + "\n", encoding="utf-8")
    logger.debug("Wrote JSON to %s", out)
    return out


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON file whose top level must be an object.

    Raises:
        ValueError: If the content is not valid JSON or not an object.
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data


__all__ = [
    "dumps_json",
    "read_json",
    "write_json",
]
