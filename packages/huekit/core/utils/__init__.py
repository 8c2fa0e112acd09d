"""Shared utilities for huekit."""

from huekit.core.utils.json import read_json, write_json
from huekit.core.utils.math import clamp, lerp, wrap

__all__ = [
    "clamp",
    "lerp",
    "read_json",
    "wrap",
    "write_json",
]
