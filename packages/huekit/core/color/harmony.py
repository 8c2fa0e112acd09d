"""Color harmony sets derived by fixed hue rotations."""

from __future__ import annotations

from enum import Enum

from huekit.core.color.conversion import to_hsl
from huekit.core.color.manipulation import rotate
from huekit.core.color.models import HSL, Color


class HarmonyKind(str, Enum):
    """Supported harmony relationships."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split_complementary"
    MONOCHROMATIC = "monochromatic"


def _rotations(color: Color, offsets: list[float]) -> list[HSL]:
    return [rotate(color, offset) for offset in offsets]


def complementary(color: Color) -> list[HSL]:
    return _rotations(color, [0.0, 180.0])


def analogous(color: Color, angle: float = 30.0) -> list[HSL]:
    """Base color flanked by its neighbours at ``-angle`` and ``+angle``."""
    return _rotations(color, [-angle, 0.0, angle])


def triadic(color: Color) -> list[HSL]:
    return _rotations(color, [0.0, 120.0, 240.0])


def tetradic(color: Color) -> list[HSL]:
    return _rotations(color, [0.0, 90.0, 180.0, 270.0])


def split_complementary(color: Color, angle: float = 30.0) -> list[HSL]:
    return _rotations(color, [0.0, 180.0 - angle, 180.0 + angle])


def monochromatic(color: Color, steps: int = 5) -> list[HSL]:
    """Same hue and saturation at ``steps`` evenly spaced lightness levels.

    Lightness levels are ``k * 100 / (steps + 1)`` for ``k = 1..steps``, so
    pure black and pure white are never produced.

    Example:
        >>> [round(c.l, 1) for c in monochromatic(HSL(h=200, s=60, l=50), steps=3)]
        [25.0, 50.0, 75.0]
    """
    if steps <= 0:
        return []
    hsl = to_hsl(color)
    spacing = 100.0 / (steps + 1)
    return [HSL(h=hsl.h, s=hsl.s, l=spacing * k) for k in range(1, steps + 1)]


def harmony(color: Color, kind: HarmonyKind, angle: float = 30.0, steps: int = 5) -> list[HSL]:
    """Dispatch to the harmony generator for ``kind``."""
    if kind == HarmonyKind.COMPLEMENTARY:
        return complementary(color)
    if kind == HarmonyKind.ANALOGOUS:
        return analogous(color, angle)
    if kind == HarmonyKind.TRIADIC:
        return triadic(color)
    if kind == HarmonyKind.TETRADIC:
        return tetradic(color)
    if kind == HarmonyKind.SPLIT_COMPLEMENTARY:
        return split_complementary(color, angle)
    if kind == HarmonyKind.MONOCHROMATIC:
        return monochromatic(color, steps)
    raise ValueError(f"Unknown harmony kind: {kind}")


__all__ = [
    "HarmonyKind",
    "analogous",
    "complementary",
    "harmony",
    "monochromatic",
    "split_complementary",
    "tetradic",
    "triadic",
]
