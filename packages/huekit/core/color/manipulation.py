"""Pure color transformations.

Lightness, saturation and hue operations work in HSL and return ``HSL``;
``mix`` and ``invert`` work per RGB channel and return ``RGB``. Inputs are
never modified (all color models are frozen).
"""

from __future__ import annotations

from huekit.core.color.conversion import to_hsl, to_rgb
from huekit.core.color.models import HSL, RGB, Color
from huekit.core.utils.math import clamp, lerp


def lighten(color: Color, amount: float) -> HSL:
    """Add ``amount`` percentage points of lightness (clamped to [0, 100])."""
    hsl = to_hsl(color)
    return HSL(h=hsl.h, s=hsl.s, l=clamp(hsl.l + amount, 0.0, 100.0))


def darken(color: Color, amount: float) -> HSL:
    """Subtract ``amount`` percentage points of lightness (clamped to [0, 100])."""
    return lighten(color, -amount)


def set_lightness(color: Color, lightness: float) -> HSL:
    hsl = to_hsl(color)
    return HSL(h=hsl.h, s=hsl.s, l=lightness)


def saturate(color: Color, amount: float) -> HSL:
    hsl = to_hsl(color)
    return HSL(h=hsl.h, s=hsl.s + amount, l=hsl.l)


def desaturate(color: Color, amount: float) -> HSL:
    return saturate(color, -amount)


def rotate(color: Color, degrees: float) -> HSL:
    """Rotate hue by ``degrees`` (negative rotates counter-clockwise).

    Example:
        >>> rotate(HSL(h=350, s=50, l=50), 20).h
        10.0
    """
    hsl = to_hsl(color)
    return HSL(h=hsl.h + degrees, s=hsl.s, l=hsl.l)


def complement(color: Color) -> HSL:
    return rotate(color, 180.0)


def mix(color1: Color, color2: Color, ratio: float = 0.5) -> RGB:
    """Linearly interpolate each RGB channel from ``color1`` toward ``color2``.

    Args:
        color1: Start color (ratio 0).
        color2: End color (ratio 1).
        ratio: Blend factor, silently clamped into [0, 1].

    Returns:
        Mixed RGB color.
    """
    t = clamp(ratio, 0.0, 1.0)
    a = to_rgb(color1)
    b = to_rgb(color2)
    return RGB(r=lerp(a.r, b.r, t), g=lerp(a.g, b.g, t), b=lerp(a.b, b.b, t))


def invert(color: Color) -> RGB:
    rgb = to_rgb(color)
    return RGB(r=255 - rgb.r, g=255 - rgb.g, b=255 - rgb.b)


def grayscale(color: Color) -> HSL:
    hsl = to_hsl(color)
    return HSL(h=hsl.h, s=0.0, l=hsl.l)


__all__ = [
    "complement",
    "darken",
    "desaturate",
    "grayscale",
    "invert",
    "lighten",
    "mix",
    "rotate",
    "saturate",
    "set_lightness",
]
