"""WCAG contrast and brightness analysis."""

from __future__ import annotations

import math
from typing import Literal

from huekit.core.color.conversion import to_rgb
from huekit.core.color.models import BLACK, WHITE, Color

# WCAG 2.x thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

WcagRating = Literal["AAA", "AA", "AA Large", "Fail"]


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """WCAG relative luminance in [0, 1].

    Example:
        >>> round(relative_luminance(WHITE), 6)
        1.0
    """
    rgb = to_rgb(color)
    return (
        0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)
    )


def contrast_ratio(color1: Color, color2: Color) -> float:
    """WCAG contrast ratio between two colors, in [1, 21].

    Symmetric in its arguments.

    Example:
        >>> round(contrast_ratio(BLACK, WHITE), 2)
        21.0
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def meets_aa(foreground: Color, background: Color, large_text: bool = False) -> bool:
    threshold = AA_LARGE if large_text else AA_NORMAL
    return contrast_ratio(foreground, background) >= threshold


def meets_aaa(foreground: Color, background: Color, large_text: bool = False) -> bool:
    threshold = AAA_LARGE if large_text else AAA_NORMAL
    return contrast_ratio(foreground, background) >= threshold


def wcag_rating(foreground: Color, background: Color) -> WcagRating:
    """Best WCAG level met for normal text ("AA Large" means large text only)."""
    ratio = contrast_ratio(foreground, background)
    if ratio >= AAA_NORMAL:
        return "AAA"
    if ratio >= AA_NORMAL:
        return "AA"
    if ratio >= AA_LARGE:
        return "AA Large"
    return "Fail"


def is_light(color: Color) -> bool:
    return relative_luminance(color) > 0.5


def is_dark(color: Color) -> bool:
    return not is_light(color)


def perceived_brightness(color: Color) -> float:
    """HSP perceived brightness in [0, 255].

    Not the same measure as relative luminance: channels are weighted
    0.299/0.587/0.114 on squared gamma-encoded values, then square-rooted.
    """
    rgb = to_rgb(color)
    return math.sqrt(0.299 * rgb.r**2 + 0.587 * rgb.g**2 + 0.114 * rgb.b**2)


def best_text_color(background: Color) -> Color:
    """Pick black or white text, whichever contrasts more with ``background``."""
    if contrast_ratio(BLACK, background) >= contrast_ratio(WHITE, background):
        return BLACK
    return WHITE


__all__ = [
    "AAA_LARGE",
    "AAA_NORMAL",
    "AA_LARGE",
    "AA_NORMAL",
    "WcagRating",
    "best_text_color",
    "contrast_ratio",
    "is_dark",
    "is_light",
    "meets_aa",
    "meets_aaa",
    "perceived_brightness",
    "relative_luminance",
    "wcag_rating",
]
