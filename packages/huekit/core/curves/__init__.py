"""Easing curves used to shape palette scales."""

from huekit.core.curves.easing import (
    ease_power,
    ease_quadratic,
    hue_drift,
    lightness_curve,
    sample_positions,
    saturation_multiplier,
)

__all__ = [
    "ease_power",
    "ease_quadratic",
    "hue_drift",
    "lightness_curve",
    "sample_positions",
    "saturation_multiplier",
]
