"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def wrap(value: float, modulus: float = 360.0) -> float:
    """Wrap value into [0, modulus) using true (floored) modulo.

    Guards against the float edge case where ``-1e-17 % 360`` evaluates to
    exactly ``360.0``.

    Example:
        >>> wrap(-30.0)
        330.0
        >>> wrap(725.0)
        5.0
    """
    result = float(value) % modulus
    if result >= modulus:
        return 0.0
    return result


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t
