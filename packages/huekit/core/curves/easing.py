"""Easing curves for lightness, hue drift and saturation falloff.

All curves are evaluated over normalized positions ``t`` in [0, 1], where
``t = 0`` is the lightest step of a scale and ``t = 1`` the darkest.
"""

from __future__ import annotations

import numpy as np

# Lightness of the lightest generated step
LIGHTEST = 95.0

# Exponent of the dark-half power ease
DARK_EXPONENT = 1.5


def sample_positions(n: int) -> np.ndarray:
    """Generate N positions ``t = i / (n - 1)`` spanning [0, 1].

    Args:
        n: Number of positions. A single position is ``[0.0]``; n <= 0
           yields an empty array.

    Returns:
        Array of N evenly-spaced float values in [0, 1].

    Example:
        >>> sample_positions(5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n <= 0:
        return np.zeros(0)
    if n == 1:
        return np.zeros(1)
    return np.linspace(0.0, 1.0, n)


def ease_quadratic(t: np.ndarray) -> np.ndarray:
    return np.square(t)


def ease_power(t: np.ndarray, exponent: float = DARK_EXPONENT) -> np.ndarray:
    return np.power(t, exponent)


def lightness_curve(n: int, base_lightness: float) -> list[float]:
    """Lightness for each of N scale steps.

    The light half (``t < 0.5``) eases quadratically from 95 down to the base
    lightness; the dark half eases with a 1.5 power from the base lightness
    down to 0. Variation is spread at the light end and compressed at the
    dark end. Strictly decreasing whenever ``0 < base_lightness < 95``.

    Args:
        n: Number of steps.
        base_lightness: HSL lightness of the base color (0-100).

    Returns:
        List of N lightness values, lightest first.

    Example:
        >>> [round(v, 1) for v in lightness_curve(3, 50.0)]
        [95.0, 50.0, 0.0]
    """
    t = sample_positions(n)
    light_t = np.clip(2.0 * t, 0.0, 1.0)
    dark_t = np.clip(2.0 * (t - 0.5), 0.0, 1.0)

    light = LIGHTEST - (LIGHTEST - base_lightness) * ease_quadratic(light_t)
    dark = base_lightness - base_lightness * ease_power(dark_t, DARK_EXPONENT)

    return [float(v) for v in np.where(t < 0.5, light, dark)]


def hue_drift(t: np.ndarray, max_shift: float = 5.0) -> np.ndarray:
    """Hue offset in degrees, linear in distance from the midpoint.

    Light steps drift warm (down to ``-max_shift`` at t=0), dark steps drift
    cool (up to ``+max_shift`` at t=1); the midpoint is untouched.
    """
    return max_shift * (np.asarray(t, dtype=np.float64) - 0.5) / 0.5


def saturation_multiplier(t: np.ndarray) -> np.ndarray:
    """Saturation scale factor that mutes both extremes of a scale.

    Below t=0.2 the factor rises linearly from 0.3 to 1.0; above t=0.8 it
    falls linearly from 1.0 to 0; in between it is exactly 1.0.
    """
    t = np.asarray(t, dtype=np.float64)
    rising = 0.3 + 0.7 * (t / 0.2)
    falling = 1.0 - (t - 0.8) / 0.2
    return np.where(t < 0.2, rising, np.where(t > 0.8, falling, 1.0))
