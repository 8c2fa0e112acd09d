"""Conversions between color representations.

RGB is the pivot: every ``to_*`` function converts its input to RGB first
(unless it is already in the target space) and then to the target. HSL and
HSV use the standard max/min/delta algorithm; LAB goes through CIE XYZ with
the D65 reference white.
"""

from __future__ import annotations

import logging

import numpy as np

from huekit.core.color.models import HSL, HSV, LAB, RGB, Color, Hex, ParseResult, clean_hex

logger = logging.getLogger(__name__)

# sRGB (linear) -> XYZ, D65
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)

# XYZ -> sRGB (linear), D65
_XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)

_D65_WHITE = np.array([0.95047, 1.0, 1.08883])
_LAB_EPSILON = 0.008856
_LAB_KAPPA = 903.3


# ============================================================================
# Hex
# ============================================================================


def hex_to_rgb(value: str) -> ParseResult:
    """Parse a hex string into RGB.

    Never raises and never substitutes a default color: malformed input
    yields a failed ``ParseResult`` carrying a ``ParseError``.

    Args:
        value: ``#rrggbb`` or ``rrggbb`` (case-insensitive).

    Returns:
        ParseResult with the RGB value, or with a ParseError.

    Example:
        >>> hex_to_rgb("#3b82f6").unwrap().as_tuple()
        (59, 130, 246)
        >>> hex_to_rgb("zzzzzz").error.message
        'Expected 6 hex digits'
    """
    cleaned = clean_hex(value)
    if cleaned is None:
        logger.debug("Rejected hex color input %r", value)
        return ParseResult.failure(value, "Expected 6 hex digits")
    return ParseResult.success(
        RGB(
            r=int(cleaned[0:2], 16),
            g=int(cleaned[2:4], 16),
            b=int(cleaned[4:6], 16),
        )
    )


def rgb_to_hex(rgb: RGB) -> Hex:
    return Hex(value=f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}")


def normalize_hex(value: str) -> str:
    """Return the canonical lowercase ``#rrggbb`` form.

    Raises:
        ValueError: If value is not a valid hex color.
    """
    cleaned = clean_hex(value)
    if cleaned is None:
        raise ValueError(f"Invalid hex color: '{value}'")
    return f"#{cleaned}"


# ============================================================================
# HSL / HSV
# ============================================================================


def _hue_from_rgb(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue in degrees from normalized channels (delta must be non-zero)."""
    if max_c == r:
        sector = ((g - b) / delta) % 6
    elif max_c == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4
    return sector * 60.0


def _chroma_to_rgb(h: float, c: float, x: float, m: float) -> RGB:
    """Place chroma components into the RGB sector selected by hue."""
    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return RGB(r=(r + m) * 255, g=(g + m) * 255, b=(b + m) * 255)


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL.

    Example:
        >>> rgb_to_hsl(RGB(r=255, g=0, b=0))
        HSL(kind='hsl', h=0.0, s=100.0, l=50.0)
    """
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    if delta == 0:
        return HSL(h=0.0, s=0.0, l=lightness * 100)

    saturation = delta / (1 - abs(2 * lightness - 1))
    hue = _hue_from_rgb(r, g, b, max_c, delta)
    return HSL(h=hue, s=saturation * 100, l=lightness * 100)


def hsl_to_rgb(hsl: HSL) -> RGB:
    s = hsl.s / 100
    lightness = hsl.l / 100
    c = (1 - abs(2 * lightness - 1)) * s
    x = c * (1 - abs((hsl.h / 60) % 2 - 1))
    m = lightness - c / 2
    return _chroma_to_rgb(hsl.h, c, x, m)


def rgb_to_hsv(rgb: RGB) -> HSV:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return HSV(h=0.0, s=0.0, v=max_c * 100)

    saturation = delta / max_c
    hue = _hue_from_rgb(r, g, b, max_c, delta)
    return HSV(h=hue, s=saturation * 100, v=max_c * 100)


def hsv_to_rgb(hsv: HSV) -> RGB:
    s = hsv.s / 100
    v = hsv.v / 100
    c = v * s
    x = c * (1 - abs((hsv.h / 60) % 2 - 1))
    m = v - c
    return _chroma_to_rgb(hsv.h, c, x, m)


# ============================================================================
# CIE LAB
# ============================================================================


def rgb_to_lab(rgb: RGB) -> LAB:
    """Convert sRGB to CIE L*a*b* (D65).

    Example:
        >>> lab = rgb_to_lab(RGB(r=255, g=255, b=255))
        >>> round(lab.l)
        100
    """
    rgb_norm = np.array([rgb.r, rgb.g, rgb.b], dtype=np.float64) / 255.0

    # sRGB companding
    rgb_linear = np.where(rgb_norm > 0.04045, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    xyz = (_RGB_TO_XYZ @ rgb_linear) / _D65_WHITE

    f = np.where(xyz > _LAB_EPSILON, np.cbrt(xyz), (_LAB_KAPPA * xyz + 16) / 116)
    fx, fy, fz = f

    return LAB(l=116 * fy - 16, a=500 * (fx - fy), b=200 * (fy - fz))


def lab_to_rgb(lab: LAB) -> RGB:
    """Convert CIE L*a*b* (D65) to sRGB, clipping out-of-gamut values."""
    fy = (lab.l + 16) / 116
    fx = lab.a / 500 + fy
    fz = fy - lab.b / 200

    x = fx**3 if fx**3 > _LAB_EPSILON else (116 * fx - 16) / _LAB_KAPPA
    y = ((lab.l + 16) / 116) ** 3 if lab.l > _LAB_KAPPA * _LAB_EPSILON else lab.l / _LAB_KAPPA
    z = fz**3 if fz**3 > _LAB_EPSILON else (116 * fz - 16) / _LAB_KAPPA

    xyz = np.array([x, y, z]) * _D65_WHITE
    rgb_linear = _XYZ_TO_RGB @ xyz

    rgb = np.where(
        rgb_linear > 0.0031308,
        1.055 * np.power(np.clip(rgb_linear, 0, None), 1 / 2.4) - 0.055,
        12.92 * rgb_linear,
    )
    r, g, b = np.clip(rgb * 255, 0, 255)
    return RGB(r=float(r), g=float(g), b=float(b))


# ============================================================================
# Dispatch
# ============================================================================


def to_rgb(color: Color) -> RGB:
    """Convert any color representation to RGB."""
    if isinstance(color, RGB):
        return color
    if isinstance(color, HSL):
        return hsl_to_rgb(color)
    if isinstance(color, HSV):
        return hsv_to_rgb(color)
    if isinstance(color, Hex):
        # Hex is validated on construction, so this parse cannot fail
        return hex_to_rgb(color.value).unwrap()
    if isinstance(color, LAB):
        return lab_to_rgb(color)
    raise TypeError(f"Unsupported color representation: {type(color).__name__}")


def to_hsl(color: Color) -> HSL:
    if isinstance(color, HSL):
        return color
    return rgb_to_hsl(to_rgb(color))


def to_hsv(color: Color) -> HSV:
    if isinstance(color, HSV):
        return color
    return rgb_to_hsv(to_rgb(color))


def to_hex(color: Color) -> str:
    """Convert any color representation to a ``#rrggbb`` string.

    Example:
        >>> to_hex(Hex(value="3B82F6"))
        '#3b82f6'
    """
    if isinstance(color, Hex):
        return color.value
    return rgb_to_hex(to_rgb(color)).value


def to_lab(color: Color) -> LAB:
    if isinstance(color, LAB):
        return color
    return rgb_to_lab(to_rgb(color))


__all__ = [
    "hex_to_rgb",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "lab_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_lab",
    "to_hex",
    "to_hsl",
    "to_hsv",
    "to_lab",
    "to_rgb",
]
