"""Color string parsing for the command line.

The engine itself only takes hex input; the CLI additionally accepts
``rgb(r, g, b)``, ``hsl(h, s%, l%)`` and CSS color names, all normalized to
RGB through the same ``ParseResult`` type the engine uses.
"""

from __future__ import annotations

import re

from huekit.core.color.conversion import hex_to_rgb, hsl_to_rgb
from huekit.core.color.models import HSL, RGB, ParseResult, clean_hex

_RGB_PATTERN = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$",
    re.IGNORECASE,
)
_HSL_PATTERN = re.compile(
    r"^hsl\(\s*(\d{1,3}(?:\.\d+)?)\s*,\s*(\d{1,3}(?:\.\d+)?)%\s*,\s*(\d{1,3}(?:\.\d+)?)%\s*\)$",
    re.IGNORECASE,
)

# Common subset of CSS named colors
NAMED_COLORS: dict[str, str] = {
    # Basic
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "pink": "#ffc0cb",
    "brown": "#a52a2a",
    "gray": "#808080",
    "grey": "#808080",
    # Extended
    "darkred": "#8b0000",
    "darkgreen": "#006400",
    "darkblue": "#00008b",
    "lightblue": "#add8e6",
    "lightgreen": "#90ee90",
    "lightgray": "#d3d3d3",
    "lightgrey": "#d3d3d3",
    "darkgray": "#a9a9a9",
    "darkgrey": "#a9a9a9",
    # Web-safe
    "lime": "#00ff00",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "navy": "#000080",
    "olive": "#808000",
    "teal": "#008080",
    "silver": "#c0c0c0",
    "aqua": "#00ffff",
    "fuchsia": "#ff00ff",
    # Popular
    "crimson": "#dc143c",
    "gold": "#ffd700",
    "indigo": "#4b0082",
    "coral": "#ff7f50",
    "salmon": "#fa8072",
    "violet": "#ee82ee",
    "turquoise": "#40e0d0",
    "khaki": "#f0e68c",
    "plum": "#dda0dd",
    "tan": "#d2b48c",
}


def detect_color_format(text: str) -> str | None:
    """Name the format ``text`` is written in: hex, rgb, hsl or named.

    Only the shape is checked, not value ranges.

    Example:
        >>> detect_color_format("rgb(255, 107, 53)")
        'rgb'
        >>> detect_color_format("not a color") is None
        True
    """
    candidate = text.strip()
    if clean_hex(candidate) is not None:
        return "hex"
    if _RGB_PATTERN.match(candidate):
        return "rgb"
    if _HSL_PATTERN.match(candidate):
        return "hsl"
    if candidate.lower() in NAMED_COLORS:
        return "named"
    return None


def _parse_rgb(text: str) -> ParseResult:
    match = _RGB_PATTERN.match(text)
    if match is None:
        return ParseResult.failure(text, "Expected rgb(r, g, b)")
    channels = [int(v) for v in match.groups()]
    if any(c > 255 for c in channels):
        return ParseResult.failure(text, "RGB values must be between 0 and 255")
    r, g, b = channels
    return ParseResult.success(RGB(r=r, g=g, b=b))


def _parse_hsl(text: str) -> ParseResult:
    match = _HSL_PATTERN.match(text)
    if match is None:
        return ParseResult.failure(text, "Expected hsl(h, s%, l%)")
    h, s, l = (float(v) for v in match.groups())  # noqa: E741
    if s > 100 or l > 100:
        return ParseResult.failure(text, "HSL saturation and lightness must be between 0% and 100%")
    return ParseResult.success(hsl_to_rgb(HSL(h=h, s=s, l=l)))


def parse_color(text: str) -> ParseResult:
    """Parse any supported color notation into RGB.

    Args:
        text: ``#ff6b35``, ``ff6b35``, ``rgb(255, 107, 53)``,
              ``hsl(14, 100%, 60%)`` or a CSS name such as ``coral``.

    Returns:
        ParseResult holding the RGB value or a ParseError.

    Example:
        >>> parse_color("hsl(14, 100%, 60%)").unwrap().as_tuple()
        (255, 99, 51)
        >>> parse_color("blurple").ok
        False
    """
    candidate = text.strip()
    fmt = detect_color_format(candidate)

    if fmt == "hex":
        return hex_to_rgb(candidate)
    if fmt == "rgb":
        return _parse_rgb(candidate)
    if fmt == "hsl":
        return _parse_hsl(candidate)
    if fmt == "named":
        return hex_to_rgb(NAMED_COLORS[candidate.lower()])

    if candidate.lower().startswith("rgb"):
        return ParseResult.failure(text, "Expected rgb(r, g, b)")
    if candidate.lower().startswith("hsl"):
        return ParseResult.failure(text, "Expected hsl(h, s%, l%)")
    return ParseResult.failure(text, "Unrecognized color (use #rrggbb, rgb(), hsl() or a CSS name)")
