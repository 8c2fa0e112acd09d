"""Color models, conversions, manipulation, analysis and harmony."""

from huekit.core.color.analysis import (
    best_text_color,
    contrast_ratio,
    is_dark,
    is_light,
    meets_aa,
    meets_aaa,
    perceived_brightness,
    relative_luminance,
    wcag_rating,
)
from huekit.core.color.conversion import (
    hex_to_rgb,
    normalize_hex,
    to_hex,
    to_hsl,
    to_hsv,
    to_lab,
    to_rgb,
)
from huekit.core.color.harmony import HarmonyKind, harmony
from huekit.core.color.manipulation import (
    complement,
    darken,
    desaturate,
    grayscale,
    invert,
    lighten,
    mix,
    rotate,
    saturate,
)
from huekit.core.color.models import (
    BLACK,
    HSL,
    HSV,
    LAB,
    RGB,
    WHITE,
    Color,
    ColorParseError,
    Hex,
    ParseError,
    ParseResult,
)

__all__ = [
    # Models
    "BLACK",
    "HSL",
    "HSV",
    "LAB",
    "RGB",
    "WHITE",
    "Color",
    "ColorParseError",
    "Hex",
    "ParseError",
    "ParseResult",
    # Conversion
    "hex_to_rgb",
    "normalize_hex",
    "to_hex",
    "to_hsl",
    "to_hsv",
    "to_lab",
    "to_rgb",
    # Manipulation
    "complement",
    "darken",
    "desaturate",
    "grayscale",
    "invert",
    "lighten",
    "mix",
    "rotate",
    "saturate",
    # Analysis
    "best_text_color",
    "contrast_ratio",
    "is_dark",
    "is_light",
    "meets_aa",
    "meets_aaa",
    "perceived_brightness",
    "relative_luminance",
    "wcag_rating",
    # Harmony
    "HarmonyKind",
    "harmony",
]
