"""Palette export formatters.

Turns a finished Palette into the formats front-end tooling consumes:

1. Tailwind config fragment (``theme.extend.colors``)
2. CSS custom properties block
3. Flat JSON projection (weight, hex, contrast, accessibility per entry)

Example Tailwind output::

    module.exports = {
      theme: {
        extend: {
          colors: {
            'brand': {
              50: '#eff5fe',
              ...
            },
            success: '#2a9e4c',
          },
        },
      },
    }
"""

from __future__ import annotations

import re
from typing import Any

from huekit.core.color.conversion import to_hex
from huekit.core.palette.models import Palette
from huekit.core.utils.json import dumps_json

_TOKEN_INVALID = re.compile(r"[^a-z0-9]+")

# Decimal places kept for contrast ratios in JSON output
_CONTRAST_DECIMALS = 2


def token_name(name: str) -> str:
    """Slugify a palette name for use as a CSS/Tailwind token prefix.

    Example:
        >>> token_name("Brand Blue!")
        'brand-blue'
    """
    slug = _TOKEN_INVALID.sub("-", name.lower()).strip("-")
    return slug or "palette"


def to_tailwind_config(palette: Palette) -> str:
    """Render a Tailwind ``module.exports`` config with the palette colors."""
    name = token_name(palette.name)
    lines = [
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
        f"        '{name}': {{",
    ]
    for entry in palette.scale:
        lines.append(f"          {entry.weight}: '{entry.hex}',")
    lines.append("        },")

    if palette.semantic_colors is not None:
        for role, color in palette.semantic_colors.items():
            lines.append(f"        {role.value}: '{to_hex(color)}',")

    lines.extend(
        [
            "      },",
            "    },",
            "  },",
            "}",
        ]
    )
    return "\n".join(lines) + "\n"


def to_css_variables(palette: Palette, selector: str = ":root") -> str:
    """Render the palette as CSS custom properties under ``selector``."""
    name = token_name(palette.name)
    lines = [f"{selector} {{"]
    for entry in palette.scale:
        lines.append(f"  --{name}-{entry.weight}: {entry.hex};")

    if palette.semantic_colors is not None:
        for role, color in palette.semantic_colors.items():
            lines.append(f"  --{name}-{role.value}: {to_hex(color)};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def to_json_dict(palette: Palette) -> dict[str, Any]:
    """Flat, JSON-ready projection of the palette."""
    scale = [
        {
            "weight": entry.weight,
            "hex": entry.hex,
            "contrast": {
                "white": round(entry.contrast_with_white, _CONTRAST_DECIMALS),
                "black": round(entry.contrast_with_black, _CONTRAST_DECIMALS),
            },
            "accessibility": {
                "aa_on_white": entry.meets_aa_on_white,
                "aa_on_black": entry.meets_aa_on_black,
            },
        }
        for entry in palette.scale
    ]

    semantic = None
    if palette.semantic_colors is not None:
        semantic = {role.value: to_hex(color) for role, color in palette.semantic_colors.items()}

    harmony: dict[str, Any] = {}
    if palette.complementary is not None:
        harmony["complementary"] = to_hex(palette.complementary)
    if palette.analogous is not None:
        harmony["analogous"] = [to_hex(c) for c in palette.analogous]
    if palette.triadic is not None:
        harmony["triadic"] = [to_hex(c) for c in palette.triadic]

    return {
        "name": palette.name,
        "base": to_hex(palette.base_color),
        "mode": palette.mode.value,
        "scale": scale,
        "semantic": semantic,
        "harmony": harmony,
    }


def to_json(palette: Palette) -> str:
    return dumps_json(to_json_dict(palette))


__all__ = [
    "to_css_variables",
    "to_json",
    "to_json_dict",
    "to_tailwind_config",
    "token_name",
]
