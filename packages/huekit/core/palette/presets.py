"""Preset palette configurations.

| preset    | mode          | steps | accessibility | semantics |
|-----------|---------------|-------|---------------|-----------|
| corporate | monochromatic | 11    | on            | on        |
| vibrant   | complementary | 11    | on            | on        |
| balanced  | analogous     | 11    | on            | on        |
| minimal   | monochromatic | 5     | on            | off       |
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from huekit.core.color.models import Color
from huekit.core.palette.models import GenerationMode, Palette, PaletteConfig


class PresetName(str, Enum):
    CORPORATE = "corporate"
    VIBRANT = "vibrant"
    BALANCED = "balanced"
    MINIMAL = "minimal"


PRESET_CONFIGS: dict[PresetName, dict[str, Any]] = {
    PresetName.CORPORATE: {
        "mode": GenerationMode.MONOCHROMATIC,
        "steps": 11,
        "preserve_accessibility": True,
        "generate_semantic_colors": True,
    },
    PresetName.VIBRANT: {
        "mode": GenerationMode.COMPLEMENTARY,
        "steps": 11,
        "preserve_accessibility": True,
        "generate_semantic_colors": True,
    },
    PresetName.BALANCED: {
        "mode": GenerationMode.ANALOGOUS,
        "steps": 11,
        "preserve_accessibility": True,
        "generate_semantic_colors": True,
    },
    PresetName.MINIMAL: {
        "mode": GenerationMode.MONOCHROMATIC,
        "steps": 5,
        "preserve_accessibility": True,
        "generate_semantic_colors": False,
    },
}


def preset_config(
    name: PresetName | str,
    base_color: Color,
    palette_name: str | None = None,
) -> PaletteConfig:
    """Build the PaletteConfig for a preset.

    Raises:
        ValueError: If ``name`` is not a known preset.
    """
    preset = PresetName(name)
    return PaletteConfig(
        base_color=base_color,
        name=palette_name or preset.value,
        **PRESET_CONFIGS[preset],
    )


def apply_preset(name: PresetName | str, base_color: Color) -> Palette:
    # Imported here: generator imports this module for PaletteGenerator.preset
    from huekit.core.palette.generator import generate_palette

    return generate_palette(preset_config(name, base_color))


def corporate(base_color: Color) -> Palette:
    return apply_preset(PresetName.CORPORATE, base_color)


def vibrant(base_color: Color) -> Palette:
    return apply_preset(PresetName.VIBRANT, base_color)


def balanced(base_color: Color) -> Palette:
    return apply_preset(PresetName.BALANCED, base_color)


def minimal(base_color: Color) -> Palette:
    return apply_preset(PresetName.MINIMAL, base_color)


__all__ = [
    "PRESET_CONFIGS",
    "PresetName",
    "apply_preset",
    "balanced",
    "corporate",
    "minimal",
    "preset_config",
    "vibrant",
]
