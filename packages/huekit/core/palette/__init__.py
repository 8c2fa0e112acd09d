"""Palette generation: scales, semantic colors, presets and exporters."""

from huekit.core.palette.cache import PaletteCache
from huekit.core.palette.export import (
    to_css_variables,
    to_json,
    to_json_dict,
    to_tailwind_config,
)
from huekit.core.palette.generator import PaletteGenerator, generate_palette
from huekit.core.palette.models import (
    GenerationMode,
    Palette,
    PaletteConfig,
    ScaleEntry,
    SemanticColors,
    SemanticRole,
)
from huekit.core.palette.presets import (
    PresetName,
    apply_preset,
    balanced,
    corporate,
    minimal,
    preset_config,
    vibrant,
)
from huekit.core.palette.semantic import derive_semantic_colors

__all__ = [
    # Models
    "GenerationMode",
    "Palette",
    "PaletteConfig",
    "ScaleEntry",
    "SemanticColors",
    "SemanticRole",
    # Generation
    "PaletteCache",
    "PaletteGenerator",
    "derive_semantic_colors",
    "generate_palette",
    # Presets
    "PresetName",
    "apply_preset",
    "balanced",
    "corporate",
    "minimal",
    "preset_config",
    "vibrant",
    # Export
    "to_css_variables",
    "to_json",
    "to_json_dict",
    "to_tailwind_config",
]
