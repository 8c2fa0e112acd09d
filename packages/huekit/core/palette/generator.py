"""Palette assembly.

``generate_palette`` runs the full pipeline for one config:

1. generate scale colors for the config's mode
2. tag each color with its weight and contrast data
3. repair entries below AA (when ``preserve_accessibility``)
4. derive semantic colors (when ``generate_semantic_colors``)
5. derive harmony colors implied by the mode

Nothing is retried, and a config with ``steps <= 0`` is treated leniently:
it yields an empty scale and a logged warning rather than an error.
"""

from __future__ import annotations

import logging

from huekit.core.color.harmony import analogous, triadic
from huekit.core.color.manipulation import complement
from huekit.core.color.models import Color
from huekit.core.palette.cache import PaletteCache
from huekit.core.palette.models import GenerationMode, Palette, PaletteConfig
from huekit.core.palette.presets import PresetName, preset_config
from huekit.core.palette.scale import (
    build_scale_entries,
    generate_scale,
    generate_weights,
    repair_scale,
)
from huekit.core.palette.semantic import derive_semantic_colors
from huekit.core.utils.logging import get_logger, log_performance

logger = logging.getLogger(__name__)


def _harmony_fields(base: Color, mode: GenerationMode) -> dict[str, object]:
    """Harmony colors stored on the palette for ``mode``."""
    if mode == GenerationMode.COMPLEMENTARY:
        return {"complementary": complement(base)}
    if mode == GenerationMode.ANALOGOUS:
        left, _, right = analogous(base)
        return {"analogous": (left, right)}
    if mode == GenerationMode.TRIADIC:
        _, second, third = triadic(base)
        return {"triadic": (second, third)}
    return {}


@log_performance
def generate_palette(config: PaletteConfig) -> Palette:
    """Generate a complete palette from ``config``.

    Args:
        config: Generation parameters.

    Returns:
        Immutable Palette with scale ordered by ascending weight.

    Example:
        >>> from huekit.core.color import Hex
        >>> palette = generate_palette(PaletteConfig(base_color=Hex(value="#3b82f6")))
        >>> palette.weights
        [50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950]
    """
    log = get_logger(__name__, palette=config.name, mode=config.mode.value)

    if config.steps <= 0:
        log.warning(
            "Palette '%s' requested %d steps; returning empty scale",
            config.name,
            config.steps,
        )

    weights = generate_weights(config.steps)
    colors = generate_scale(config.base_color, config.mode, config.steps)
    entries = build_scale_entries(colors, weights)
    log.debug("Generated %d scale entries", len(entries))

    if config.preserve_accessibility:
        entries = repair_scale(entries, max_passes=config.max_repair_passes)

    semantic_colors = None
    if config.generate_semantic_colors:
        semantic_colors = derive_semantic_colors(config.base_color)

    return Palette(
        name=config.name,
        base_color=config.base_color,
        mode=config.mode,
        scale=tuple(sorted(entries, key=lambda e: e.weight)),
        semantic_colors=semantic_colors,
        **_harmony_fields(config.base_color, config.mode),
    )


class PaletteGenerator:
    """Palette generation service with an optional, caller-owned cache.

    Example:
        >>> generator = PaletteGenerator(cache=PaletteCache())
        >>> palette = generator.preset("minimal", Hex(value="#3b82f6"))
        >>> len(palette.scale)
        5
        >>> generator.clear_cache()
    """

    def __init__(self, cache: PaletteCache | None = None) -> None:
        self.cache = cache

    def generate(self, config: PaletteConfig) -> Palette:
        if self.cache is None:
            return generate_palette(config)

        cached = self.cache.get(config)
        if cached is not None:
            return cached

        palette = generate_palette(config)
        self.cache.store(config, palette)
        return palette

    def preset(
        self,
        name: PresetName | str,
        base_color: Color,
        palette_name: str | None = None,
    ) -> Palette:
        return self.generate(preset_config(name, base_color, palette_name))

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()
            logger.debug("Palette cache cleared")


__all__ = [
    "PaletteGenerator",
    "generate_palette",
]
