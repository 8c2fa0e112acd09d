"""Explicit memo cache for generated palettes.

Generation is deterministic, so a palette can be reused for any config with
the same structure. The cache is owned by whoever creates it (typically a
``PaletteGenerator``); there is no module-level instance. Clearing it never
changes results, only how often they are recomputed.
"""

from __future__ import annotations

import logging

from huekit.core.palette.models import Palette, PaletteConfig

logger = logging.getLogger(__name__)


def config_key(config: PaletteConfig) -> str:
    """Stable key for a config: its canonical JSON form.

    Two configs that compare equal field-by-field produce the same key.
    """
    return config.model_dump_json()


class PaletteCache:
    """In-memory palette cache keyed by config structure.

    Example:
        >>> cache = PaletteCache()
        >>> cache.get(config) is None
        True
        >>> cache.store(config, palette)
        >>> cache.get(config) is palette
        True
        >>> cache.clear()
        >>> len(cache)
        0
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self._entries: dict[str, Palette] = {}
        self._max_entries = max_entries
        self.hits = 0
        self.misses = 0

    def get(self, config: PaletteConfig) -> Palette | None:
        """Return the cached palette for ``config``, or None on a miss."""
        palette = self._entries.get(config_key(config))
        if palette is None:
            self.misses += 1
            return None
        self.hits += 1
        logger.debug("Palette cache hit for '%s'", config.name)
        return palette

    def store(self, config: PaletteConfig, palette: Palette) -> None:
        key = config_key(config)
        if (
            self._max_entries is not None
            and key not in self._entries
            and len(self._entries) >= self._max_entries
        ):
            # Evict the oldest entry (dicts keep insertion order)
            oldest = next(iter(self._entries))
            del self._entries[oldest]
        self._entries[key] = palette

    def invalidate(self, config: PaletteConfig) -> None:
        self._entries.pop(config_key(config), None)

    def clear(self) -> None:
        """Drop all entries and reset the hit/miss counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, config: object) -> bool:
        return isinstance(config, PaletteConfig) and config_key(config) in self._entries


__all__ = [
    "PaletteCache",
    "config_key",
]
