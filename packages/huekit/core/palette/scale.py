"""Scale generation: weights, lightness ramps and accessibility repair.

A scale is an ordered run of colors from light (weight 50) to dark (weight
950). The generators here only produce colors; ``build_scale_entries`` tags
them with weights and contrast data, and ``repair_scale`` nudges entries that
miss the WCAG AA threshold against their expected text background.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

import numpy as np

from huekit.core.color.conversion import to_hsl
from huekit.core.color.manipulation import complement, darken, lighten, mix
from huekit.core.color.models import HSL, Color
from huekit.core.curves.easing import (
    hue_drift,
    lightness_curve,
    sample_positions,
    saturation_multiplier,
)
from huekit.core.palette.models import GenerationMode, ScaleEntry

logger = logging.getLogger(__name__)

CANONICAL_WEIGHTS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

MIN_WEIGHT = 50
MAX_WEIGHT = 950

# Entries at or below this weight are expected to sit on white (dark text use)
LIGHT_WEIGHT_LIMIT = 400
# Entries at or above this weight are expected to sit on black
DARK_WEIGHT_LIMIT = 600

REPAIR_STEP = 5.0
# Lightness kept between a repaired entry and the neighbour it moves toward
REPAIR_MIN_GAP = 1.0

# Complementary mode: maximum pull toward the complement, and maximum
# lightness shift applied at either end of the scale
COMPLEMENT_MIX_MAX = 0.1
COMPLEMENT_SHIFT_MAX = 45.0


def generate_weights(steps: int) -> list[int]:
    """Weights for a scale of ``steps`` entries.

    The canonical 11-step scale uses the fixed 50..950 sequence. Any other
    count is interpolated linearly between 50 and 950, with the endpoints
    pinned exactly.

    Example:
        >>> generate_weights(5)
        [50, 275, 500, 725, 950]
    """
    if steps <= 0:
        return []
    if steps == len(CANONICAL_WEIGHTS):
        return list(CANONICAL_WEIGHTS)
    if steps == 1:
        return [MIN_WEIGHT]

    weights = [int(round(w)) for w in np.linspace(MIN_WEIGHT, MAX_WEIGHT, steps)]
    weights[0] = MIN_WEIGHT
    weights[-1] = MAX_WEIGHT
    return weights


def generate_monochromatic_scale(base: Color, steps: int) -> list[HSL]:
    """Base hue and saturation across the eased lightness curve."""
    hsl = to_hsl(base)
    return [HSL(h=hsl.h, s=hsl.s, l=lightness) for lightness in lightness_curve(steps, hsl.l)]


def generate_rich_monochromatic_scale(base: Color, steps: int) -> list[HSL]:
    """Monochromatic scale with hue drift and muted extremes.

    Light steps lean warm and dark steps lean cool by up to 5 degrees;
    saturation is reduced near both ends of the scale.
    """
    hsl = to_hsl(base)
    t = sample_positions(steps)
    lightness = lightness_curve(steps, hsl.l)
    hue_offsets = hue_drift(t)
    sat_factors = saturation_multiplier(t)

    return [
        HSL(h=hsl.h + float(offset), s=hsl.s * float(factor), l=value)
        for value, offset, factor in zip(lightness, hue_offsets, sat_factors, strict=True)
    ]


def generate_complementary_scale(base: Color, steps: int) -> list[HSL]:
    """Scale that drifts toward the complement as it darkens.

    Each step mixes the base toward its complement (ratio 0 -> 0.1 across the
    scale), then the light half is lightened and the dark half darkened by up
    to 45 points.
    """
    opposite = complement(base)
    colors: list[HSL] = []

    for t in sample_positions(steps):
        mixed = mix(base, opposite, COMPLEMENT_MIX_MAX * float(t))
        if t < 0.5:
            colors.append(lighten(mixed, COMPLEMENT_SHIFT_MAX * (1.0 - 2.0 * float(t))))
        else:
            colors.append(darken(mixed, COMPLEMENT_SHIFT_MAX * (2.0 * float(t) - 1.0)))

    return colors


def generate_scale(base: Color, mode: GenerationMode, steps: int) -> list[HSL]:
    """Generate scale colors for ``mode``.

    Monochromatic and custom palettes use the plain lightness curve;
    analogous and triadic palettes use the rich variant whose hue drift
    echoes their neighbouring hues; complementary palettes mix toward the
    complement.
    """
    if mode in (GenerationMode.MONOCHROMATIC, GenerationMode.CUSTOM):
        return generate_monochromatic_scale(base, steps)
    if mode in (GenerationMode.ANALOGOUS, GenerationMode.TRIADIC):
        return generate_rich_monochromatic_scale(base, steps)
    if mode == GenerationMode.COMPLEMENTARY:
        return generate_complementary_scale(base, steps)
    raise ValueError(f"Unknown generation mode: {mode}")


def build_scale_entries(colors: Sequence[Color], weights: Sequence[int]) -> list[ScaleEntry]:
    """Pair colors with weights.

    Raises:
        ValueError: If the sequences differ in length.
    """
    if len(colors) != len(weights):
        raise ValueError(f"Got {len(colors)} colors for {len(weights)} weights")
    return [ScaleEntry(weight=w, color=c) for c, w in zip(colors, weights, strict=True)]


def needs_repair(entry: ScaleEntry) -> bool:
    """Whether the entry misses AA against its expected background."""
    if entry.weight <= LIGHT_WEIGHT_LIMIT:
        return not entry.meets_aa_on_white
    if entry.weight >= DARK_WEIGHT_LIMIT:
        return not entry.meets_aa_on_black
    return False


def repair_entry(
    entry: ScaleEntry,
    step: float = REPAIR_STEP,
    max_passes: int = 1,
    *,
    floor: float | None = None,
    ceiling: float | None = None,
) -> ScaleEntry:
    """Nudge an entry toward AA contrast.

    Light entries (weight <= 400) failing AA on white are darkened by
    ``step``; dark entries (weight >= 600) failing AA on black are lightened
    by ``step``. Contrast is re-evaluated after every pass and at most
    ``max_passes`` passes are applied, so with the default of one pass an
    extreme base color may still fail afterwards.

    Args:
        entry: Entry to check.
        step: Lightness points per pass.
        max_passes: Maximum number of corrections.
        floor: Lowest lightness a darkening pass may reach.
        ceiling: Highest lightness a lightening pass may reach.

    Returns:
        ``entry`` itself if no repair was applied, else a new entry. A pass
        that cannot move the entry without crossing ``floor`` or ``ceiling``
        ends the repair.
    """
    current = entry
    for _ in range(max_passes):
        if not needs_repair(current):
            break
        lightness = to_hsl(current.color).l
        if current.weight <= LIGHT_WEIGHT_LIMIT:
            amount = step if floor is None else min(step, lightness - floor)
            if amount <= 0:
                break
            adjusted = darken(current.color, amount)
        else:
            amount = step if ceiling is None else min(step, ceiling - lightness)
            if amount <= 0:
                break
            adjusted = lighten(current.color, amount)
        current = ScaleEntry(weight=current.weight, color=adjusted)
    return current


def repair_scale(
    entries: Sequence[ScaleEntry],
    step: float = REPAIR_STEP,
    max_passes: int = 1,
) -> list[ScaleEntry]:
    """Apply ``repair_entry`` to every entry, logging what changed.

    Repairs never reorder the scale: an entry stops at least
    ``REPAIR_MIN_GAP`` lightness points short of the neighbour it moves
    toward. Light entries are repaired darkest first so each one is bounded
    by its already-repaired neighbour; dark entries lightest first.
    """
    repaired = list(entries)
    lightness = [to_hsl(e.color).l for e in repaired]
    last = len(repaired) - 1

    for i in reversed(range(len(repaired))):
        if repaired[i].weight > LIGHT_WEIGHT_LIMIT:
            continue
        floor = lightness[i + 1] + REPAIR_MIN_GAP if i < last else None
        repaired[i] = repair_entry(repaired[i], step=step, max_passes=max_passes, floor=floor)
        lightness[i] = to_hsl(repaired[i].color).l

    for i in range(len(repaired)):
        if repaired[i].weight < DARK_WEIGHT_LIMIT:
            continue
        ceiling = lightness[i - 1] - REPAIR_MIN_GAP if i > 0 else None
        repaired[i] = repair_entry(repaired[i], step=step, max_passes=max_passes, ceiling=ceiling)
        lightness[i] = to_hsl(repaired[i].color).l

    changed = sum(1 for before, after in zip(entries, repaired, strict=True) if before is not after)
    still_failing = [e.weight for e in repaired if needs_repair(e)]

    logger.debug("Accessibility repair adjusted %d of %d entries", changed, len(entries))
    if still_failing:
        logger.debug(
            "Entries still below AA after %d pass(es): %s",
            max_passes,
            still_failing,
        )

    return repaired


__all__ = [
    "CANONICAL_WEIGHTS",
    "REPAIR_MIN_GAP",
    "build_scale_entries",
    "generate_complementary_scale",
    "generate_monochromatic_scale",
    "generate_rich_monochromatic_scale",
    "generate_scale",
    "generate_weights",
    "needs_repair",
    "repair_entry",
    "repair_scale",
]
