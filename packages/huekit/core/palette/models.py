"""Palette data model.

Every model here is a frozen value object: a palette is built once by the
generator and never mutated afterwards. Contrast data on ``ScaleEntry`` is
computed from the entry's color on access, so it can never go stale.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from huekit.core.color.analysis import AA_NORMAL, contrast_ratio
from huekit.core.color.conversion import to_hex
from huekit.core.color.models import BLACK, WHITE, Color


class GenerationMode(str, Enum):
    """Strategy used to build a palette's scale and harmony colors."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    CUSTOM = "custom"


class SemanticRole(str, Enum):
    """Meaning assigned to a derived semantic color."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class ScaleEntry(BaseModel):
    """One weighted step of a palette scale (e.g. ``blue-500``).

    Attributes:
        weight: Design-token weight (50-950, lower is lighter).
        color: The generated color.
        hex: ``#rrggbb`` form of ``color`` (computed).
        contrast_with_white: WCAG contrast against white (computed).
        contrast_with_black: WCAG contrast against black (computed).
        meets_aa_on_white: ``contrast_with_white >= 4.5`` (computed).
        meets_aa_on_black: ``contrast_with_black >= 4.5`` (computed).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    weight: int = Field(ge=0, description="Scale weight (50-950)")
    color: Color = Field(description="Color at this step")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hex(self) -> str:
        return to_hex(self.color)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def contrast_with_white(self) -> float:
        return contrast_ratio(self.color, WHITE)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def contrast_with_black(self) -> float:
        return contrast_ratio(self.color, BLACK)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def meets_aa_on_white(self) -> bool:
        return self.contrast_with_white >= AA_NORMAL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def meets_aa_on_black(self) -> bool:
        return self.contrast_with_black >= AA_NORMAL


class SemanticColors(BaseModel):
    """Status colors derived once from the brand color."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: Color
    warning: Color
    error: Color
    info: Color

    def get(self, role: SemanticRole) -> Color:
        return getattr(self, role.value)

    def items(self) -> list[tuple[SemanticRole, Color]]:
        return [(role, self.get(role)) for role in SemanticRole]


class PaletteConfig(BaseModel):
    """Input parameters for palette generation.

    A plain record: ``steps <= 0`` is accepted and produces an empty scale
    (see ``generate_palette``).

    Attributes:
        base_color: Brand color the palette is derived from.
        name: Palette name, used as the token prefix by exporters.
        mode: Scale/harmony generation strategy.
        steps: Number of scale steps (11 gives the canonical 50-950 weights).
        preserve_accessibility: Run the AA repair pass over the scale.
        generate_semantic_colors: Derive success/warning/error/info colors.
        max_repair_passes: Upper bound on repair passes per entry (1 applies
            a single fixed correction).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_color: Color
    name: str = Field(default="custom", min_length=1)
    mode: GenerationMode = GenerationMode.MONOCHROMATIC
    steps: int = 11
    preserve_accessibility: bool = True
    generate_semantic_colors: bool = True
    max_repair_passes: int = Field(default=1, ge=1, le=20)


class Palette(BaseModel):
    """A generated color system.

    Attributes:
        name: Palette name.
        base_color: Brand color the palette was derived from.
        mode: Generation mode used.
        scale: Scale entries ordered by ascending weight.
        semantic_colors: Derived status colors, if requested.
        complementary: Complement of the base color (complementary mode).
        analogous: Neighbouring hues at -30/+30 degrees (analogous mode).
        triadic: Hues at +120/+240 degrees (triadic mode).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    base_color: Color
    mode: GenerationMode = GenerationMode.MONOCHROMATIC
    scale: tuple[ScaleEntry, ...] = ()
    semantic_colors: SemanticColors | None = None
    complementary: Color | None = None
    analogous: tuple[Color, Color] | None = None
    triadic: tuple[Color, Color] | None = None

    @property
    def weights(self) -> list[int]:
        return [entry.weight for entry in self.scale]

    def get(self, weight: int) -> ScaleEntry | None:
        """Return the entry with ``weight``, or None."""
        for entry in self.scale:
            if entry.weight == weight:
                return entry
        return None

    def hex_map(self) -> dict[int, str]:
        return {entry.weight: entry.hex for entry in self.scale}


__all__ = [
    "GenerationMode",
    "Palette",
    "PaletteConfig",
    "ScaleEntry",
    "SemanticColors",
    "SemanticRole",
]
