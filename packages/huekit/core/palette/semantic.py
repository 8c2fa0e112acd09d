"""Semantic color derivation (success / warning / error / info).

Each semantic color starts from the brand color and is pulled along the
shorter arc of the hue wheel toward a canonical hue. The blend ratio decides
how much brand identity survives: a higher ratio lands closer to the
canonical hue. Saturation and lightness are then clamped into a per-role
band so every brand input yields status colors of similar visual weight.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from huekit.core.color.conversion import to_hsl
from huekit.core.color.models import HSL, Color
from huekit.core.palette.models import SemanticColors, SemanticRole
from huekit.core.utils.math import clamp, wrap


class SemanticTarget(BaseModel):
    """Canonical hue, blend ratio and S/L bands for one semantic role."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hue: float = Field(ge=0.0, lt=360.0, description="Canonical hue in degrees")
    blend: float = Field(ge=0.0, le=1.0, description="Fraction of the arc travelled")
    saturation: tuple[float, float] = Field(description="Allowed saturation band")
    lightness: tuple[float, float] = Field(description="Allowed lightness band")


SEMANTIC_TARGETS: dict[SemanticRole, SemanticTarget] = {
    SemanticRole.SUCCESS: SemanticTarget(
        hue=120.0, blend=0.8, saturation=(40.0, 70.0), lightness=(35.0, 45.0)
    ),
    SemanticRole.WARNING: SemanticTarget(
        hue=40.0, blend=0.8, saturation=(70.0, 95.0), lightness=(45.0, 55.0)
    ),
    SemanticRole.ERROR: SemanticTarget(
        hue=0.0, blend=0.85, saturation=(60.0, 85.0), lightness=(40.0, 50.0)
    ),
    SemanticRole.INFO: SemanticTarget(
        hue=220.0, blend=0.75, saturation=(50.0, 80.0), lightness=(40.0, 50.0)
    ),
}


def shortest_hue_distance(from_hue: float, to_hue: float) -> float:
    """Signed angular distance along the shorter arc, in (-180, 180].

    Example:
        >>> shortest_hue_distance(350.0, 10.0)
        20.0
        >>> shortest_hue_distance(10.0, 350.0)
        -20.0
    """
    delta = wrap(to_hue - from_hue, 360.0)
    if delta > 180.0:
        delta -= 360.0
    return delta


def blend_hue(base_hue: float, target_hue: float, ratio: float) -> float:
    """Move ``ratio`` of the way from ``base_hue`` to ``target_hue``."""
    return wrap(base_hue + shortest_hue_distance(base_hue, target_hue) * ratio, 360.0)


def derive_semantic(base: Color, role: SemanticRole) -> HSL:
    target = SEMANTIC_TARGETS[role]
    hsl = to_hsl(base)
    return HSL(
        h=blend_hue(hsl.h, target.hue, target.blend),
        s=clamp(hsl.s, *target.saturation),
        l=clamp(hsl.l, *target.lightness),
    )


def generate_success(base: Color) -> HSL:
    return derive_semantic(base, SemanticRole.SUCCESS)


def generate_warning(base: Color) -> HSL:
    return derive_semantic(base, SemanticRole.WARNING)


def generate_error(base: Color) -> HSL:
    return derive_semantic(base, SemanticRole.ERROR)


def generate_info(base: Color) -> HSL:
    return derive_semantic(base, SemanticRole.INFO)


def derive_semantic_colors(base: Color) -> SemanticColors:
    return SemanticColors(
        success=generate_success(base),
        warning=generate_warning(base),
        error=generate_error(base),
        info=generate_info(base),
    )


__all__ = [
    "SEMANTIC_TARGETS",
    "SemanticTarget",
    "blend_hue",
    "derive_semantic",
    "derive_semantic_colors",
    "generate_error",
    "generate_info",
    "generate_success",
    "generate_warning",
    "shortest_hue_distance",
]
