"""Color representation models.

A ``Color`` is a tagged union over the supported representations. Every
variant is a frozen pydantic model carrying a ``kind`` discriminator, so a
color can round-trip through JSON/YAML and be matched exhaustively by the
conversion layer.

Invariants are enforced at construction time rather than at use:

- numeric components must be finite (NaN and infinities are rejected)
- hue is normalized into [0, 360) by true modulo
- saturation, lightness and value are clamped to [0, 100]
- RGB channels are rounded to integers and clamped to [0, 255]
- hex strings are normalized to lowercase ``#rrggbb``
"""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from huekit.core.utils.math import clamp, wrap

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def clean_hex(value: str) -> str | None:
    """Strip an optional leading ``#`` and validate six hex digits.

    Surrounding whitespace is not stripped; callers parsing free-form text
    trim it first.

    Args:
        value: Raw hex string (``#3b82f6`` or ``3b82f6``).

    Returns:
        Lowercase six-digit string without ``#``, or None if invalid.

    Example:
        >>> clean_hex("#3B82F6")
        '3b82f6'
        >>> clean_hex("zzzzzz") is None
        True
    """
    stripped = value[1:] if value.startswith("#") else value
    if len(stripped) != 6:
        return None
    if not all(c in _HEX_DIGITS for c in stripped):
        return None
    return stripped.lower()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _finite(v: float) -> float:
    value = float(v)
    if not math.isfinite(value):
        raise ValueError(f"Color components must be finite, got {value}")
    return value


class RGB(BaseModel):
    """sRGB color with integer channels in [0, 255]."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    kind: Literal["rgb"] = "rgb"
    r: int = Field(default=0, description="Red channel (0-255)")
    g: int = Field(default=0, description="Green channel (0-255)")
    b: int = Field(default=0, description="Blue channel (0-255)")

    @field_validator("r", "g", "b", mode="before")
    @classmethod
    def clamp_channel(cls, v: float) -> int:
        """Round to the nearest integer and clamp into [0, 255]."""
        return _round_half_up(clamp(_finite(v), 0.0, 255.0))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class HSL(BaseModel):
    """Hue/saturation/lightness color (hue in degrees, s/l in percent)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    kind: Literal["hsl"] = "hsl"
    h: float = Field(default=0.0, description="Hue in degrees [0, 360)")
    s: float = Field(default=0.0, description="Saturation percent [0, 100]")
    l: float = Field(default=0.0, description="Lightness percent [0, 100]")  # noqa: E741

    @field_validator("h", mode="before")
    @classmethod
    def normalize_hue(cls, v: float) -> float:
        return wrap(_finite(v), 360.0)

    @field_validator("s", "l", mode="before")
    @classmethod
    def clamp_percent(cls, v: float) -> float:
        return clamp(_finite(v), 0.0, 100.0)


class HSV(BaseModel):
    """Hue/saturation/value color (hue in degrees, s/v in percent)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    kind: Literal["hsv"] = "hsv"
    h: float = Field(default=0.0, description="Hue in degrees [0, 360)")
    s: float = Field(default=0.0, description="Saturation percent [0, 100]")
    v: float = Field(default=0.0, description="Value percent [0, 100]")

    @field_validator("h", mode="before")
    @classmethod
    def normalize_hue(cls, v: float) -> float:
        return wrap(_finite(v), 360.0)

    @field_validator("s", "v", mode="before")
    @classmethod
    def clamp_percent(cls, v: float) -> float:
        return clamp(_finite(v), 0.0, 100.0)


class Hex(BaseModel):
    """Hex color string, stored normalized as lowercase ``#rrggbb``.

    Construction with anything other than six hex digits (after stripping an
    optional ``#``) raises a pydantic ``ValidationError``. Use
    ``conversion.hex_to_rgb`` for a non-raising parse.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["hex"] = "hex"
    value: str = Field(description="Hex color (#rrggbb)")

    @field_validator("value", mode="before")
    @classmethod
    def normalize_value(cls, v: str) -> str:
        if not isinstance(v, str):
            raise ValueError(f"Hex color must be a string, got {type(v).__name__}")
        cleaned = clean_hex(v)
        if cleaned is None:
            raise ValueError(f"Hex color must be 6 hex digits (#rrggbb), got '{v}'")
        return f"#{cleaned}"


class LAB(BaseModel):
    """CIE L*a*b* color relative to the D65 reference white."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    kind: Literal["lab"] = "lab"
    l: float = Field(default=0.0, description="Perceptual lightness L* [0, 100]")  # noqa: E741
    a: float = Field(default=0.0, description="Green-red axis a*")
    b: float = Field(default=0.0, description="Blue-yellow axis b*")

    @field_validator("l", mode="before")
    @classmethod
    def clamp_lightness(cls, v: float) -> float:
        return clamp(_finite(v), 0.0, 100.0)


Color = Annotated[RGB | HSL | HSV | Hex | LAB, Field(discriminator="kind")]

WHITE = RGB(r=255, g=255, b=255)
BLACK = RGB(r=0, g=0, b=0)


class ParseError(BaseModel):
    """Why a color string could not be parsed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input: str = Field(description="The rejected input string")
    message: str = Field(description="Human-readable reason")


class ColorParseError(ValueError):
    """Raised by ``ParseResult.unwrap()`` when the parse failed."""

    def __init__(self, error: ParseError) -> None:
        self.error = error
        super().__init__(f"{error.message}: '{error.input}'")


class ParseResult(BaseModel):
    """Explicit success/failure result of parsing a color.

    Exactly one of ``value`` and ``error`` is set. Callers check ``ok`` (or
    call ``unwrap``/``unwrap_or``) and decide the fallback themselves.

    Example:
        >>> from huekit.core.color.conversion import hex_to_rgb
        >>> hex_to_rgb("zzzzzz").ok
        False
        >>> hex_to_rgb("#ff0000").unwrap()
        RGB(kind='rgb', r=255, g=0, b=0)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: RGB | None = None
    error: ParseError | None = None

    @classmethod
    def success(cls, value: RGB) -> ParseResult:
        return cls(value=value)

    @classmethod
    def failure(cls, input: str, message: str) -> ParseResult:
        return cls(error=ParseError(input=input, message=message))

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap(self) -> RGB:
        """Return the parsed color or raise ``ColorParseError``."""
        if self.value is None:
            raise ColorParseError(self.error or ParseError(input="", message="Empty parse result"))
        return self.value

    def unwrap_or(self, default: RGB) -> RGB:
        return self.value if self.value is not None else default


__all__ = [
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
    "clean_hex",
]
