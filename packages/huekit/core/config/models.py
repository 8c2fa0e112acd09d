"""Configuration models for huekit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from huekit.core.palette.models import GenerationMode
from huekit.core.palette.presets import PresetName


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )

    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string (ignored when structured)",
    )

    structured: bool = Field(default=False, description="Emit JSON lines instead of text")

    filename: str | None = Field(default=None, description="Log file path (default: stderr)")


class PaletteDefaults(BaseModel):
    """Generation defaults applied when a palette file or CLI call omits a value."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(default="brand", min_length=1, description="Palette/token name")

    mode: GenerationMode = Field(
        default=GenerationMode.MONOCHROMATIC, description="Scale generation mode"
    )

    steps: int = Field(default=11, description="Number of scale steps")

    preserve_accessibility: bool = Field(
        default=True, description="Repair scale entries that miss WCAG AA"
    )

    generate_semantic_colors: bool = Field(
        default=True, description="Derive success/warning/error/info colors"
    )

    max_repair_passes: int = Field(
        default=1,
        ge=1,
        le=20,
        description="Repair passes per entry (1 = single fixed correction)",
    )


class AppConfig(BaseModel):
    """Application-level configuration (logging + generation defaults)."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    palette: PaletteDefaults = Field(default_factory=PaletteDefaults)


class PaletteFileConfig(BaseModel):
    """A palette job file: one base color plus optional overrides.

    Example (YAML)::

        base_color: "#3b82f6"
        name: brand
        mode: complementary
        steps: 11

    Unset fields fall back to ``PaletteDefaults`` (or the preset, if one is
    named).
    """

    model_config = ConfigDict(extra="forbid")

    base_color: str = Field(description="Base brand color (#rrggbb)")
    preset: PresetName | None = Field(default=None, description="Preset to start from")
    name: str | None = None
    mode: GenerationMode | None = None
    steps: int | None = None
    preserve_accessibility: bool | None = None
    generate_semantic_colors: bool | None = None
    max_repair_passes: int | None = Field(default=None, ge=1, le=20)
