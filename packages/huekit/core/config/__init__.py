"""Configuration models and loaders."""

from huekit.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_palette_config,
)
from huekit.core.config.models import AppConfig, LoggingConfig, PaletteDefaults, PaletteFileConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "PaletteDefaults",
    "PaletteFileConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_palette_config",
]
