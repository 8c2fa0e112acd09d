"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from huekit.core.color.conversion import hex_to_rgb, to_hex
from huekit.core.color.models import Hex
from huekit.core.config.models import AppConfig, PaletteDefaults, PaletteFileConfig
from huekit.core.palette.models import PaletteConfig
from huekit.core.palette.presets import preset_config
from huekit.core.utils.json import read_json
from huekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

# Default app config path (can be overridden)
DEFAULT_APP_CONFIG_PATH = Path("huekit.yaml")

_OVERRIDE_FIELDS = (
    "mode",
    "steps",
    "preserve_accessibility",
    "generate_semantic_colors",
    "max_repair_passes",
)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("palette.json")
        'json'
        >>> detect_format("palette.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats, auto-detected from the extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file. Defaults to ``huekit.yaml``; a missing
              default file yields all defaults, a missing explicit path
              raises.

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    if path is None:
        if not DEFAULT_APP_CONFIG_PATH.exists():
            return AppConfig()
        path = DEFAULT_APP_CONFIG_PATH

    raw_config = load_config(path)
    logger.debug("Loaded app config from %s", path)
    return AppConfig.model_validate(raw_config)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def build_palette_config(
    file_config: PaletteFileConfig,
    defaults: PaletteDefaults | None = None,
) -> PaletteConfig:
    """Merge a palette file over a preset (if named) or the app defaults.

    Raises:
        ValueError: If the base color is not a valid hex color.
    """
    parsed = hex_to_rgb(file_config.base_color)
    if parsed.error is not None:
        raise ValueError(f"Invalid base_color '{file_config.base_color}': {parsed.error.message}")
    base = Hex(value=to_hex(parsed.unwrap()))

    if file_config.preset is not None:
        start = preset_config(file_config.preset, base, file_config.name).model_dump()
    else:
        defaults = defaults or PaletteDefaults()
        start = defaults.model_dump()
        start["name"] = file_config.name or defaults.name
        start["base_color"] = base

    for field in _OVERRIDE_FIELDS:
        value = getattr(file_config, field)
        if value is not None:
            start[field] = value

    start["base_color"] = base
    return PaletteConfig.model_validate(start)


def load_palette_config(
    path: str | Path,
    defaults: PaletteDefaults | None = None,
) -> PaletteConfig:
    """Load a palette job file into a PaletteConfig.

    Example:
        >>> config = load_palette_config("palette.yaml")
        >>> config.base_color.value
        '#3b82f6'
    """
    raw_config = load_config(path)
    file_config = PaletteFileConfig.model_validate(raw_config)
    return build_palette_config(file_config, defaults)
