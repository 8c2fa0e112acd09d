"""Shared pytest fixtures for huekit tests."""

from __future__ import annotations

import logging

import pytest

from huekit.core.color.models import BLACK, HSL, RGB, WHITE, Hex
from huekit.core.palette.models import PaletteConfig

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging changes to the root logger after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def brand_blue() -> Hex:
    """Tailwind blue-500, the reference brand color."""
    return Hex(value="#3b82f6")


@pytest.fixture
def white() -> RGB:
    return WHITE


@pytest.fixture
def black() -> RGB:
    return BLACK


@pytest.fixture
def mid_gray() -> HSL:
    """Neutral gray at 50% lightness."""
    return HSL(h=0.0, s=0.0, l=50.0)


# ============================================================================
# Palette Fixtures
# ============================================================================


@pytest.fixture
def brand_config(brand_blue: Hex) -> PaletteConfig:
    """Default monochromatic config for the brand color."""
    return PaletteConfig(base_color=brand_blue, name="brand")
