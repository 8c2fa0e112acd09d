"""Tests for math utilities."""

import pytest

from huekit.core.utils.math import clamp, lerp, wrap


def test_clamp_within_range():
    """Test clamping values within range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(0.5, 0.0, 1.0) == 0.5


def test_clamp_below_and_above():
    """Test clamping values outside the range."""
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10


@pytest.mark.parametrize("value", [-1000.0, -0.1, 0.0, 42.0, 100.0, 250.0])
def test_clamp_idempotent(value):
    """Clamping twice gives the same result as clamping once."""
    once = clamp(value, 0.0, 100.0)
    assert clamp(once, 0.0, 100.0) == once


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, 0.0), (360.0, 0.0), (-30.0, 330.0), (725.0, 5.0), (-720.0, 0.0), (359.5, 359.5)],
)
def test_wrap(value, expected):
    """Test true modulo wrapping into [0, 360)."""
    assert wrap(value) == pytest.approx(expected)


def test_wrap_tiny_negative():
    """A tiny negative value must not wrap to exactly the modulus."""
    assert wrap(-1e-17) == 0.0


def test_wrap_custom_modulus():
    """Test wrapping with a non-default modulus."""
    assert wrap(-1.0, 10.0) == pytest.approx(9.0)


def test_lerp():
    """Test linear interpolation."""
    assert lerp(0, 10, 0.0) == 0.0
    assert lerp(0, 10, 0.5) == 5.0
    assert lerp(0, 10, 1.0) == 10.0
    assert lerp(10, 0, 0.25) == 7.5
