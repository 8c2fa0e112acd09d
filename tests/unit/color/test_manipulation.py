"""Tests for color manipulation."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from huekit.core.color.conversion import to_hsl
from huekit.core.color.manipulation import (
    complement,
    darken,
    desaturate,
    grayscale,
    invert,
    lighten,
    mix,
    rotate,
    saturate,
    set_lightness,
)
from huekit.core.color.models import BLACK, HSL, RGB, WHITE, Hex


class TestLightness:
    """Tests for lighten, darken and set_lightness."""

    def test_lighten(self) -> None:
        assert lighten(HSL(h=200, s=50, l=40), 10).l == pytest.approx(50.0)

    def test_darken(self) -> None:
        assert darken(HSL(h=200, s=50, l=40), 10).l == pytest.approx(30.0)

    def test_lighten_clamps_at_100(self) -> None:
        assert lighten(HSL(h=200, s=50, l=90), 30).l == 100.0

    def test_darken_clamps_at_0(self) -> None:
        assert darken(HSL(h=200, s=50, l=10), 30).l == 0.0

    @pytest.mark.parametrize("lightness", [0.0, 12.5, 30.0, 50.0])
    def test_lighten_then_darken_restores_when_unclamped(self, lightness: float) -> None:
        color = HSL(h=200, s=50, l=lightness)
        assert darken(lighten(color, 50), 50).l == pytest.approx(lightness)

    def test_preserves_hue_and_saturation(self) -> None:
        result = lighten(HSL(h=123, s=45, l=30), 20)
        assert result.h == pytest.approx(123.0)
        assert result.s == pytest.approx(45.0)

    def test_accepts_any_representation(self) -> None:
        result = lighten(Hex(value="#808080"), 10)
        assert isinstance(result, HSL)
        assert result.l == pytest.approx(to_hsl(Hex(value="#808080")).l + 10)

    def test_set_lightness(self) -> None:
        assert set_lightness(HSL(h=10, s=20, l=30), 75).l == 75.0

    def test_input_not_modified(self) -> None:
        color = HSL(h=200, s=50, l=40)
        lighten(color, 20)
        assert color.l == 40.0


class TestSaturation:
    def test_saturate_clamps(self) -> None:
        assert saturate(HSL(h=0, s=90, l=50), 20).s == 100.0

    def test_desaturate_clamps(self) -> None:
        assert desaturate(HSL(h=0, s=10, l=50), 20).s == 0.0

    def test_grayscale(self) -> None:
        gray = grayscale(HSL(h=210, s=80, l=40))
        assert gray.s == 0.0
        assert gray.l == pytest.approx(40.0)


class TestHueRotation:
    """Tests for rotate and complement."""

    @pytest.mark.parametrize(
        ("start", "degrees", "expected"),
        [
            (350.0, 20.0, 10.0),
            (10.0, -20.0, 350.0),
            (0.0, 360.0, 0.0),
            (90.0, -450.0, 0.0),
        ],
    )
    def test_rotate(self, start: float, degrees: float, expected: float) -> None:
        assert rotate(HSL(h=start, s=50, l=50), degrees).h == pytest.approx(expected)

    @pytest.mark.parametrize(
        "degrees", [-720.0, -360.0, -0.0001, 0.0, 359.9999, 360.0, 1e6, -1e-17]
    )
    def test_rotate_result_always_in_range(self, degrees: float) -> None:
        assert 0.0 <= rotate(HSL(h=0, s=50, l=50), degrees).h < 360.0

    @pytest.mark.parametrize("degrees", [float("inf"), float("-inf"), float("nan")])
    def test_rotate_by_non_finite_raises(self, degrees: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            rotate(HSL(h=10, s=50, l=50), degrees)

    def test_complement(self) -> None:
        assert complement(HSL(h=30, s=50, l=50)).h == pytest.approx(210.0)

    def test_complement_twice_is_identity(self) -> None:
        color = HSL(h=217, s=91, l=60)
        assert complement(complement(color)).h == pytest.approx(217.0)


class TestMix:
    """Tests for RGB mixing."""

    def test_midpoint(self) -> None:
        assert mix(BLACK, WHITE, 0.5).as_tuple() == (128, 128, 128)

    def test_endpoints(self) -> None:
        assert mix(BLACK, WHITE, 0.0) == BLACK
        assert mix(BLACK, WHITE, 1.0) == WHITE

    @pytest.mark.parametrize(("ratio", "expected"), [(2.0, WHITE), (-1.0, BLACK)])
    def test_ratio_clamped(self, ratio: float, expected: RGB) -> None:
        assert mix(BLACK, WHITE, ratio) == expected

    def test_returns_rgb_from_mixed_inputs(self) -> None:
        result = mix(Hex(value="#ff0000"), HSL(h=240, s=100, l=50), 0.5)
        assert isinstance(result, RGB)
        assert result.as_tuple() == (128, 0, 128)


class TestInvert:
    def test_invert_black(self) -> None:
        assert invert(BLACK) == WHITE

    def test_invert_twice_is_identity(self) -> None:
        color = RGB(r=12, g=130, b=250)
        assert invert(invert(color)) == color
