"""Tests for palette exporters."""

from __future__ import annotations

import json

import pytest

from huekit.core.color.models import Hex
from huekit.core.palette.export import (
    to_css_variables,
    to_json,
    to_json_dict,
    to_tailwind_config,
    token_name,
)
from huekit.core.palette.generator import generate_palette
from huekit.core.palette.models import GenerationMode, Palette, PaletteConfig
from huekit.core.palette.presets import minimal


@pytest.fixture
def palette(brand_config: PaletteConfig) -> Palette:
    return generate_palette(brand_config)


class TestTokenName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("brand", "brand"),
            ("Brand Blue!", "brand-blue"),
            ("  acme__co  ", "acme-co"),
            ("!!!", "palette"),
        ],
    )
    def test_slug(self, name: str, expected: str) -> None:
        assert token_name(name) == expected


class TestTailwind:
    def test_structure(self, palette: Palette) -> None:
        output = to_tailwind_config(palette)
        assert output.startswith("module.exports = {")
        assert "'brand': {" in output
        assert f"50: '{palette.hex_map()[50]}'," in output
        assert f"950: '{palette.hex_map()[950]}'," in output
        assert output.endswith("}\n")

    def test_semantic_roles(self, palette: Palette) -> None:
        output = to_tailwind_config(palette)
        for role in ("success", "warning", "error", "info"):
            assert f"        {role}: '#" in output

    def test_without_semantic(self, brand_blue: Hex) -> None:
        assert "success" not in to_tailwind_config(minimal(brand_blue))


class TestCssVariables:
    def test_root_block(self, palette: Palette) -> None:
        output = to_css_variables(palette)
        lines = output.splitlines()
        assert lines[0] == ":root {"
        assert lines[-1] == "}"
        assert f"  --brand-500: {palette.hex_map()[500]};" in lines
        assert any(line.startswith("  --brand-success: #") for line in lines)

    def test_custom_selector(self, palette: Palette) -> None:
        assert to_css_variables(palette, selector=".theme-dark").startswith(".theme-dark {")

    def test_one_variable_per_entry(self, brand_blue: Hex) -> None:
        output = to_css_variables(minimal(brand_blue))
        assert output.count("--minimal-") == 5


class TestJson:
    """Tests for the JSON projection."""

    def test_dict_fields(self, palette: Palette) -> None:
        data = to_json_dict(palette)
        assert data["name"] == "brand"
        assert data["base"] == "#3b82f6"
        assert data["mode"] == "monochromatic"
        assert [e["weight"] for e in data["scale"]] == palette.weights
        assert set(data["semantic"]) == {"success", "warning", "error", "info"}
        assert data["harmony"] == {}

    def test_entry_contrast_and_accessibility(self, palette: Palette) -> None:
        first = to_json_dict(palette)["scale"][0]
        entry = palette.scale[0]
        assert first["hex"] == entry.hex
        assert first["contrast"]["white"] == round(entry.contrast_with_white, 2)
        assert first["accessibility"]["aa_on_black"] is entry.meets_aa_on_black

    def test_harmony_for_complementary(self, brand_blue: Hex) -> None:
        palette = generate_palette(
            PaletteConfig(base_color=brand_blue, mode=GenerationMode.COMPLEMENTARY)
        )
        assert to_json_dict(palette)["harmony"]["complementary"].startswith("#")

    def test_harmony_for_triadic(self, brand_blue: Hex) -> None:
        config = PaletteConfig(base_color=brand_blue, mode=GenerationMode.TRIADIC)
        palette = generate_palette(config)
        assert len(to_json_dict(palette)["harmony"]["triadic"]) == 2

    def test_semantic_null_without_semantic(self, brand_blue: Hex) -> None:
        assert to_json_dict(minimal(brand_blue))["semantic"] is None

    def test_json_string_parses(self, palette: Palette) -> None:
        assert json.loads(to_json(palette)) == to_json_dict(palette)
