"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from huekit.core.color.models import Hex
from huekit.core.config.loader import (
    build_palette_config,
    detect_format,
    load_app_config,
    load_config,
    load_palette_config,
)
from huekit.core.config.models import AppConfig, PaletteDefaults, PaletteFileConfig
from huekit.core.palette.models import GenerationMode
from huekit.core.palette.presets import PresetName


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.yml", "yaml"), ("A.YAML", "yaml")],
    )
    def test_known(self, name: str, expected: str) -> None:
        assert detect_format(name) == expected

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("palette.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.yaml"
        path.write_text("base_color: '#3b82f6'\nsteps: 5\n")
        assert load_config(path) == {"base_color": "#3b82f6", "steps": 5}

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"base_color": "#3b82f6"}))
        assert load_config(path) == {"base_color": "#3b82f6"}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("base_color: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ValueError, match="Expected a mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_defaults_when_default_file_missing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        config = load_app_config()
        assert config == AppConfig()
        assert config.logging.level == "WARNING"
        assert config.palette.steps == 11

    def test_default_file_picked_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "huekit.yaml").write_text("palette:\n  name: acme\n")
        monkeypatch.chdir(tmp_path)
        assert load_app_config().palette.name == "acme"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "app.yaml"
        path.write_text(
            "logging:\n  level: DEBUG\n  structured: true\n"
            "palette:\n  mode: analogous\n  max_repair_passes: 4\n"
        )
        config = load_app_config(path)
        assert config.logging.level == "DEBUG"
        assert config.logging.structured is True
        assert config.palette.mode == GenerationMode.ANALOGOUS
        assert config.palette.max_repair_passes == 4

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_app_config(tmp_path / "nope.yaml")

    def test_invalid_level(self, tmp_path: Path) -> None:
        path = tmp_path / "app.yaml"
        path.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_unknown_section(self, tmp_path: Path) -> None:
        path = tmp_path / "app.yaml"
        path.write_text("colours: {}\n")
        with pytest.raises(ValidationError):
            load_app_config(path)


class TestBuildPaletteConfig:
    """Merging palette files over presets and defaults."""

    def test_defaults_applied(self) -> None:
        config = build_palette_config(PaletteFileConfig(base_color="3B82F6"))
        assert config.base_color == Hex(value="#3b82f6")
        assert config.name == "brand"
        assert config.steps == 11

    def test_custom_defaults(self) -> None:
        defaults = PaletteDefaults(name="acme", steps=7, generate_semantic_colors=False)
        config = build_palette_config(PaletteFileConfig(base_color="#3b82f6"), defaults)
        assert config.name == "acme"
        assert config.steps == 7
        assert config.generate_semantic_colors is False

    def test_overrides_win(self) -> None:
        file_config = PaletteFileConfig(
            base_color="#3b82f6",
            name="web",
            mode=GenerationMode.TRIADIC,
            steps=9,
            preserve_accessibility=False,
            max_repair_passes=3,
        )
        config = build_palette_config(file_config)
        assert config.name == "web"
        assert config.mode == GenerationMode.TRIADIC
        assert config.steps == 9
        assert config.preserve_accessibility is False
        assert config.max_repair_passes == 3

    def test_preset_then_overrides(self) -> None:
        file_config = PaletteFileConfig(base_color="#3b82f6", preset=PresetName.MINIMAL, steps=7)
        config = build_palette_config(file_config)
        assert config.name == "minimal"
        assert config.steps == 7
        assert config.generate_semantic_colors is False

    def test_invalid_base_color(self) -> None:
        with pytest.raises(ValueError, match="Invalid base_color"):
            build_palette_config(PaletteFileConfig(base_color="zzzzzz"))


class TestLoadPaletteConfig:
    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.yaml"
        path.write_text("base_color: '#10b981'\nname: green\npreset: vibrant\n")
        config = load_palette_config(path)
        assert config.base_color == Hex(value="#10b981")
        assert config.name == "green"
        assert config.mode == GenerationMode.COMPLEMENTARY

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"base_color": "#10b981", "colour": "red"}))
        with pytest.raises(ValidationError):
            load_palette_config(path)
