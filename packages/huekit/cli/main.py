"""Command-line interface for huekit.

Sub-commands:

- ``generate``: build a palette from a brand color (or a palette file) and
  print it as a table or export it as Tailwind / CSS / JSON
- ``contrast``: WCAG contrast report for a foreground/background pair
- ``harmony``: print a harmony set for a color
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from huekit.cli.parsing import parse_color
from huekit.core.color.analysis import contrast_ratio, meets_aa, meets_aaa, wcag_rating
from huekit.core.color.conversion import to_hex
from huekit.core.color.harmony import HarmonyKind, harmony
from huekit.core.color.models import RGB, Hex
from huekit.core.config.loader import configure_logging, load_app_config, load_palette_config
from huekit.core.config.models import AppConfig
from huekit.core.palette.export import (
    to_css_variables,
    to_json,
    to_json_dict,
    to_tailwind_config,
)
from huekit.core.palette.generator import PaletteGenerator
from huekit.core.palette.models import GenerationMode, Palette, PaletteConfig
from huekit.core.palette.presets import PresetName, preset_config
from huekit.core.utils.json import write_json

console = Console()
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "tailwind", "css", "json")


class CliError(Exception):
    """User-facing CLI failure (printed, exit status 1)."""


def _parse_color_arg(text: str) -> RGB:
    result = parse_color(text)
    if result.error is not None:
        raise CliError(f"{result.error.message}: '{text}'")
    return result.unwrap()


def _load_app_config(path: str | None) -> AppConfig:
    try:
        return load_app_config(path)
    except (FileNotFoundError, ValueError) as e:
        raise CliError(f"Could not load config: {e}") from e


def _check(passed: bool) -> str:
    return "[green]✓[/green]" if passed else "[red]✗[/red]"


def build_config(args: argparse.Namespace, app_config: AppConfig) -> PaletteConfig:
    """Resolve the PaletteConfig for ``generate`` from file, preset, defaults and flags."""
    if args.file and args.preset:
        raise CliError("--preset cannot be combined with --file (set preset in the palette file)")
    if args.file:
        try:
            config = load_palette_config(args.file, app_config.palette)
        except (FileNotFoundError, ValueError) as e:
            raise CliError(f"Could not load palette file: {e}") from e
        if args.color is not None:
            base = Hex(value=to_hex(_parse_color_arg(args.color)))
            config = config.model_copy(update={"base_color": base})
    elif args.color is None:
        raise CliError("A base color (or --file) is required")
    elif args.preset:
        base = Hex(value=to_hex(_parse_color_arg(args.color)))
        config = preset_config(args.preset, base)
    else:
        base = Hex(value=to_hex(_parse_color_arg(args.color)))
        defaults = app_config.palette
        config = PaletteConfig(
            base_color=base,
            name=defaults.name,
            mode=defaults.mode,
            steps=defaults.steps,
            preserve_accessibility=defaults.preserve_accessibility,
            generate_semantic_colors=defaults.generate_semantic_colors,
            max_repair_passes=defaults.max_repair_passes,
        )

    overrides: dict[str, object] = {}
    if args.name:
        overrides["name"] = args.name
    if args.mode:
        overrides["mode"] = GenerationMode(args.mode)
    if args.steps is not None:
        overrides["steps"] = args.steps
    if args.no_accessibility:
        overrides["preserve_accessibility"] = False
    if args.no_semantic:
        overrides["generate_semantic_colors"] = False
    if args.repair_passes is not None:
        overrides["max_repair_passes"] = args.repair_passes

    if not overrides:
        return config
    # Re-validate so overrides get the same checks as file/preset values
    try:
        return PaletteConfig.model_validate({**config.model_dump(), **overrides})
    except ValidationError as e:
        raise CliError(f"Invalid palette options: {e}") from e


def render_palette_table(palette: Palette) -> None:
    """Print the palette scale and semantic colors as rich tables."""
    table = Table(title=f"{palette.name} ({palette.mode.value})")
    table.add_column("Weight", justify="right")
    table.add_column("Hex")
    table.add_column("Swatch")
    table.add_column("vs White", justify="right")
    table.add_column("vs Black", justify="right")
    table.add_column("AA White", justify="center")
    table.add_column("AA Black", justify="center")

    for entry in palette.scale:
        table.add_row(
            str(entry.weight),
            entry.hex,
            f"[on {entry.hex}]      [/]",
            f"{entry.contrast_with_white:.2f}",
            f"{entry.contrast_with_black:.2f}",
            _check(entry.meets_aa_on_white),
            _check(entry.meets_aa_on_black),
        )
    console.print(table)

    if palette.semantic_colors is not None:
        semantic = Table(title="Semantic colors")
        semantic.add_column("Role")
        semantic.add_column("Hex")
        semantic.add_column("Swatch")
        for role, color in palette.semantic_colors.items():
            hex_value = to_hex(color)
            semantic.add_row(role.value, hex_value, f"[on {hex_value}]      [/]")
        console.print(semantic)


def _render_export(palette: Palette, fmt: str) -> str:
    if fmt == "tailwind":
        return to_tailwind_config(palette)
    if fmt == "css":
        return to_css_variables(palette)
    if fmt == "json":
        return to_json(palette) + "\n"
    raise CliError(f"Unsupported output format: {fmt}")


def run_generate(args: argparse.Namespace) -> int:
    if args.format == "table" and args.out:
        raise CliError("--out needs --format tailwind, css or json")

    app_config = _load_app_config(args.config)
    if args.verbose:
        app_config.logging.level = "DEBUG"
    configure_logging(app_config)

    config = build_config(args, app_config)
    palette = PaletteGenerator().generate(config)
    logger.info("Generated palette '%s' with %d entries", palette.name, len(palette.scale))

    if args.format == "table":
        render_palette_table(palette)
        return 0

    fmt = args.format
    if args.out and fmt == "json":
        out_path = write_json(args.out, to_json_dict(palette))
        console.print(f"[green]✅ Wrote {fmt} palette:[/green] {out_path}")
    elif args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(_render_export(palette, fmt), encoding="utf-8")
        console.print(f"[green]✅ Wrote {fmt} palette:[/green] {out_path}")
    else:
        sys.stdout.write(_render_export(palette, fmt))
    return 0


def run_contrast(args: argparse.Namespace) -> int:
    foreground = _parse_color_arg(args.foreground)
    background = _parse_color_arg(args.background)

    ratio = contrast_ratio(foreground, background)
    table = Table(title=f"{to_hex(foreground)} on {to_hex(background)}")
    table.add_column("Check")
    table.add_column("Result", justify="center")
    table.add_row("Contrast ratio", f"{ratio:.2f}:1")
    table.add_row("AA normal text", _check(meets_aa(foreground, background)))
    table.add_row("AA large text", _check(meets_aa(foreground, background, large_text=True)))
    table.add_row("AAA normal text", _check(meets_aaa(foreground, background)))
    table.add_row("AAA large text", _check(meets_aaa(foreground, background, large_text=True)))
    table.add_row("Rating", wcag_rating(foreground, background))
    console.print(table)
    return 0


def run_harmony(args: argparse.Namespace) -> int:
    base = _parse_color_arg(args.color)
    colors = harmony(base, HarmonyKind(args.kind), angle=args.angle, steps=args.steps)

    table = Table(title=f"{args.kind} harmony for {to_hex(base)}")
    table.add_column("#", justify="right")
    table.add_column("Hex")
    table.add_column("Swatch")
    table.add_column("HSL")
    for i, color in enumerate(colors, start=1):
        hex_value = to_hex(color)
        table.add_row(
            str(i),
            hex_value,
            f"[on {hex_value}]      [/]",
            f"{color.h:.0f}°, {color.s:.0f}%, {color.l:.0f}%",
        )
    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="huekit",
        description="huekit - accessible color palette generator",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate a palette from a brand color")
    gen.add_argument(
        "color",
        nargs="?",
        help="Base color: #rrggbb, rrggbb, rgb(r, g, b), hsl(h, s%%, l%%) or a CSS name",
    )
    gen.add_argument("--file", help="Palette file (.json/.yaml) with base color and options")
    gen.add_argument(
        "--preset",
        choices=[p.value for p in PresetName],
        help="Preset to apply (not with --file)",
    )
    gen.add_argument("--name", help="Palette name used as token prefix")
    gen.add_argument("--mode", choices=[m.value for m in GenerationMode], help="Generation mode")
    gen.add_argument("--steps", type=int, help="Number of scale steps (default: 11)")
    gen.add_argument(
        "--no-accessibility",
        action="store_true",
        help="Skip the WCAG AA repair pass",
    )
    gen.add_argument(
        "--no-semantic",
        action="store_true",
        help="Skip success/warning/error/info colors",
    )
    gen.add_argument("--repair-passes", type=int, help="Max AA repair passes per entry")
    gen.add_argument("--format", choices=OUTPUT_FORMATS, default="table", help="Output format")
    gen.add_argument(
        "--out",
        help="Write tailwind/css/json output to this file instead of stdout",
    )
    gen.add_argument("--config", help="App config (.json/.yaml, default: huekit.yaml if present)")
    gen.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    con = sub.add_parser("contrast", help="WCAG contrast report for two colors")
    con.add_argument("foreground", help="Foreground (text) color")
    con.add_argument("background", help="Background color")

    har = sub.add_parser("harmony", help="Print a color harmony set")
    har.add_argument("color", help="Base color")
    har.add_argument(
        "--kind",
        choices=[k.value for k in HarmonyKind],
        default=HarmonyKind.COMPLEMENTARY.value,
        help="Harmony relationship (default: complementary)",
    )
    har.add_argument("--angle", type=float, default=30.0, help="Angle for analogous/split sets")
    har.add_argument("--steps", type=int, default=5, help="Steps for monochromatic sets")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    handlers = {
        "generate": run_generate,
        "contrast": run_contrast,
        "harmony": run_harmony,
    }

    try:
        return handlers[args.cmd](args)
    except CliError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
