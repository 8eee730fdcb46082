"""Command-line interface for SpriteCast.

Provides commands for converting an image into a four-view sprite and
for validating a pipeline config file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from spritecast.config import load_config
from spritecast.errors import SpriteCastError
from spritecast.logging import setup_logging
from spritecast.models import SpriteResult, TranslationConfig
from spritecast.observability import ConversionMetrics, write_run_summary
from spritecast.pipeline import translate_image
from spritecast.renderer import frame_to_png_bytes, render_views_sheet, result_to_json

console = Console()


def _setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    if verbose:
        setup_logging(level=logging.DEBUG, verbose=True)
    else:
        setup_logging(level=logging.WARNING)


def _default_output_path(image_path: Path) -> Path:
    return image_path.with_name(f"{image_path.stem}_sprite.png")


def _print_result(result: SpriteResult) -> None:
    console.print(
        f"  Archetype: [bold]{result.archetype.value}[/] "
        f"({result.dimensions.width}×{result.dimensions.height})"
    )
    table = Table(title="Palette", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Hex")
    table.add_column("Swatch")
    for idx, color in enumerate(result.palette, start=1):
        table.add_row(str(idx), color, f"[on {color}]    [/]")
    console.print(table)


@click.group()
@click.version_option(package_name="spritecast")
def main() -> None:
    """SpriteCast — turn any image into a tiny four-direction pixel-art sprite."""
    pass


@main.command()
@click.argument(
    "image_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output path for the four-view PNG sheet (default: <image>_sprite.png)",
)
@click.option(
    "--json",
    "json_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the sprite matrix, palette and archetype as JSON",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file overriding pipeline constants",
)
@click.option(
    "--scale",
    "-s",
    type=click.IntRange(min=1, max=64),
    default=8,
    show_default=True,
    help="Pixel magnification of the PNG sheet",
)
@click.option(
    "--summary",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write stage timings and palette stats as JSON",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable detailed logging",
)
def convert(
    image_path: Path,
    output: Path | None,
    json_path: Path | None,
    config_path: Path | None,
    scale: int,
    summary: Path | None,
    verbose: bool,
) -> None:
    """Convert an image into a front/back/left/right pixel-art sprite.

    IMAGE_PATH: Path to any raster image Pillow can read.

    Example:

        \b
        spritecast convert cat.png
        spritecast convert cat.png -o out/cat.png --json out/cat.json --scale 12
    """
    _setup_logging(verbose)

    try:
        config = load_config(config_path) if config_path else TranslationConfig()
        payload = image_path.read_bytes()

        metrics = ConversionMetrics()
        with console.status(f"[bold blue]Translating {image_path.name}..."):
            result = translate_image(payload, config=config, metrics=metrics)

        console.print(f"[bold green]✓[/] Translated [bold]{image_path}[/]")
        _print_result(result)

        out_path = output or _default_output_path(image_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(frame_to_png_bytes(render_views_sheet(result, scale=scale)))
        console.print(f"  Sheet: {out_path}")

        if json_path:
            json_path.parent.mkdir(parents=True, exist_ok=True)
            json_path.write_text(result_to_json(result) + "\n", encoding="utf-8")
            console.print(f"  JSON: {json_path}")

        if summary:
            write_run_summary(summary, metrics.snapshot())
            console.print(f"  Summary: {summary}")

    except (SpriteCastError, FileNotFoundError) as e:
        console.print(f"[bold red]✗[/] Conversion failed: {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]✗[/] Unexpected error: {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)


@main.command()
@click.argument(
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable detailed logging",
)
def validate(config_path: Path, verbose: bool) -> None:
    """Validate a pipeline config without converting anything.

    CONFIG_PATH: Path to the YAML configuration file
    """
    _setup_logging(verbose)

    try:
        config = load_config(config_path)
    except (SpriteCastError, FileNotFoundError) as e:
        console.print(f"[bold red]✗[/] Validation failed: {e}")
        sys.exit(1)

    console.print("[bold green]✓[/] Configuration is valid")
    console.print(f"  Canvas: {config.canvas_size}px")
    console.print(f"  Max colors: {config.max_colors}")
    if config.strict_hue_guard:
        console.print(
            "[bold yellow]⚠[/] strict_hue_guard is on: palettes may exceed max_colors"
        )


if __name__ == "__main__":
    main()
