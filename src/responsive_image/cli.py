"""Responsive image CLI.

Command-line access to the image catalog: list the generated variants of an
image and resolve which variant fits a given share of a screen.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Optional

import typer

from responsive_image.errors import ResponsiveImageError
from responsive_image.service import ResponsiveImageService
from responsive_image.settings import ResolverSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Responsive image variant resolver", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "responsive_image.cli"

CONFIG_OPTION = typer.Option(..., "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
NAME_ARGUMENT = typer.Argument(..., help="Origin name of the image")
SIZE_OPTION = typer.Option(
    None, "--size", "-s", help="Image width in percent of the screen width (default 100)"
)
SCREEN_WIDTH_OPTION = typer.Option(None, "--screen-width", help="Override screen width")
PIXEL_RATIO_OPTION = typer.Option(None, "--pixel-ratio", help="Override device pixel ratio")
DATA_OPTION = typer.Option(False, "--data", help="Print width and height with the reference")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load(config: Path) -> tuple[ResolverSettings, ResponsiveImageService]:
    try:
        settings = ResolverSettings.load(config)
        return settings, ResponsiveImageService.from_settings(settings)
    except (RuntimeError, FileNotFoundError, ResponsiveImageError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def images(
    name: str = NAME_ARGUMENT,
    config: Path = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """List the generated variants of an image."""
    _configure_logging(debug)
    _, service = _load(config)
    try:
        variants = service.get_images(name)
    except ResponsiveImageError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    for variant in variants:
        typer.echo(f"{variant.width}x{variant.height} {variant.reference}")


@app.command()
def resolve(
    name: str = NAME_ARGUMENT,
    config: Path = CONFIG_OPTION,
    size: Optional[float] = SIZE_OPTION,
    screen_width: Optional[float] = SCREEN_WIDTH_OPTION,
    pixel_ratio: Optional[float] = PIXEL_RATIO_OPTION,
    data: bool = DATA_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the image variant that fits the requested size."""
    _configure_logging(debug)
    settings, service = _load(config)
    if screen_width is not None or pixel_ratio is not None:
        try:
            service.reconfigure(screen_width=screen_width, pixel_density=pixel_ratio)
        except ValueError as exc:
            typer.secho(f"Invalid device geometry: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc

    if size is None:
        size = settings.default_size

    try:
        variant = service.get_image_data_by_size(name, size)
    except ResponsiveImageError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    logger.debug("Resolved %s at %s%% to %s", name, size or 100, variant.reference)
    if data:
        typer.echo(f"{variant.width} {variant.height} {variant.reference}")
    else:
        typer.echo(variant.reference)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        ResolverSettings.load(file)
        typer.echo("✅ Config valid")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
