# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Command-line interface for lut-studio."""

from __future__ import annotations

import logging
import sys

import click

from . import __version__
from .errors import FormatError
from .lut import AxisOrder
from .processor import LutProcessor

AXIS_ORDER_CHOICES = ["auto"] + [order.value for order in AxisOrder]


def configure_logging(verbose: bool, info_logging: bool) -> None:
    """Configure root logging from the CLI verbosity flags."""
    if verbose:
        log_level = logging.DEBUG
    elif info_logging:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _axis_order_option(value: str) -> AxisOrder | None:
    return None if value == "auto" else AxisOrder(value)


@click.command()
@click.argument("lut_file", type=click.Path(exists=True, dir_okay=False))
@click.argument(
    "image", required=False, type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output image path (default: lut_processed_<timestamp>.png)",
)
@click.option(
    "--axis-order",
    type=click.Choice(AXIS_ORDER_CHOICES),
    default="auto",
    help="Sample ordering of the LUT (auto = detect from white point)",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=LutProcessor.DEFAULT_WORKERS,
    help="Number of threads used to process the image",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose (debug) logging")
@click.option("--info-logging", is_flag=True, help="Enable info-level logging")
@click.option("--info", is_flag=True, help="Show LUT information and exit")
@click.version_option(version=__version__, prog_name="lut-studio")
def main(
    lut_file: str,
    image: str | None,
    output: str | None,
    axis_order: str,
    workers: int,
    verbose: bool,
    info_logging: bool,
    info: bool,
) -> None:
    """LUT Studio - Apply .cube 3D LUTs to images.

    Loads LUT_FILE, applies it to IMAGE with trilinear interpolation and
    writes the result. Use --info to only show what the LUT contains.
    """
    configure_logging(verbose, info_logging)

    if info:
        show_lut_info(lut_file, axis_order)
        return

    if image is None:
        raise click.UsageError("IMAGE is required unless --info is given")

    apply_lut_cli(lut_file, image, output, axis_order, workers)


def show_lut_info(lut_file: str, axis_order: str = "auto") -> None:
    """Show information about a .cube LUT."""
    try:
        processor = LutProcessor(axis_order=_axis_order_option(axis_order))
        grid = processor.load_lut(lut_file)

        click.echo("LUT Information:")
        for key, value in grid.describe().items():
            if isinstance(value, tuple):
                value = " ".join(f"{v:g}" for v in value)
            click.echo(f"  {key}: {value}")

    except FormatError as e:
        click.echo(f"Invalid LUT data: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def apply_lut_cli(
    lut_file: str,
    image: str,
    output: str | None,
    axis_order: str,
    workers: int,
) -> None:
    """Apply a LUT to an image via CLI."""
    try:
        processor = LutProcessor(
            workers=workers, axis_order=_axis_order_option(axis_order)
        )
        grid = processor.load_lut(lut_file)
        click.echo(
            f"Loaded {grid.size}³ LUT '{grid.display_title}' ({grid.axis_order.value})"
        )

        destination = processor.process_image(image, output)
        click.echo(f"Saved {destination}")

    except FormatError as e:
        click.echo(f"Invalid LUT data: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
