"""Serialize LUT grids to .cube text."""

from __future__ import annotations

import logging
from pathlib import Path

from .generator import table_to_samples
from .grid import AxisOrder, LutGrid

logger = logging.getLogger(__name__)


def _format_triple(values: tuple[float, ...] | list[float]) -> str:
    return " ".join(f"{v:.6f}" for v in values)


def format_cube(grid: LutGrid, axis_order: AxisOrder | None = None) -> str:
    """Render a grid as .cube text.

    Rows are written in the grid's own axis order unless ``axis_order``
    asks for another one; domain lines are only written when they differ
    from the defaults.
    """
    samples = grid.samples
    if axis_order is not None and axis_order is not grid.axis_order:
        samples = table_to_samples(grid.as_table(), axis_order)

    lines = []
    if grid.title:
        lines.append(f'TITLE "{grid.title}"')
    lines.append(f"LUT_3D_SIZE {grid.size}")
    if not grid.has_default_domain:
        lines.append(f"DOMAIN_MIN {_format_triple(grid.domain_min)}")
        lines.append(f"DOMAIN_MAX {_format_triple(grid.domain_max)}")
    lines.append("")
    lines.extend(_format_triple(row.tolist()) for row in samples)
    return "\n".join(lines) + "\n"


def save_cube(
    grid: LutGrid, path: str | Path, axis_order: AxisOrder | None = None
) -> Path:
    """Write a grid to a .cube file.

    Args:
        grid: Grid to write
        path: Destination path
        axis_order: Row order to write (default: the grid's own)

    Returns:
        Path that was written
    """
    path = Path(path)
    path.write_text(format_cube(grid, axis_order), encoding="utf-8")
    logger.debug(f"Wrote {grid.size}x{grid.size}x{grid.size} LUT to {path}")
    return path
