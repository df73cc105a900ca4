"""Infer the flattening convention of a .cube sample list.

The .cube format does not record whether red or blue varies fastest, and
authoring tools emit both. A LUT is expected to map white to (nearly) white,
so each candidate order is scored by how far it sends the white point from
(1, 1, 1).

Known limitation: LUTs that intentionally move white (e.g. white-balance
looks) can be misclassified.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from lut_studio.engine.interpolation import sample_grid

from .grid import AxisOrder

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .grid import LutGrid

logger = logging.getLogger(__name__)

WHITE = np.ones(3, dtype=np.float64)


def score_axis_order(grid: LutGrid, order: AxisOrder) -> float:
    """Sum of absolute per-channel deviation from white of the mapped white point.

    Args:
        grid: LUT grid to probe
        order: Candidate flattening convention

    Returns:
        Deviation score, lower is better
    """
    mapped = sample_grid(grid, WHITE, order)
    return float(np.sum(np.abs(mapped - 1.0)))


def detect_axis_order(
    grid: LutGrid, candidates: Sequence[AxisOrder] = tuple(AxisOrder)
) -> AxisOrder:
    """Pick the candidate order that maps white closest to white.

    Ties favor the earliest candidate.

    Args:
        grid: LUT grid to probe
        candidates: Flattening conventions to test, in preference order

    Returns:
        Best scoring axis order
    """
    if not candidates:
        raise ValueError("At least one axis order candidate is required")

    best = candidates[0]
    best_score = score_axis_order(grid, best)
    for order in candidates[1:]:
        score = score_axis_order(grid, order)
        logger.debug(f"Axis order {order.value} scored {score:.6f}")
        if score < best_score:
            best, best_score = order, score

    logger.debug(f"Detected axis order {best.value} (score {best_score:.6f})")
    return best
