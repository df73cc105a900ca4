"""Domain remap and trilinear sampling of a flat LUT sample array."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from lut_studio.lut.grid import AxisOrder, LutGrid


def remap_domain(grid: LutGrid, rgb: np.ndarray) -> np.ndarray:
    """Apply the grid's domain remap to normalized RGB and clamp to [0, 1].

    Args:
        grid: LUT grid providing domain bounds
        rgb: Normalized colors with shape (..., 3)

    Returns:
        Remapped colors with shape (..., 3), clamped to [0, 1]
    """
    domain_min = np.asarray(grid.domain_min, dtype=np.float64)
    domain_max = np.asarray(grid.domain_max, dtype=np.float64)
    remapped = domain_min + rgb * (domain_max - domain_min)
    return np.clip(remapped, 0.0, 1.0)


def _lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def trilinear_lookup(
    samples: np.ndarray, size: int, order: AxisOrder, coords: np.ndarray
) -> np.ndarray:
    """Interpolate colors from the 8 surrounding grid samples.

    Blends along blue first, then green, then red.

    Args:
        samples: Flat sample array with shape (size**3, 3)
        size: Per-axis grid resolution
        order: Flattening convention used to index ``samples``
        coords: Colors in [0, 1] with shape (..., 3)

    Returns:
        Interpolated colors with shape (..., 3), unclamped
    """
    scaled = coords * (size - 1)
    lower = np.floor(scaled).astype(np.intp)
    frac = scaled - lower
    # Replicate edge samples instead of indexing past the grid
    upper = np.minimum(lower + 1, size - 1)

    r0, g0, b0 = lower[..., 0], lower[..., 1], lower[..., 2]
    r1, g1, b1 = upper[..., 0], upper[..., 1], upper[..., 2]
    rf, gf, bf = frac[..., 0:1], frac[..., 1:2], frac[..., 2:3]

    def corner(ri: np.ndarray, gi: np.ndarray, bi: np.ndarray) -> np.ndarray:
        return samples[order.flat_index(ri, gi, bi, size)]

    c00 = _lerp(corner(r0, g0, b0), corner(r0, g0, b1), bf)
    c01 = _lerp(corner(r0, g1, b0), corner(r0, g1, b1), bf)
    c10 = _lerp(corner(r1, g0, b0), corner(r1, g0, b1), bf)
    c11 = _lerp(corner(r1, g1, b0), corner(r1, g1, b1), bf)

    c0 = _lerp(c00, c01, gf)
    c1 = _lerp(c10, c11, gf)

    return _lerp(c0, c1, rf)


def sample_grid(
    grid: LutGrid, rgb: np.ndarray, order: AxisOrder | None = None
) -> np.ndarray:
    """Look up normalized colors through the grid.

    Args:
        grid: LUT grid to sample
        rgb: Normalized colors with shape (..., 3)
        order: Override the grid's axis order (used when probing candidates)

    Returns:
        Interpolated colors with shape (..., 3), unclamped
    """
    coords = remap_domain(grid, rgb)
    return trilinear_lookup(
        grid.samples,
        grid.size,
        order if order is not None else grid.axis_order,
        coords,
    )
