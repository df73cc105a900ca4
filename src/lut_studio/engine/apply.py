# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Apply a decoded LUT grid to interleaved 8-bit pixel buffers."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

import numpy as np

from lut_studio.errors import PreconditionError

from .interpolation import sample_grid

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lut_studio.lut.grid import LutGrid

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_STRIDE = 4
CHUNK_PIXELS = 1 << 16


def validate_grid(grid: LutGrid) -> None:
    """Check that a grid can be used for lookups.

    Args:
        grid: LUT grid to check

    Raises:
        PreconditionError: If the grid is too small or its samples are inconsistent
    """
    if grid.size <= 1:
        raise PreconditionError(f"LUT size must be at least 2, got {grid.size}")

    if grid.entry_count == 0:
        raise PreconditionError("LUT has no samples")

    if grid.entry_count != grid.size**3:
        raise PreconditionError(
            f"LUT has {grid.entry_count} samples, expected {grid.size**3}"
        )


def to_bytes(rgb: np.ndarray) -> np.ndarray:
    """Denormalize colors to bytes, rounding half up and clamping to [0, 255]."""
    return np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255).astype(np.uint8)


def transform_pixel(grid: LutGrid, rgb: Sequence[int]) -> tuple[int, int, int]:
    """Map a single 8-bit RGB color through the grid.

    Args:
        grid: LUT grid to apply
        rgb: Red, green and blue bytes

    Returns:
        Transformed red, green and blue bytes

    Raises:
        PreconditionError: If the grid is invalid or fewer than 3 channels are given
    """
    validate_grid(grid)
    if len(rgb) < 3:
        raise PreconditionError(f"Pixel needs at least 3 channels, got {len(rgb)}")

    normalized = np.asarray(rgb[:3], dtype=np.float64) / 255.0
    out = to_bytes(sample_grid(grid, normalized))
    return int(out[0]), int(out[1]), int(out[2])


def _pixel_view(pixels: Any, channel_stride: int | None) -> np.ndarray:
    """Get a writable (pixel_count, channel_stride) uint8 view of a buffer.

    (height, width, channels) arrays carry their stride in the last axis.
    Flatter arrays, such as (height, width * channels) rows, are read by
    flat length.
    """
    if isinstance(pixels, np.ndarray):
        if channel_stride is None:
            if pixels.ndim >= 3 or (pixels.ndim == 2 and pixels.shape[-1] in (3, 4)):
                channel_stride = pixels.shape[-1]
            else:
                channel_stride = DEFAULT_CHANNEL_STRIDE

        if pixels.dtype != np.uint8:
            raise PreconditionError(
                f"Pixel buffer must be uint8, got {pixels.dtype}"
            )

        if pixels.ndim >= 3 and pixels.shape[-1] != channel_stride:
            raise PreconditionError(
                f"Pixel buffer has {pixels.shape[-1]} channels, "
                f"but channel stride is {channel_stride}"
            )

        if not pixels.flags.c_contiguous:
            raise PreconditionError("Pixel buffer must be C-contiguous")

        flat = pixels.reshape(-1)
    else:
        if channel_stride is None:
            channel_stride = DEFAULT_CHANNEL_STRIDE

        try:
            flat = np.frombuffer(pixels, dtype=np.uint8)
        except (TypeError, ValueError) as e:
            raise PreconditionError(f"Unsupported pixel buffer: {e}") from e

    if channel_stride < 3:
        raise PreconditionError(
            f"Pixel buffer needs at least 3 channels, got {channel_stride}"
        )

    if not flat.flags.writeable:
        raise PreconditionError("Pixel buffer is read-only")

    if flat.size % channel_stride != 0:
        raise PreconditionError(
            f"Pixel buffer length {flat.size} is not a multiple of "
            f"channel stride {channel_stride}"
        )

    return flat.reshape(-1, channel_stride)


def _apply_band(grid: LutGrid, band: np.ndarray) -> None:
    """Transform the RGB channels of a (count, stride) band in place."""
    for start in range(0, band.shape[0], CHUNK_PIXELS):
        chunk = band[start : start + CHUNK_PIXELS]
        normalized = chunk[:, :3].astype(np.float64) / 255.0
        chunk[:, :3] = to_bytes(sample_grid(grid, normalized))


def split_bands(pixel_count: int, workers: int) -> list[tuple[int, int]]:
    """Split a pixel range into contiguous, near-equal bands.

    Args:
        pixel_count: Number of pixels to split
        workers: Number of bands wanted

    Returns:
        List of (start, stop) ranges covering ``range(pixel_count)``
    """
    workers = max(1, min(workers, pixel_count))
    step, extra = divmod(pixel_count, workers)
    bands = []
    start = 0
    for i in range(workers):
        stop = start + step + (1 if i < extra else 0)
        bands.append((start, stop))
        start = stop
    return bands


def apply_grid(
    grid: LutGrid,
    pixels: Any,
    channel_stride: int | None = None,
    workers: int = 1,
) -> None:
    """Apply a LUT grid to an interleaved pixel buffer in place.

    Only the first three channels of each pixel are written. Any further
    channels (alpha) are left untouched.

    Args:
        grid: LUT grid to apply
        pixels: uint8 numpy array or writable bytes-like buffer
        channel_stride: Channels per pixel (inferred from array shape, else 4)
        workers: Number of threads splitting the buffer into pixel bands

    Raises:
        ValueError: If workers is less than 1
        PreconditionError: If the grid or buffer cannot be transformed
    """
    if workers < 1:
        raise ValueError("Workers must be at least 1")

    validate_grid(grid)
    view = _pixel_view(pixels, channel_stride)

    pixel_count = view.shape[0]
    if pixel_count == 0:
        return

    logger.debug(
        f"Applying {grid.size}x{grid.size}x{grid.size} LUT to {pixel_count} pixels "
        f"({grid.axis_order.value}, {workers} worker(s))"
    )

    if workers == 1:
        _apply_band(grid, view)
        return

    bands = split_bands(pixel_count, workers)
    with ThreadPoolExecutor(max_workers=len(bands)) as pool:
        futures = [
            pool.submit(_apply_band, grid, view[start:stop]) for start, stop in bands
        ]
        for future in futures:
            future.result()


def transform(grid: LutGrid, pixels: Any, channel_stride: int) -> None:
    """Apply a LUT grid to a pixel buffer with an explicit channel stride.

    Args:
        grid: LUT grid to apply
        pixels: uint8 numpy array or writable bytes-like buffer
        channel_stride: Channels per pixel

    Raises:
        PreconditionError: If the grid or buffer cannot be transformed
    """
    apply_grid(grid, pixels, channel_stride)
