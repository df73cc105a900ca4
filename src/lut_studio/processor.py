# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""High-level interface tying LUT loading to image processing."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .engine import apply_grid
from .errors import PreconditionError
from .imaging import default_output_path, load_image, save_image
from .lut import AxisOrder, decode, load_cube

if TYPE_CHECKING:
    import numpy as np

    from .lut import LutGrid

logger = logging.getLogger(__name__)


class LutProcessor:
    """Hold the currently loaded LUT and apply it to images."""

    DEFAULT_WORKERS = 1

    def __init__(
        self,
        workers: int = DEFAULT_WORKERS,
        axis_order: AxisOrder | None = None,
    ) -> None:
        """Initialize LUT processor.

        Args:
            workers: Number of threads used per image
            axis_order: Force an axis order instead of detecting it
        """
        if workers < 1:
            raise ValueError("Workers must be at least 1")
        self.workers = workers
        self.axis_order = axis_order
        self._grid: LutGrid | None = None
        self._lut_path: Path | None = None

    @property
    def grid(self) -> LutGrid | None:
        """Get the loaded LUT grid, if any."""
        return self._grid

    @property
    def has_lut(self) -> bool:
        """Check if a LUT is loaded."""
        return self._grid is not None

    def _set_grid(self, grid: LutGrid) -> LutGrid:
        if self.axis_order is not None and grid.axis_order is not self.axis_order:
            logger.debug(
                f"Overriding detected axis order {grid.axis_order.value} "
                f"with {self.axis_order.value}"
            )
            grid = dataclasses.replace(grid, axis_order=self.axis_order)

        self._grid = grid
        logger.info(
            f"Loaded {grid.size}x{grid.size}x{grid.size} LUT '{grid.display_title}' "
            f"({grid.entry_count} entries, {grid.axis_order.value})"
        )
        return grid

    def load_lut_text(self, text: str) -> LutGrid:
        """Decode .cube text and make it the current LUT.

        Raises:
            FormatError: If the text is not a valid 3D .cube LUT
        """
        self._lut_path = None
        return self._set_grid(decode(text))

    def load_lut(self, path: str | Path) -> LutGrid:
        """Read a .cube file and make it the current LUT.

        The previous LUT is kept if decoding fails.

        Raises:
            ValueError: If the file does not have a .cube extension
            OSError: If the file cannot be read
            FormatError: If the contents are not a valid 3D .cube LUT
        """
        path = Path(path)
        if path.suffix.lower() != ".cube":
            raise ValueError(f"Expected a .cube file, got {path.name}")

        grid = load_cube(path)
        self._lut_path = path
        return self._set_grid(grid)

    def _require_grid(self) -> LutGrid:
        if self._grid is None:
            raise PreconditionError("No LUT loaded")
        return self._grid

    def apply(
        self, pixels: np.ndarray | bytearray, channel_stride: int | None = None
    ) -> None:
        """Apply the current LUT to a pixel buffer in place.

        Raises:
            PreconditionError: If no LUT is loaded or the buffer is unusable
        """
        apply_grid(self._require_grid(), pixels, channel_stride, self.workers)

    def process_image(
        self, image_path: str | Path, output_path: str | Path | None = None
    ) -> Path:
        """Apply the current LUT to an image file and save the result.

        Args:
            image_path: Source image
            output_path: Destination (default: lut_processed_<timestamp>.png)

        Returns:
            Path of the written image

        Raises:
            PreconditionError: If no LUT is loaded
            ImageLoadError: If the image cannot be read or written
        """
        grid = self._require_grid()
        pixels = load_image(image_path)
        apply_grid(grid, pixels, workers=self.workers)

        destination = Path(output_path) if output_path else default_output_path()
        save_image(pixels, destination)
        logger.info(f"Processed {image_path} -> {destination}")
        return destination

    def get_status(self) -> dict[str, Any]:
        """Get current processor status.

        Returns:
            Dictionary with status information
        """
        status: dict[str, Any] = {
            "has_lut": self.has_lut,
            "lut_path": str(self._lut_path) if self._lut_path else None,
            "workers": self.workers,
            "forced_axis_order": self.axis_order.value if self.axis_order else None,
        }
        if self._grid is not None:
            status["lut"] = self._grid.describe()
        return status
