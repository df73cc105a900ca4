"""Generate LUT grids from color transform functions."""

from __future__ import annotations

from typing import Callable

import numpy as np

from .grid import AxisOrder, LutGrid


def table_to_samples(table: np.ndarray, axis_order: AxisOrder) -> np.ndarray:
    """Flatten a (size, size, size, 3) table indexed [r, g, b] into samples.

    Args:
        table: LUT table indexed [r, g, b]
        axis_order: Flattening convention for the output

    Returns:
        Sample array with shape (size**3, 3)
    """
    if axis_order is AxisOrder.B_SLOWEST:
        table = table.transpose(2, 1, 0, 3)
    return table.reshape(-1, 3)


class LutGenerator:
    """Generate size x size x size LUT grids."""

    def __init__(
        self, size: int = 33, axis_order: AxisOrder = AxisOrder.B_SLOWEST
    ) -> None:
        """Initialize LUT generator.

        Args:
            size: Size of the LUT cube (default: 33 for 33x33x33)
            axis_order: Flattening convention of generated grids
        """
        if size < 2:
            raise ValueError("LUT size must be at least 2")
        self.size = size
        self.axis_order = axis_order
        self._identity_table: np.ndarray | None = None

    @property
    def identity_table(self) -> np.ndarray:
        """Get or create the identity table.

        Returns:
            Identity table with shape (size, size, size, 3) indexed [r, g, b]
        """
        if self._identity_table is None:
            coords = np.linspace(0.0, 1.0, self.size)
            r_grid, g_grid, b_grid = np.meshgrid(
                coords, coords, coords, indexing="ij"
            )
            self._identity_table = np.stack([r_grid, g_grid, b_grid], axis=-1)
        return self._identity_table

    def to_grid(self, table: np.ndarray, title: str = "") -> LutGrid:
        """Wrap a table indexed [r, g, b] as a LUT grid."""
        return LutGrid(
            size=self.size,
            samples=table_to_samples(table, self.axis_order),
            title=title,
            axis_order=self.axis_order,
        )

    def identity(self, title: str = "Identity") -> LutGrid:
        """Create an identity grid where output equals input."""
        return self.to_grid(self.identity_table, title)

    def apply_transform(
        self,
        transform_func: Callable[[np.ndarray], np.ndarray],
        title: str = "",
    ) -> LutGrid:
        """Bake a color transformation function into a grid.

        Args:
            transform_func: Function mapping (count, 3) RGB to (count, 3) RGB
            title: Title of the generated grid

        Returns:
            Grid sampling ``transform_func`` at every grid point
        """
        flat = self.identity_table.reshape(-1, 3)
        transformed = transform_func(flat.copy())
        return self.to_grid(transformed.reshape(self.identity_table.shape), title)

    def apply_gamma(self, gamma: float) -> LutGrid:
        """Create a gamma correction grid.

        Args:
            gamma: Gamma value (> 0)

        Returns:
            Gamma-corrected grid
        """
        if gamma <= 0:
            raise ValueError("Gamma must be positive")

        def gamma_transform(rgb: np.ndarray) -> np.ndarray:
            return np.power(np.clip(rgb, 0.0, 1.0), 1.0 / gamma)

        return self.apply_transform(gamma_transform, f"Gamma {gamma:g}")

    def apply_brightness_contrast(
        self, brightness: float = 0.0, contrast: float = 1.0
    ) -> LutGrid:
        """Create a brightness/contrast grid.

        Args:
            brightness: Brightness adjustment (-1 to 1)
            contrast: Contrast multiplier (> 0)

        Returns:
            Brightness/contrast adjusted grid
        """
        if contrast <= 0:
            raise ValueError("Contrast must be positive")

        def brightness_contrast_transform(rgb: np.ndarray) -> np.ndarray:
            # Contrast pivots around the 0.5 midpoint
            adjusted = (rgb - 0.5) * contrast + 0.5 + brightness
            return np.clip(adjusted, 0.0, 1.0)

        return self.apply_transform(
            brightness_contrast_transform,
            f"Brightness {brightness:g} Contrast {contrast:g}",
        )
