"""Decoded 3D LUT grid and its sample flattening conventions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

import numpy as np

IndexT = TypeVar("IndexT", int, np.ndarray)

DEFAULT_DOMAIN_MIN = (0.0, 0.0, 0.0)
DEFAULT_DOMAIN_MAX = (1.0, 1.0, 1.0)


class AxisOrder(Enum):
    """Rule mapping a (ri, gi, bi) grid coordinate to a flat sample index."""

    B_SLOWEST = "b-slowest"
    R_SLOWEST = "r-slowest"

    def flat_index(self, ri: IndexT, gi: IndexT, bi: IndexT, size: int) -> IndexT:
        """Get the position of a grid coordinate in the flat sample list.

        Works element-wise when the indices are numpy integer arrays.

        Args:
            ri: Red grid index
            gi: Green grid index
            bi: Blue grid index
            size: Per-axis grid resolution

        Returns:
            Flat sample index
        """
        if self is AxisOrder.B_SLOWEST:
            # Red varies fastest
            return bi * size * size + gi * size + ri
        return ri * size * size + gi * size + bi


@dataclass(frozen=True, eq=False)
class LutGrid:
    """Immutable 3D LUT decoded from .cube text."""

    size: int
    samples: np.ndarray
    title: str = ""
    domain_min: tuple[float, float, float] = DEFAULT_DOMAIN_MIN
    domain_max: tuple[float, float, float] = DEFAULT_DOMAIN_MAX
    axis_order: AxisOrder = AxisOrder.B_SLOWEST

    def __post_init__(self) -> None:
        """Freeze samples as a read-only float64 (count, 3) array."""
        samples = np.array(self.samples, dtype=np.float64).reshape(-1, 3)
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)
        object.__setattr__(
            self, "domain_min", tuple(float(v) for v in self.domain_min)
        )
        object.__setattr__(
            self, "domain_max", tuple(float(v) for v in self.domain_max)
        )

    @property
    def entry_count(self) -> int:
        """Number of RGB samples in the grid."""
        return int(self.samples.shape[0])

    @property
    def has_default_domain(self) -> bool:
        """Check if the domain bounds are the identity (0,0,0)-(1,1,1)."""
        return (
            self.domain_min == DEFAULT_DOMAIN_MIN
            and self.domain_max == DEFAULT_DOMAIN_MAX
        )

    @property
    def display_title(self) -> str:
        """Title for display, ``unknown`` when the file carried none."""
        return self.title or "unknown"

    def as_table(self) -> np.ndarray:
        """Get samples as a (size, size, size, 3) array indexed [r, g, b].

        Returns:
            Read-only view of the samples arranged by grid coordinate
        """
        cube = self.samples.reshape(self.size, self.size, self.size, 3)
        if self.axis_order is AxisOrder.B_SLOWEST:
            # Flat layout is [b, g, r]
            return cube.transpose(2, 1, 0, 3)
        return cube

    def describe(self) -> dict[str, Any]:
        """Get LUT information for display.

        Returns:
            Dictionary with size, title, entry count, domain and axis order
        """
        return {
            "size": self.size,
            "title": self.display_title,
            "entries": self.entry_count,
            "domain_min": self.domain_min,
            "domain_max": self.domain_max,
            "axis_order": self.axis_order.value,
        }
