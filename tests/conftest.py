# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Shared fixtures for lut-studio tests."""

import pytest

from lut_studio.lut.generator import LutGenerator
from lut_studio.lut.grid import AxisOrder, LutGrid

# Corner colors keyed by (ri, gi, bi) for a 2x2x2 LUT
CORNER_COLORS = {
    (0, 0, 0): (0.0, 0.0, 0.0),  # black
    (1, 0, 0): (0.9, 0.1, 0.1),  # red-ish
    (0, 1, 0): (0.1, 0.9, 0.1),  # green-ish
    (1, 1, 0): (0.95, 0.95, 0.1),  # yellow-ish
    (0, 0, 1): (0.1, 0.1, 0.9),  # blue-ish
    (1, 0, 1): (0.9, 0.1, 0.9),  # magenta-ish
    (0, 1, 1): (0.1, 0.9, 0.9),  # cyan-ish
    (1, 1, 1): (0.98, 0.97, 0.96),  # white-ish
}


def corner_rows(order: AxisOrder) -> list[tuple[float, float, float]]:
    """Corner colors of the 2x2x2 LUT flattened in the given order."""
    rows: list[tuple[float, float, float]] = [(0.0, 0.0, 0.0)] * 8
    for (ri, gi, bi), color in CORNER_COLORS.items():
        rows[order.flat_index(ri, gi, bi, 2)] = color
    return rows


def make_cube_text(
    rows: list[tuple[float, float, float]],
    size: int = 2,
    header: str = "",
) -> str:
    """Build .cube text from data rows."""
    lines = [header, f"LUT_3D_SIZE {size}"] if header else [f"LUT_3D_SIZE {size}"]
    lines.extend(f"{r:.6f} {g:.6f} {b:.6f}" for r, g, b in rows)
    return "\n".join(lines) + "\n"


@pytest.fixture
def b_slowest_corner_text() -> str:
    """2x2x2 LUT written red-fastest, with white probed mid-grid."""
    return make_cube_text(
        corner_rows(AxisOrder.B_SLOWEST), header="DOMAIN_MAX 1.0 1.0 0.5"
    )


@pytest.fixture
def r_slowest_corner_text() -> str:
    """2x2x2 LUT written blue-fastest, with white probed mid-grid."""
    return make_cube_text(
        corner_rows(AxisOrder.R_SLOWEST), header="DOMAIN_MAX 1.0 1.0 0.5"
    )


@pytest.fixture
def identity_grid() -> LutGrid:
    """17x17x17 identity grid."""
    return LutGenerator(17).identity()
