# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Color transform engine."""

from .interpolation import remap_domain, sample_grid, trilinear_lookup
from .apply import apply_grid, transform, transform_pixel

__all__ = [
    "apply_grid",
    "remap_domain",
    "sample_grid",
    "transform",
    "transform_pixel",
    "trilinear_lookup",
]
