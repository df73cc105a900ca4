# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""LUT Studio - Apply .cube 3D LUTs to RGB(A) images.

Decodes .cube text, infers the sample ordering the file was written with and
maps pixels through the LUT with trilinear interpolation.

Simple usage:
    import lut_studio
    grid = lut_studio.decode(open("look.cube").read())
    lut_studio.transform(grid, rgba_bytes, 4)
"""

__version__ = "0.1.0"
__author__ = "Fuse Technical Group"

from .engine import apply_grid, transform, transform_pixel
from .errors import FormatError, ImageLoadError, LutError, PreconditionError
from .lut import AxisOrder, LutGrid, decode, detect_axis_order, load_cube
from .processor import LutProcessor

__all__ = [
    "AxisOrder",
    "FormatError",
    "ImageLoadError",
    "LutError",
    "LutGrid",
    "LutProcessor",
    "PreconditionError",
    "apply_grid",
    "decode",
    "detect_axis_order",
    "load_cube",
    "transform",
    "transform_pixel",
]
