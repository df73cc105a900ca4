# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""LUT decoding, axis-order detection and generation."""

from .axis_order import detect_axis_order, score_axis_order
from .generator import LutGenerator
from .grid import AxisOrder, LutGrid
from .parser import decode, load_cube, parse_cube
from .writer import format_cube, save_cube

__all__ = [
    "AxisOrder",
    "LutGenerator",
    "LutGrid",
    "decode",
    "detect_axis_order",
    "format_cube",
    "load_cube",
    "parse_cube",
    "save_cube",
    "score_axis_order",
]
