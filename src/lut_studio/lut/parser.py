# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Decoder for the .cube 3D LUT text format."""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from pathlib import Path

from lut_studio.errors import FormatError

from .axis_order import detect_axis_order
from .grid import DEFAULT_DOMAIN_MAX, DEFAULT_DOMAIN_MIN, LutGrid

logger = logging.getLogger(__name__)

DEFAULT_LUT_SIZE = 33

_NUMBER = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")


def _is_number(token: str) -> bool:
    return _NUMBER.match(token) is not None


def _parse_floats(keyword: str, tokens: list[str], count: int) -> list[float]:
    """Parse the ``count`` tokens following a keyword as finite floats."""
    values = tokens[1 : count + 1]
    if len(values) < count:
        raise FormatError(
            f"{keyword} needs {count} values, got {len(values)}"
        )

    if not all(_is_number(v) for v in values):
        raise FormatError(f"{keyword} has non-numeric values: {' '.join(values)}")

    floats = [float(v) for v in values]
    if not all(math.isfinite(v) for v in floats):
        raise FormatError(f"{keyword} has non-finite values: {' '.join(values)}")
    return floats


def _parse_size(tokens: list[str]) -> int:
    if len(tokens) < 2:
        raise FormatError("LUT_3D_SIZE is missing its value")

    try:
        size = int(tokens[1])
    except ValueError as e:
        raise FormatError(f"Invalid LUT_3D_SIZE: {tokens[1]!r}") from e

    if size < 1:
        raise FormatError(f"LUT_3D_SIZE must be positive, got {size}")
    return size


def parse_cube(text: str) -> LutGrid:
    """Parse .cube text into a LUT grid.

    Keywords are matched first; only lines of exactly three numeric tokens
    are taken as data rows. The axis order is left at its default, use
    ``decode`` to have it detected.

    Args:
        text: Contents of a .cube file

    Returns:
        Parsed LUT grid

    Raises:
        FormatError: If a directive is malformed or the entry count is not size**3
    """
    size = DEFAULT_LUT_SIZE
    title = ""
    domain_min = list(DEFAULT_DOMAIN_MIN)
    domain_max = list(DEFAULT_DOMAIN_MAX)
    rows: list[list[float]] = []

    # Text decoded without utf-8-sig keeps the byte order mark
    text = text.removeprefix("\ufeff")

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        tokens = line.split()
        keyword = tokens[0].upper()

        if keyword == "TITLE":
            title = line[len(tokens[0]) :].strip().strip("\"'")
        elif keyword == "LUT_3D_SIZE":
            size = _parse_size(tokens)
        elif keyword == "DOMAIN_MIN":
            domain_min = _parse_floats(keyword, tokens, 3)
        elif keyword == "DOMAIN_MAX":
            domain_max = _parse_floats(keyword, tokens, 3)
        elif keyword == "LUT_3D_INPUT_RANGE":
            low, high = _parse_floats(keyword, tokens, 2)
            domain_min = [low] * 3
            domain_max = [high] * 3
        elif keyword == "LUT_1D_SIZE":
            raise FormatError("1D LUTs are not supported")
        elif len(tokens) == 3 and all(_is_number(t) for t in tokens):
            row = [float(t) for t in tokens]
            if not all(math.isfinite(v) for v in row):
                raise FormatError(
                    f"Non-finite color entry on line {line_number}: {line}"
                )
            rows.append(row)
        else:
            logger.debug(f"Skipping unrecognized line {line_number}: {line}")

    expected = size**3
    if len(rows) != expected:
        raise FormatError("entry count mismatch", expected=expected, actual=len(rows))

    logger.debug(f"Parsed {size}x{size}x{size} LUT {title!r} ({len(rows)} entries)")

    return LutGrid(
        size=size,
        samples=rows,
        title=title,
        domain_min=tuple(domain_min),  # type: ignore[arg-type]
        domain_max=tuple(domain_max),  # type: ignore[arg-type]
    )


def decode(text: str) -> LutGrid:
    """Parse .cube text and resolve its axis order.

    Args:
        text: Contents of a .cube file

    Returns:
        LUT grid ready for lookups

    Raises:
        FormatError: If the text is malformed or inconsistent
    """
    grid = parse_cube(text)
    return dataclasses.replace(grid, axis_order=detect_axis_order(grid))


def load_cube(path: str | Path) -> LutGrid:
    """Read and decode a .cube file.

    Args:
        path: Path to the .cube file

    Returns:
        LUT grid ready for lookups

    Raises:
        OSError: If the file cannot be read
        FormatError: If the contents are malformed or inconsistent
    """
    text = Path(path).read_text(encoding="utf-8-sig")
    logger.debug(f"Read {len(text)} characters from {path}")
    return decode(text)
