# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Exception types raised by lut-studio."""

from __future__ import annotations


class LutError(Exception):
    """Base exception for LUT decoding and application."""

    pass


class FormatError(LutError):
    """Exception raised when .cube text is malformed or inconsistent."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ) -> None:
        """Initialize format error.

        Args:
            message: Human readable description
            expected: Expected entry count, for count mismatches
            actual: Actual entry count, for count mismatches
        """
        self.message = message
        self.expected = expected
        self.actual = actual
        if expected is not None and actual is not None:
            message = f"{message}: expected {expected} color entries, got {actual}"
        super().__init__(message)


class PreconditionError(LutError):
    """Exception raised when a pixel buffer or grid cannot be transformed."""

    pass


class ImageLoadError(LutError):
    """Exception raised when an image file cannot be read or written."""

    pass
