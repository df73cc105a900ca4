"""Image file I/O producing interleaved RGBA byte buffers."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import ImageLoadError

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> np.ndarray:
    """Load an image as an RGBA byte buffer.

    Args:
        path: Path to any image format Pillow can read

    Returns:
        C-contiguous uint8 array with shape (height, width, 4)

    Raises:
        ImageLoadError: If the file is missing or is not a readable image
    """
    try:
        with Image.open(path) as image:
            rgba = np.array(image.convert("RGBA"), dtype=np.uint8)
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Cannot read image {path}: {e}") from e

    logger.debug(f"Loaded {rgba.shape[1]}x{rgba.shape[0]} image from {path}")
    return np.ascontiguousarray(rgba)


def save_image(pixels: np.ndarray, path: str | Path) -> Path:
    """Save an RGBA or RGB byte buffer to an image file.

    The format is chosen from the file extension. Formats without alpha
    support (e.g. JPEG) get the alpha channel dropped.

    Args:
        pixels: uint8 array with shape (height, width, 3 or 4)
        path: Destination path

    Returns:
        Path that was written

    Raises:
        ImageLoadError: If the image cannot be written
    """
    path = Path(path)
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ImageLoadError(
            f"Expected (height, width, 3 or 4) pixels, got {pixels.shape}"
        )

    image = Image.fromarray(pixels)
    if path.suffix.lower() in (".jpg", ".jpeg") and image.mode == "RGBA":
        image = image.convert("RGB")

    try:
        image.save(path)
    except (OSError, ValueError) as e:
        raise ImageLoadError(f"Cannot write image {path}: {e}") from e

    logger.debug(f"Saved {pixels.shape[1]}x{pixels.shape[0]} image to {path}")
    return path


def default_output_path(directory: str | Path = ".") -> Path:
    """Get a timestamped output file name for a processed image."""
    return Path(directory) / f"lut_processed_{int(time.time() * 1000)}.png"
