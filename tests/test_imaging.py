"""Tests for image file I/O."""

import numpy as np
import pytest
from PIL import Image

from lut_studio.errors import ImageLoadError
from lut_studio.imaging import default_output_path, load_image, save_image


class TestLoadImage:
    """Test cases for load_image."""

    def test_rgb_png_gets_opaque_alpha(self, tmp_path) -> None:
        """Test RGB images are expanded to RGBA."""
        path = tmp_path / "rgb.png"
        Image.new("RGB", (3, 2), (10, 20, 30)).save(path)

        pixels = load_image(path)

        assert pixels.shape == (2, 3, 4)
        assert pixels.dtype == np.uint8
        assert pixels.flags.c_contiguous
        assert np.all(pixels[..., :3] == [10, 20, 30])
        assert np.all(pixels[..., 3] == 255)

    def test_rgba_png_keeps_alpha(self, tmp_path) -> None:
        """Test alpha is loaded unchanged."""
        path = tmp_path / "rgba.png"
        Image.new("RGBA", (2, 2), (1, 2, 3, 99)).save(path)

        assert np.all(load_image(path)[..., 3] == 99)

    def test_missing_file(self, tmp_path) -> None:
        """Test missing file raises ImageLoadError."""
        with pytest.raises(ImageLoadError, match="Cannot read image"):
            load_image(tmp_path / "missing.png")

    def test_not_an_image(self, tmp_path) -> None:
        """Test non-image file raises ImageLoadError."""
        path = tmp_path / "notes.png"
        path.write_text("not an image")

        with pytest.raises(ImageLoadError):
            load_image(path)


class TestSaveImage:
    """Test cases for save_image."""

    def test_png_round_trip(self, tmp_path) -> None:
        """Test PNG output preserves RGBA bytes."""
        pixels = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
        path = save_image(pixels, tmp_path / "out.png")

        assert np.array_equal(load_image(path), pixels)

    def test_jpeg_drops_alpha(self, tmp_path) -> None:
        """Test JPEG output is written without alpha."""
        pixels = np.full((4, 4, 4), 200, dtype=np.uint8)
        path = save_image(pixels, tmp_path / "out.jpg")

        with Image.open(path) as image:
            assert image.mode == "RGB"

    def test_invalid_shape(self, tmp_path) -> None:
        """Test non-image arrays are rejected."""
        with pytest.raises(ImageLoadError, match="Expected"):
            save_image(np.zeros((4, 4), dtype=np.uint8), tmp_path / "out.png")

    def test_unknown_extension(self, tmp_path) -> None:
        """Test unknown formats raise ImageLoadError."""
        pixels = np.zeros((2, 2, 4), dtype=np.uint8)

        with pytest.raises(ImageLoadError, match="Cannot write image"):
            save_image(pixels, tmp_path / "out.unknownformat")


class TestDefaultOutputPath:
    """Test cases for default_output_path."""

    def test_timestamped_png(self, tmp_path) -> None:
        """Test default name pattern."""
        path = default_output_path(tmp_path)

        assert path.parent == tmp_path
        assert path.name.startswith("lut_processed_")
        assert path.suffix == ".png"
