# SPDX-FileCopyrightText: 2025 Fuse Technical Group
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests for LutProcessor."""

from unittest.mock import patch

import numpy as np
import pytest
from PIL import Image

from lut_studio.errors import FormatError, ImageLoadError, PreconditionError
from lut_studio.imaging import load_image
from lut_studio.lut.generator import LutGenerator
from lut_studio.lut.grid import AxisOrder
from lut_studio.lut.writer import format_cube, save_cube
from lut_studio.processor import LutProcessor


@pytest.fixture
def invert_cube(tmp_path):
    """Path to a 5x5x5 inverting .cube file."""
    grid = LutGenerator(5).apply_transform(lambda rgb: 1.0 - rgb, "Invert")
    return save_cube(grid, tmp_path / "invert.cube")


@pytest.fixture
def sample_image(tmp_path):
    """Path to a small RGBA PNG."""
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(6, 5, 4), dtype=np.uint8)
    path = tmp_path / "input.png"
    Image.fromarray(pixels).save(path)
    return path


class TestLutProcessor:
    """Test cases for LutProcessor class."""

    def test_init_defaults(self) -> None:
        """Test default initialization."""
        processor = LutProcessor()

        assert processor.workers == LutProcessor.DEFAULT_WORKERS
        assert processor.axis_order is None
        assert processor.grid is None
        assert processor.has_lut is False

    def test_init_invalid_workers(self) -> None:
        """Test workers must be positive."""
        with pytest.raises(ValueError, match="Workers must be at least 1"):
            LutProcessor(workers=0)

    def test_load_lut(self, invert_cube) -> None:
        """Test loading a .cube file."""
        processor = LutProcessor()
        grid = processor.load_lut(invert_cube)

        assert processor.has_lut
        assert processor.grid is grid
        assert grid.size == 5
        assert grid.title == "Invert"

    def test_load_lut_wrong_extension(self, tmp_path) -> None:
        """Test non-.cube files are rejected."""
        path = tmp_path / "look.3dl"
        path.write_text("")

        with pytest.raises(ValueError, match="Expected a .cube file"):
            LutProcessor().load_lut(path)

    def test_failed_load_keeps_previous_lut(self, invert_cube, tmp_path) -> None:
        """Test a bad LUT does not replace the loaded one."""
        processor = LutProcessor()
        grid = processor.load_lut(invert_cube)
        bad = tmp_path / "bad.cube"
        bad.write_text("LUT_3D_SIZE 2\n0 0 0\n")

        with pytest.raises(FormatError):
            processor.load_lut(bad)

        assert processor.grid is grid

    def test_load_lut_text(self) -> None:
        """Test loading .cube text directly."""
        processor = LutProcessor()
        grid = processor.load_lut_text(format_cube(LutGenerator(3).identity()))

        assert grid.size == 3
        assert processor.get_status()["lut_path"] is None

    def test_forced_axis_order(self) -> None:
        """Test a forced axis order overrides detection."""
        processor = LutProcessor(axis_order=AxisOrder.R_SLOWEST)
        grid = processor.load_lut_text(format_cube(LutGenerator(3).identity()))

        assert grid.axis_order is AxisOrder.R_SLOWEST

    def test_apply_without_lut(self) -> None:
        """Test applying before loading a LUT fails."""
        with pytest.raises(PreconditionError, match="No LUT loaded"):
            LutProcessor().apply(bytearray(4))

    def test_apply_buffer(self, invert_cube) -> None:
        """Test in-place buffer transform."""
        processor = LutProcessor(workers=2)
        processor.load_lut(invert_cube)
        buffer = bytearray([0, 255, 0, 42, 255, 0, 255, 43])

        processor.apply(buffer)

        assert list(buffer) == [255, 0, 255, 42, 0, 255, 0, 43]

    def test_process_image(self, invert_cube, sample_image, tmp_path) -> None:
        """Test processing an image file end to end."""
        processor = LutProcessor()
        processor.load_lut(invert_cube)
        output = tmp_path / "out.png"

        result = processor.process_image(sample_image, output)

        assert result == output
        original = load_image(sample_image)
        processed = load_image(output)
        assert np.array_equal(processed[..., :3], 255 - original[..., :3])
        assert np.array_equal(processed[..., 3], original[..., 3])

    def test_process_image_default_output(
        self, invert_cube, sample_image, tmp_path
    ) -> None:
        """Test the default output path is used when none is given."""
        processor = LutProcessor()
        processor.load_lut(invert_cube)
        default = tmp_path / "lut_processed_1.png"

        with patch(
            "lut_studio.processor.default_output_path", return_value=default
        ):
            result = processor.process_image(sample_image)

        assert result == default
        assert default.exists()

    def test_process_image_without_lut(self, sample_image) -> None:
        """Test processing before loading a LUT fails."""
        with pytest.raises(PreconditionError):
            LutProcessor().process_image(sample_image)

    def test_process_missing_image(self, invert_cube, tmp_path) -> None:
        """Test missing images raise ImageLoadError."""
        processor = LutProcessor()
        processor.load_lut(invert_cube)

        with pytest.raises(ImageLoadError):
            processor.process_image(tmp_path / "missing.png", tmp_path / "out.png")

    def test_get_status(self, invert_cube) -> None:
        """Test status reporting."""
        processor = LutProcessor(workers=3)
        assert processor.get_status() == {
            "has_lut": False,
            "lut_path": None,
            "workers": 3,
            "forced_axis_order": None,
        }

        processor.load_lut(invert_cube)
        status = processor.get_status()

        assert status["has_lut"] is True
        assert status["lut_path"] == str(invert_cube)
        assert status["lut"]["size"] == 5
        assert status["lut"]["title"] == "Invert"
        assert status["lut"]["entries"] == 125
