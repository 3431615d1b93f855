"""Unit tests for image export.

Tests cover:
- Float to 8-bit conversion
- Plain-text PPM encoding
- Writing PPM and PNG files
"""

import numpy as np
import pytest
from PIL import Image as PILImage

from whitted.core.colour import Colour
from whitted.preview.canvas import Canvas
from whitted.preview.export import (
    canvas_to_ppm,
    image_to_uint8,
    save_image,
    save_png,
    save_png_from_array,
    save_ppm,
)


class TestImageToUint8:
    """Tests for float to 8-bit conversion."""

    def test_clamps_and_rounds(self):
        """Values are clamped then rounded half up."""
        image = np.array([[[-0.5, 0.5, 2.0]]])
        assert image_to_uint8(image).tolist() == [[[0, 128, 255]]]

    def test_dtype_and_shape(self):
        """The output keeps the input shape."""
        out = image_to_uint8(np.zeros((4, 5, 3), dtype=np.float32))
        assert out.dtype == np.uint8
        assert out.shape == (4, 5, 3)


class TestPPM:
    """Tests for PPM encoding."""

    def test_header(self):
        """The header names the format, size and maximum value."""
        ppm = canvas_to_ppm(Canvas(5, 3))
        assert ppm.splitlines()[:3] == ["P3", "5 3", "255"]

    def test_single_pixel(self):
        """A colour is scaled to 0..255 and rounded."""
        canvas = Canvas(1, 1)
        canvas.write_pixel(0, 0, Colour(0.4947756324442701, 0.17761176549281493, 0.6089546245467938))
        assert canvas_to_ppm(canvas) == "P3\n1 1\n255\n126 45 155\n"

    def test_dark_pixel(self):
        """Small values round to the nearest step."""
        canvas = Canvas(1, 1)
        canvas.write_pixel(0, 0, Colour(0.078, 0.028, 0.096))
        assert canvas_to_ppm(canvas) == "P3\n1 1\n255\n20 7 24\n"

    def test_one_line_per_row(self):
        """Each image row is one line, with out-of-range values clamped."""
        canvas = Canvas(5, 3)
        canvas.write_pixel(0, 0, Colour(1.5, 0, 0))
        canvas.write_pixel(2, 1, Colour(0, 0.5, 0))
        canvas.write_pixel(4, 2, Colour(-0.5, 0, 1))
        lines = canvas_to_ppm(canvas).splitlines()
        assert lines[3] == "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0"
        assert lines[4] == "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0"
        assert lines[5] == "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255"

    def test_ends_with_newline(self):
        """The file ends with a newline."""
        assert canvas_to_ppm(Canvas(5, 3)).endswith("\n")


class TestSaveFiles:
    """Tests for writing image files."""

    def test_save_ppm(self, tmp_path):
        """A PPM file holds the encoded text."""
        canvas = Canvas(2, 2, fill=Colour(1, 0, 0))
        path = tmp_path / "out.ppm"
        save_ppm(canvas, path)
        assert path.read_text() == canvas_to_ppm(canvas)

    def test_save_png(self, tmp_path):
        """A PNG reads back with the same 8-bit pixels."""
        canvas = Canvas(3, 2)
        canvas.write_pixel(1, 0, Colour(0.0, 1.0, 0.0))
        path = tmp_path / "out.png"
        save_png(canvas, path)
        with PILImage.open(path) as img:
            assert img.size == (3, 2)
            assert img.mode == "RGB"
            data = np.asarray(img)
        np.testing.assert_array_equal(data, canvas.to_bytes())

    def test_save_png_from_array(self, tmp_path):
        """Arrays can be saved without a canvas."""
        path = tmp_path / "array.png"
        save_png_from_array(np.full((2, 4, 3), 0.5), path)
        with PILImage.open(path) as img:
            assert np.asarray(img)[0, 0].tolist() == [128, 128, 128]

    @pytest.mark.parametrize("name", ["frame.ppm", "frame.PNG"])
    def test_save_image_by_extension(self, tmp_path, name):
        """save_image picks the format from the extension."""
        path = tmp_path / name
        save_image(Canvas(2, 2), path)
        assert path.exists()

    def test_save_image_unknown_extension(self, tmp_path):
        """Unsupported extensions are rejected."""
        with pytest.raises(ValueError, match="Unsupported"):
            save_image(Canvas(2, 2), tmp_path / "frame.jpg")
