"""Unit tests for the Taichi-backed canvas.

Tests cover:
- Allocation, fill colour and size validation
- Writing and reading single pixels
- Bulk band writes
- Conversion to float and 8-bit numpy arrays
"""

import __future__

import numpy as np
import pytest

import whitted.preview.canvas as canvas_module
from whitted.core.colour import Colour
from whitted.preview.canvas import MAX_CANVAS_SIZE, Canvas


class TestCanvasBasics:
    """Tests for canvas allocation."""

    def test_new_canvas_is_black(self):
        """Every pixel starts black."""
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert np.all(canvas.to_numpy() == 0.0)

    def test_fill_colour(self):
        """A fill colour initialises every pixel."""
        canvas = Canvas(4, 3, fill=Colour(1.0, 0.5, 0.25))
        image = canvas.to_numpy()
        assert image.shape == (3, 4, 3)
        np.testing.assert_allclose(image[2, 3], [1.0, 0.5, 0.25])
        assert canvas.pixel_at(0, 0) == Colour(1.0, 0.5, 0.25)

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (MAX_CANVAS_SIZE + 1, 1)])
    def test_invalid_size(self, width, height):
        """Sizes outside [1, MAX_CANVAS_SIZE] are rejected."""
        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_kernel_annotations_are_live_objects(self):
        """Kernel parameter types are not postponed to strings."""
        feature = getattr(canvas_module, "annotations", None)
        assert not isinstance(feature, __future__._Feature)

    def test_kernels_run_on_new_canvas(self):
        """Fill, band write and encode kernels all compile and run."""
        canvas = Canvas(3, 2, fill=Colour(0.5, 0.5, 0.5))
        canvas.write_rows(1, np.ones((1, 3, 3)))
        encoded = canvas.to_bytes()
        assert encoded[0, 0].tolist() == [128, 128, 128]
        assert encoded[1, 2].tolist() == [255, 255, 255]


class TestCanvasPixels:
    """Tests for single-pixel access."""

    def test_write_and_read(self):
        """A written pixel reads back."""
        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, Colour(1.0, 0.0, 0.0))
        assert canvas.pixel_at(2, 3) == Colour(1.0, 0.0, 0.0)
        assert canvas.pixel_at(3, 2) == Colour.black()

    def test_unclamped_storage(self):
        """Pixels keep values outside [0, 1] until encoding."""
        canvas = Canvas(2, 2)
        canvas.write_pixel(0, 0, Colour(1.5, -0.5, 0.0))
        assert canvas.pixel_at(0, 0) == Colour(1.5, -0.5, 0.0)

    def test_row_major_layout(self):
        """to_numpy indexes [y, x]."""
        canvas = Canvas(3, 2)
        canvas.write_pixel(2, 1, Colour(0.0, 1.0, 0.0))
        image = canvas.to_numpy()
        np.testing.assert_allclose(image[1, 2], [0.0, 1.0, 0.0])

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds(self, x, y):
        """Coordinates outside the canvas raise IndexError."""
        canvas = Canvas(10, 20)
        with pytest.raises(IndexError):
            canvas.write_pixel(x, y, Colour.white())
        with pytest.raises(IndexError):
            canvas.pixel_at(x, y)


class TestCanvasBands:
    """Tests for bulk row writes."""

    def test_write_rows(self):
        """A band lands at its row offset."""
        canvas = Canvas(4, 5)
        band = np.zeros((2, 4, 3))
        band[:, :, 2] = 0.75
        canvas.write_rows(1, band)
        image = canvas.to_numpy()
        np.testing.assert_allclose(image[1:3, :, 2], 0.75)
        np.testing.assert_allclose(image[0], 0.0)
        np.testing.assert_allclose(image[3:], 0.0)

    def test_empty_band(self):
        """A zero-row band is a no-op."""
        canvas = Canvas(4, 5)
        canvas.write_rows(5, np.zeros((0, 4, 3)))
        assert np.all(canvas.to_numpy() == 0.0)

    def test_wrong_width(self):
        """A band must match the canvas width."""
        canvas = Canvas(4, 5)
        with pytest.raises(ValueError):
            canvas.write_rows(0, np.zeros((1, 3, 3)))

    def test_band_past_bottom(self):
        """A band must fit within the canvas height."""
        canvas = Canvas(4, 5)
        with pytest.raises(ValueError):
            canvas.write_rows(4, np.zeros((2, 4, 3)))


class TestCanvasEncoding:
    """Tests for 8-bit encoding."""

    def test_to_bytes_clamps_and_rounds(self):
        """Channels are clamped to [0, 1] and rounded to 0..255."""
        canvas = Canvas(3, 1)
        canvas.write_pixel(0, 0, Colour(1.5, 0.0, 0.0))
        canvas.write_pixel(1, 0, Colour(0.0, 0.5, 0.0))
        canvas.write_pixel(2, 0, Colour(-0.5, 0.0, 1.0))
        data = canvas.to_bytes()
        assert data.dtype == np.uint8
        assert data.shape == (1, 3, 3)
        assert data[0, 0].tolist() == [255, 0, 0]
        assert data[0, 1].tolist() == [0, 128, 0]
        assert data[0, 2].tolist() == [0, 0, 255]
