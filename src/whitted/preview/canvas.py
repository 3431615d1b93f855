"""Taichi-backed pixel buffer used as the render loop's output sink.

The canvas stores linear, unclamped colours in a Taichi vector field of shape
(width, height). Pixels are written one at a time with ``write_pixel`` or a
whole band of rows at once with ``write_rows``; encoding to 8-bit (clamp to
[0, 1], scale to 0..255, round) runs as a Taichi kernel over every pixel.

Taichi must be initialised (``ti.init``) before a canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.core.colour import Colour
    >>> from whitted.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, Colour(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    Colour(1, 0, 0)
"""

# No postponed annotations: Taichi reads kernel parameter types at decoration time
import numpy as np
import numpy.typing as npt
import taichi as ti

from whitted.core.colour import Colour

# Largest supported image side, matching typical render-target limits
MAX_CANVAS_SIZE = 8192


@ti.kernel
def _fill(buffer: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in buffer:
        buffer[i, j] = ti.Vector([r, g, b])


@ti.kernel
def _write_rows(buffer: ti.template(), y_start: ti.i32, rows: ti.types.ndarray()):
    # rows has shape (band_height, width, 3)
    for j, i in ti.ndrange(rows.shape[0], rows.shape[1]):
        buffer[i, y_start + j] = ti.Vector([rows[j, i, 0], rows[j, i, 1], rows[j, i, 2]])


@ti.kernel
def _encode(buffer: ti.template(), out: ti.types.ndarray()):
    # out has shape (height, width, 3) and dtype uint8
    for i, j in buffer:
        c = ti.math.clamp(buffer[i, j], 0.0, 1.0)
        for k in ti.static(range(3)):
            out[j, i, k] = ti.cast(ti.floor(c[k] * 255.0 + 0.5), ti.u8)


class Canvas:
    """A width x height grid of colours.

    Attributes:
        width: Number of pixel columns.
        height: Number of pixel rows.
    """

    def __init__(self, width: int, height: int, fill: Colour | None = None) -> None:
        """Allocate the pixel field.

        Args:
            width: Image width in pixels (1..MAX_CANVAS_SIZE).
            height: Image height in pixels (1..MAX_CANVAS_SIZE).
            fill: Initial colour of every pixel (default black).

        Raises:
            ValueError: If a dimension is out of range.
        """
        for name, value in (("width", width), ("height", height)):
            if not 1 <= value <= MAX_CANVAS_SIZE:
                raise ValueError(f"{name} = {value} must be in [1, {MAX_CANVAS_SIZE}]")

        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        if fill is not None:
            _fill(self._pixels, fill.red, fill.green, fill.blue)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self._width}x{self._height} canvas")

    def write_pixel(self, x: int, y: int, colour: Colour) -> None:
        self._check_bounds(x, y)
        self._pixels[x, y] = list(colour.to_tuple())

    def pixel_at(self, x: int, y: int) -> Colour:
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Colour(float(value[0]), float(value[1]), float(value[2]))

    def write_rows(self, y_start: int, rows: npt.NDArray[np.floating]) -> None:
        """Write a band of whole rows.

        Args:
            y_start: Index of the first row in the band.
            rows: Colours of shape (band_height, width, 3).

        Raises:
            ValueError: If the band does not fit the canvas.
        """
        rows = np.ascontiguousarray(rows, dtype=np.float32)
        if rows.ndim != 3 or rows.shape[1:] != (self._width, 3):
            raise ValueError(f"Expected rows of shape (n, {self._width}, 3), got {rows.shape}")
        if y_start < 0 or y_start + rows.shape[0] > self._height:
            raise ValueError(
                f"Rows {y_start}..{y_start + rows.shape[0]} do not fit height {self._height}"
            )
        if rows.shape[0] == 0:
            return
        _write_rows(self._pixels, y_start, rows)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Linear colours as an array of shape (height, width, 3)."""
        return np.ascontiguousarray(self._pixels.to_numpy().transpose(1, 0, 2))

    def to_bytes(self) -> npt.NDArray[np.uint8]:
        """Clamped 8-bit colours as an array of shape (height, width, 3)."""
        out = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        _encode(self._pixels, out)
        return out
