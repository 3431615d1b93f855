"""Image export for rendered canvases.

Colours are clamped to [0, 1] and scaled to 0..255 only here, at the point
of serialization.

Supported formats:
    - PPM (plain-text P3)
    - PNG (8-bit via Pillow)

Example:
    >>> from whitted.preview.export import save_image
    >>> save_image(canvas, "render.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas

PPM_MAX_VALUE = 255


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a linear float image of shape (H, W, 3) to clamped 8-bit."""
    clamped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    return np.floor(clamped * PPM_MAX_VALUE + 0.5).astype(np.uint8)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain-text PPM (P3).

    Each image row becomes one line of space-separated channel values.
    """
    pixels = canvas.to_bytes()
    header = f"P3\n{canvas.width} {canvas.height}\n{PPM_MAX_VALUE}\n"
    rows = (" ".join(str(int(v)) for v in row.reshape(-1)) for row in pixels)
    return header + "\n".join(rows) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas as an 8-bit RGB PNG."""
    save_png_from_array(canvas.to_numpy(), filepath)


def save_png_from_array(image: npt.NDArray[np.floating], filepath: str | Path) -> None:
    """Save a linear float image of shape (H, W, 3) as an 8-bit RGB PNG."""
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(filepath)


def save_image(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas, choosing the format from the file extension.

    Raises:
        ValueError: If the extension is neither .ppm nor .png.
    """
    suffix = Path(filepath).suffix.lower()
    if suffix == ".ppm":
        save_ppm(canvas, filepath)
    elif suffix == ".png":
        save_png(canvas, filepath)
    else:
        raise ValueError(f"Unsupported image format: {suffix!r} (expected .ppm or .png)")
