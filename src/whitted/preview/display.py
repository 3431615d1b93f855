"""Matplotlib-based preview of rendered canvases.

Example:
    >>> from whitted.preview.display import show_preview
    >>> show_preview(canvas, title="Reflections")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from whitted.preview.canvas import Canvas


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Apply gamma encoding ``out = in^(1/gamma)`` after clamping to [0, 1].

    A gamma of 1.0 leaves the values untouched.
    """
    if gamma <= 0.0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    if gamma == 1.0:
        return image

    # Clamp to [0, 1] before gamma to avoid NaN from negative values
    image = np.clip(image, 0.0, 1.0)
    return np.power(image, 1.0 / gamma).astype(np.float32)


def process_image_for_display(
    image: npt.NDArray[np.float32],
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Gamma-encode and clamp a linear image to the displayable [0, 1] range.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma correction value (1.0 keeps the renderer's linear output,
            which is also what the exporters write).

    Returns:
        A float32 copy in [0, 1].
    """
    result = apply_gamma(np.array(image, dtype=np.float32), gamma)
    return np.clip(result, 0.0, 1.0).astype(np.float32)


def show_preview(
    canvas: Canvas,
    *,
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a canvas in a Matplotlib figure.

    Args:
        canvas: The rendered canvas.
        gamma: Gamma correction value.
        title: Figure title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = process_image_for_display(canvas.to_numpy(), gamma=gamma)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)
