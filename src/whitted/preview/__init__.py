"""Preview module for output and visualization.

Components:
    canvas: Taichi-backed pixel buffer written by the render loop
    export: PPM and PNG export
    display: Matplotlib-based preview display

Example:
    >>> from whitted.preview import save_image, show_preview
    >>> save_image(canvas, "render.png")
    >>> show_preview(canvas)
"""

from whitted.preview.canvas import MAX_CANVAS_SIZE, Canvas
from whitted.preview.display import apply_gamma, process_image_for_display, show_preview
from whitted.preview.export import (
    canvas_to_ppm,
    image_to_uint8,
    save_image,
    save_png,
    save_png_from_array,
    save_ppm,
)

__all__ = [
    # Canvas
    "Canvas",
    "MAX_CANVAS_SIZE",
    # Display functions
    "show_preview",
    "apply_gamma",
    "process_image_for_display",
    # Export functions
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "save_png_from_array",
    "save_image",
    "image_to_uint8",
]
