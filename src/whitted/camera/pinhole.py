"""Pinhole camera model for perspective projection ray generation.

The camera sits at the origin of its own space looking down -z, with the image
plane one unit in front of it. ``transform`` is the view transform (world to
camera space), usually built with ``view_transform``; rays are generated in
camera space and carried into world space by its inverse.

The canvas spans ``hsize`` x ``vsize`` pixels. The field of view covers the
longer image side:

    half_view = tan(field_of_view / 2)
    aspect >= 1:  half_width = half_view,           half_height = half_view / aspect
    aspect <  1:  half_width = half_view * aspect,  half_height = half_view

Example:
    >>> import math
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.core.transforms import view_transform
    >>> from whitted.core.vector import point, vector
    >>> camera = Camera(
    ...     hsize=200,
    ...     vsize=100,
    ...     field_of_view=math.pi / 3,
    ...     transform=view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
    ... )
    >>> ray = camera.ray_for_pixel(100, 50)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import cached_property

from whitted.core.config import RenderSettings
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.render import ProgressCallback
from whitted.core.render import render as render_frame
from whitted.core.vector import ORIGIN, normalize, point
from whitted.preview.canvas import Canvas
from whitted.scene.world import World


@dataclass(frozen=True)
class Camera:
    """A pinhole camera.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle covered by the longer image side, in radians.
        transform: View transform from world space to camera space.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Matrix = field(default_factory=Matrix.identity)

    def __post_init__(self) -> None:
        if self.hsize < 1 or self.vsize < 1:
            raise ValueError(f"Camera size must be positive, got {self.hsize}x{self.vsize}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"field_of_view must be in (0, pi), got {self.field_of_view}")

    @cached_property
    def inverse_transform(self) -> Matrix:
        """Camera-to-world transform.

        Raises:
            SingularMatrixError: If the view transform is not invertible.
        """
        return self.transform.inverse()

    @cached_property
    def _half_extents(self) -> tuple[float, float]:
        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            return half_view, half_view / aspect
        return half_view * aspect, half_view

    @property
    def half_width(self) -> float:
        return self._half_extents[0]

    @property
    def half_height(self) -> float:
        return self._half_extents[1]

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the image plane (z = -1)."""
        return self.half_width * 2.0 / self.hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Primary ray through the centre of pixel (px, py).

        Args:
            px: Pixel column, 0 at the left.
            py: Pixel row, 0 at the top.

        Returns:
            A world-space ray with a normalized direction.
        """
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # Camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        inverse = self.inverse_transform
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ ORIGIN
        return Ray(origin=origin, direction=normalize(pixel - origin))

    def render(
        self,
        world: World,
        settings: RenderSettings | None = None,
        canvas: Canvas | None = None,
        progress: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the world through this camera.

        See ``whitted.core.render.render`` for the arguments.
        """
        return render_frame(self, world, settings=settings, canvas=canvas, progress=progress)
