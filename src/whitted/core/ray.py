"""Ray data structure.

A ray is a point of origin plus a direction vector. Positions along the ray
are ``origin + direction * t``; negative ``t`` lies behind the origin.

Example:
    >>> from whitted.core.ray import make_ray
    >>> from whitted.core.vector import point, vector
    >>> ray = make_ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.position(2.5)
    point(4.5, 3, 4)
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.matrix import Matrix
from whitted.core.vector import Vec4


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector. Not required to be normalized;
            object-space rays are generally not unit length.
    """

    origin: Vec4
    direction: Vec4

    def position(self, t: float) -> Vec4:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply a transform to both origin and direction."""
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)


def make_ray(origin: Vec4, direction: Vec4) -> Ray:
    """Create a ray, checking that origin is a point and direction a vector.

    Raises:
        ValueError: If the arguments have the wrong homogeneous kind.
    """
    if not origin.is_point:
        raise ValueError(f"Ray origin must be a point, got {origin!r}")
    if not direction.is_vector:
        raise ValueError(f"Ray direction must be a vector, got {direction!r}")
    return Ray(origin=origin, direction=direction)
