"""Shape kinds and local-space dispatch.

The set of shapes is closed, so a shape is a tag rather than a class
hierarchy. ``local_intersect`` and ``local_normal_at`` dispatch on the tag to
the per-primitive formulas, which all work in the shape's canonical object
space.
"""

from __future__ import annotations

from enum import Enum

from whitted.core.ray import Ray
from whitted.core.vector import Vec4
from whitted.geometry.plane import intersect_plane, plane_normal
from whitted.geometry.sphere import intersect_sphere, sphere_normal


class ShapeKind(Enum):
    """Supported primitive shapes."""

    SPHERE = "sphere"
    PLANE = "plane"


def local_intersect(kind: ShapeKind, ray: Ray) -> list[float]:
    """Intersect an object-space ray with the canonical shape.

    Returns:
        Ray parameters of every crossing, in ascending order.

    Raises:
        ValueError: If ``kind`` is not a ShapeKind.
    """
    if kind is ShapeKind.SPHERE:
        return intersect_sphere(ray)
    elif kind is ShapeKind.PLANE:
        return intersect_plane(ray)
    raise ValueError(f"Unknown shape kind: {kind!r}")


def local_normal_at(kind: ShapeKind, object_point: Vec4) -> Vec4:
    """Unnormalized outward normal of the canonical shape at a point."""
    if kind is ShapeKind.SPHERE:
        return sphere_normal(object_point)
    elif kind is ShapeKind.PLANE:
        return plane_normal(object_point)
    raise ValueError(f"Unknown shape kind: {kind!r}")
