"""Infinite plane primitive: the object-space x-z plane with normal +y."""

from __future__ import annotations

from whitted.core.ray import Ray
from whitted.core.vector import EPSILON, Vec4, vector

PLANE_NORMAL = vector(0.0, 1.0, 0.0)


def intersect_plane(ray: Ray) -> list[float]:
    """Solve origin.y + t * direction.y = 0.

    A ray whose direction has (nearly) no y component is parallel to the
    plane, or lies in it, and produces no intersections.
    """
    if abs(ray.direction.y) < EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def plane_normal(object_point: Vec4) -> Vec4:
    """The plane's normal is the same everywhere."""
    return PLANE_NORMAL
