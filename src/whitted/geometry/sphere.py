"""Unit sphere primitive.

The sphere is centred on the object-space origin with radius 1. Placement and
size come from the owning object's transform, so these formulas only ever see
the canonical sphere.

The ray-sphere intersection solves:
    |origin + t * direction|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with:
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - ORIGIN)
    c = dot(origin - ORIGIN, origin - ORIGIN) - 1
"""

from __future__ import annotations

import math

from whitted.core.ray import Ray
from whitted.core.vector import ORIGIN, Vec4, dot


def intersect_sphere(ray: Ray) -> list[float]:
    """Find where an object-space ray crosses the unit sphere.

    Args:
        ray: The ray in object space.

    Returns:
        An empty list if the ray misses; otherwise both roots ``[t1, t2]``
        with ``t1 <= t2``. A tangent ray yields two equal roots and a ray
        starting inside the sphere yields a negative first root.
    """
    sphere_to_ray = ray.origin - ORIGIN

    a = dot(ray.direction, ray.direction)
    b = 2.0 * dot(ray.direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)
    return [t1, t2]


def sphere_normal(object_point: Vec4) -> Vec4:
    """Outward normal of the unit sphere at an object-space point."""
    return object_point - ORIGIN
