"""Geometry module for the canonical shapes.

Each shape lives in its own object space:
    sphere: Unit sphere centred at the origin
    plane: The x-z plane with normal +y

Shapes are selected with ``ShapeKind``; ``local_intersect`` and
``local_normal_at`` dispatch to the formula for each kind.
"""

from whitted.geometry.plane import PLANE_NORMAL, intersect_plane, plane_normal
from whitted.geometry.shape import ShapeKind, local_intersect, local_normal_at
from whitted.geometry.sphere import intersect_sphere, sphere_normal

__all__ = [
    "ShapeKind",
    "local_intersect",
    "local_normal_at",
    "intersect_sphere",
    "sphere_normal",
    "intersect_plane",
    "plane_normal",
    "PLANE_NORMAL",
]
