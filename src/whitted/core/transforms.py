"""Affine transform builders.

Every builder is a pure function returning a 4x4 ``Matrix``. Transforms are
combined by matrix multiplication only: ``(a @ b) @ p`` applies ``b`` to the
point first and ``a`` second. ``chain`` composes in application order, which
reads more naturally when building scenes.

Example:
    >>> import math
    >>> from whitted.core.transforms import chain, rotation_x, scaling, translation
    >>> t = chain(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
"""

from __future__ import annotations

import math
from functools import reduce

from whitted.core.matrix import Matrix
from whitted.core.vector import Vec4, cross, normalize


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotate about the x axis (left-handed, clockwise looking toward -x)."""
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Build a shear matrix.

    Each argument moves one component in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Vec4, to_point: Vec4, up: Vec4) -> Matrix:
    """Build the world-to-eye transform for an eye looking from ``from_point``.

    Args:
        from_point: Eye position (point).
        to_point: Point the eye looks at.
        up: Approximate up direction (vector); need not be normalized or
            exactly perpendicular to the view direction.

    Returns:
        The orientation matrix composed with a translation of ``-from_point``.

    Raises:
        ValueError: If ``from_point`` equals ``to_point`` or ``up`` is the
            zero vector.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


def chain(*transforms: Matrix) -> Matrix:
    """Compose transforms given in the order they should be applied.

    ``chain(a, b, c)`` equals ``c @ b @ a``. With no arguments the identity is
    returned.
    """
    return reduce(lambda acc, t: t @ acc, transforms, Matrix.identity(4))
