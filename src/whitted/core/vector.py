"""Homogeneous 4-component tuples for points and vectors.

A ``Vec4`` carries ``(x, y, z, w)``. Points have ``w = 1`` and vectors have
``w = 0``, which lets both share one affine-transform representation:
translations move points but leave vectors untouched.

Equality is approximate (within ``EPSILON``) because every consumer compares
values that went through floating-point transforms.

Example:
    >>> from whitted.core.vector import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> (p + v).z
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Tolerance used for every approximate comparison in the renderer
EPSILON = 1e-5


def float_eq(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``EPSILON``."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Vec4:
    """A homogeneous coordinate tuple.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    @property
    def is_point(self) -> bool:
        return float_eq(self.w, 1.0)

    @property
    def is_vector(self) -> bool:
        return float_eq(self.w, 0.0)

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vec4:
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec4:
        return Vec4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return (
            float_eq(self.x, other.x)
            and float_eq(self.y, other.y)
            and float_eq(self.z, other.z)
            and float_eq(self.w, other.w)
        )

    # Approximate equality cannot be made consistent with hashing
    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self) -> str:
        kind = "point" if self.is_point else "vector" if self.is_vector else "Vec4"
        if kind == "Vec4":
            return f"Vec4({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"
        return f"{kind}({self.x:g}, {self.y:g}, {self.z:g})"

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return the components as a column-ready numpy array of shape (4,)."""
        return np.array((self.x, self.y, self.z, self.w), dtype=np.float64)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vec4:
        x, y, z, w = (float(v) for v in np.asarray(values, dtype=np.float64).reshape(4))
        return cls(x, y, z, w)


def point(x: float, y: float, z: float) -> Vec4:
    """Create a point (w = 1)."""
    return Vec4(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Vec4:
    """Create a vector (w = 0)."""
    return Vec4(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)


def dot(a: Vec4, b: Vec4) -> float:
    """Compute the four-component dot product a . b."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def magnitude(v: Vec4) -> float:
    """Compute the Euclidean length of a tuple."""
    return math.sqrt(dot(v, v))


def normalize(v: Vec4) -> Vec4:
    """Scale a tuple to unit length.

    Args:
        v: The tuple to normalize. Must have non-zero length.

    Returns:
        A tuple pointing the same way with magnitude 1.

    Raises:
        ValueError: If ``v`` has zero length.
    """
    length = magnitude(v)
    if length == 0.0:
        raise ValueError(f"Cannot normalize zero-length tuple {v!r}")
    return v / length


def cross(a: Vec4, b: Vec4) -> Vec4:
    """Compute the cross product a x b of two vectors.

    Raises:
        ValueError: If either operand is not a vector.
    """
    if not (a.is_vector and b.is_vector):
        raise ValueError(f"Cross product is only defined for vectors, got {a!r} and {b!r}")
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def reflect(incident: Vec4, normal: Vec4) -> Vec4:
    """Reflect an incident vector about a normal.

    Computes ``incident - normal * 2 * dot(incident, normal)``. The normal
    should be unit length for a length-preserving reflection.

    Raises:
        ValueError: If either operand is not a vector.
    """
    if not (incident.is_vector and normal.is_vector):
        raise ValueError(
            f"Reflection is only defined for vectors, got {incident!r} and {normal!r}"
        )
    return incident - normal * (2.0 * dot(incident, normal))
