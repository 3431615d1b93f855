"""Core module for the linear algebra and ray primitives.

Components:
    vector: Homogeneous 4-tuples (points and vectors) and their operations
    matrix: Square matrices with cofactor determinant and inverse
    transforms: Affine transform builders and the view transform
    colour: Unclamped RGB colours
    ray: Rays with position and transform
    config: Render settings
    render: Band-parallel render loop

Example:
    >>> from whitted.core import point, vector, translation
    >>> translation(5, -3, 2) @ point(-3, 4, 5)
    point(2, 1, 7)
"""

from whitted.core.colour import Colour
from whitted.core.config import DEFAULT_MAX_DEPTH, RenderSettings
from whitted.core.matrix import Matrix, SingularMatrixError
from whitted.core.ray import Ray, make_ray
from whitted.core.transforms import (
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from whitted.core.vector import (
    EPSILON,
    ORIGIN,
    Vec4,
    cross,
    dot,
    float_eq,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)

# Note: render is NOT imported here to avoid circular imports.
# Import it directly from whitted.core.render when needed.

__all__ = [
    # Vectors
    "EPSILON",
    "ORIGIN",
    "Vec4",
    "point",
    "vector",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "reflect",
    "float_eq",
    # Matrices and transforms
    "Matrix",
    "SingularMatrixError",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "chain",
    # Colour and rays
    "Colour",
    "Ray",
    "make_ray",
    # Settings
    "RenderSettings",
    "DEFAULT_MAX_DEPTH",
]
