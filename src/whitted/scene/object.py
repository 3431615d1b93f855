"""Renderable objects: a shape placed in the world with a material.

Shapes are defined in a canonical object space (unit sphere, x-z plane). A
``SceneObject`` maps world-space queries into that space with the inverse
of its transform:

    - intersect: the world ray is transformed by the inverse and the shape's
      local formula is applied. Ray parameters are unchanged by the mapping,
      so local distances are world distances.
    - normal_at: the world point is mapped to object space, the local normal
      is computed, and it is carried back to world space with the
      inverse-transpose (correct under non-uniform scaling).

Objects compare by value (shape, transform, material).

Example:
    >>> from whitted.core.transforms import scaling
    >>> from whitted.geometry.shape import ShapeKind
    >>> from whitted.scene.object import SceneObject
    >>> big_sphere = SceneObject(ShapeKind.SPHERE, transform=scaling(2, 2, 2))
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import TYPE_CHECKING

from whitted.core.colour import Colour
from whitted.core.matrix import Matrix
from whitted.core.ray import Ray
from whitted.core.vector import Vec4, normalize
from whitted.geometry.shape import ShapeKind, local_intersect, local_normal_at
from whitted.materials.material import Material
from whitted.materials.phong import lighting
from whitted.scene.intersection import Intersections, make_intersection

if TYPE_CHECKING:
    from whitted.scene.light import PointLight


@dataclass(frozen=True)
class SceneObject:
    """A shape with an object-to-world transform and a material.

    Attributes:
        shape: Which canonical shape this object is.
        transform: Object-to-world transform.
        material: Surface material.
    """

    shape: ShapeKind
    transform: Matrix = field(default_factory=Matrix.identity)
    material: Material = field(default_factory=Material)

    @cached_property
    def inverse_transform(self) -> Matrix:
        """World-to-object transform.

        Raises:
            SingularMatrixError: If the transform is not invertible.
        """
        return self.transform.inverse()

    @cached_property
    def normal_transform(self) -> Matrix:
        return self.inverse_transform.transpose()

    def with_material(self, **changes) -> SceneObject:
        """Return a copy with some material fields replaced."""
        return replace(self, material=replace(self.material, **changes))

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this object."""
        local_ray = ray.transform(self.inverse_transform)
        distances = local_intersect(self.shape, local_ray)
        return Intersections(make_intersection(ray, self, t) for t in distances)

    def normal_at(self, world_point: Vec4) -> Vec4:
        """Unit world-space surface normal at a point on the object."""
        object_point = self.inverse_transform @ world_point
        object_normal = local_normal_at(self.shape, object_point)
        world_normal = self.normal_transform @ object_normal
        # The transpose carries the translation row into w
        return normalize(Vec4(world_normal.x, world_normal.y, world_normal.z, 0.0))

    def lighting(
        self,
        light: PointLight,
        point: Vec4,
        eyev: Vec4,
        normalv: Vec4,
        in_shadow: bool,
    ) -> Colour:
        return lighting(self, light, point, eyev, normalv, in_shadow)


def sphere(transform: Matrix | None = None, material: Material | None = None) -> SceneObject:
    return SceneObject(ShapeKind.SPHERE, transform or Matrix.identity(), material or Material())


def plane(transform: Matrix | None = None, material: Material | None = None) -> SceneObject:
    return SceneObject(ShapeKind.PLANE, transform or Matrix.identity(), material or Material())
