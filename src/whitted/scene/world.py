"""The world: one point light, an ordered list of objects, and shading.

Shading is recursive. A primary ray's colour is the local Phong colour at its
hit plus the colours of a reflected ray and a refracted ray, each traced with
one less unit of the ``remaining`` depth budget:

    colour_at(ray, n)
      -> shade_hit(hit, n)
           local      = lighting(over_point, is_shadowed(over_point))
           reflected  = colour_at(reflect ray, n - 1) * reflective    (n > 0)
           refracted  = colour_at(refract ray, n - 1) * transparency  (n > 0)

When a material both reflects and transmits, the two contributions are
weighted by the Schlick reflectance instead of simply added. The depth budget
is the only thing that stops recursion between facing mirrors, so it is an
explicit argument on every step.

Example:
    >>> from whitted.core.ray import make_ray
    >>> from whitted.core.vector import point, vector
    >>> from whitted.scene.world import default_world
    >>> world = default_world()
    >>> world.colour_at(make_ray(point(0, 0, -5), vector(0, 0, 1)), remaining=5)
    Colour(0.38066, 0.47583, 0.2855)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from whitted.core.colour import Colour
from whitted.core.ray import Ray
from whitted.core.transforms import scaling
from whitted.core.vector import Vec4, dot, float_eq, magnitude, normalize, point
from whitted.materials.material import Material
from whitted.scene.intersection import Intersection, Intersections, schlick
from whitted.scene.light import PointLight
from whitted.scene.object import SceneObject, sphere


@dataclass(frozen=True)
class World:
    """A light and the objects it illuminates.

    Attributes:
        light: The single point light.
        objects: Objects in the scene. Order only matters for crossings at
            identical distances.
    """

    light: PointLight
    objects: tuple[SceneObject, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "objects", tuple(self.objects))

    def with_objects(self, *objects: SceneObject) -> World:
        """Return a world with the given objects appended."""
        return replace(self, objects=self.objects + objects)

    def with_light(self, light: PointLight) -> World:
        return replace(self, light=light)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every object, sorted and index-annotated."""
        return Intersections.merge(*(obj.intersect(ray) for obj in self.objects))

    def is_shadowed(self, world_point: Vec4) -> bool:
        """Whether anything lies strictly between the point and the light."""
        to_light = self.light.position - world_point
        distance = magnitude(to_light)
        shadow_ray = Ray(origin=world_point, direction=normalize(to_light))
        hit = self.intersect(shadow_ray).hit()
        return hit is not None and hit.distance < distance

    def shade_hit(self, comps: Intersection, remaining: int) -> Colour:
        """Colour at an index-annotated hit.

        Args:
            comps: The hit, taken from an Intersections list.
            remaining: Recursion budget for reflected/refracted rays.
        """
        shadowed = self.is_shadowed(comps.over_point)
        surface = comps.obj.lighting(
            self.light, comps.over_point, comps.eyev, comps.normalv, shadowed
        )

        reflected = self.reflected_colour(comps, remaining)
        refracted = self.refracted_colour(comps, remaining)

        material = comps.obj.material
        if material.reflective > 0.0 and material.transparency > 0.0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1.0 - reflectance)
        return surface + reflected + refracted

    def colour_at(self, ray: Ray, remaining: int) -> Colour:
        """Colour seen along a ray; black when it hits nothing."""
        hit = self.intersect(ray).hit()
        if hit is None:
            return Colour.black()
        return self.shade_hit(hit, remaining)

    def reflected_colour(self, comps: Intersection, remaining: int) -> Colour:
        """Contribution of the mirror-reflected ray at a hit."""
        reflective = comps.obj.material.reflective
        if remaining <= 0 or float_eq(reflective, 0.0):
            return Colour.black()

        reflect_ray = Ray(origin=comps.over_point, direction=comps.reflectv)
        return self.colour_at(reflect_ray, remaining - 1) * reflective

    def refracted_colour(self, comps: Intersection, remaining: int) -> Colour:
        """Contribution of the transmitted ray at a hit (Snell's law).

        Returns black under total internal reflection; the reflected term
        then carries all of the light.
        """
        transparency = comps.obj.material.transparency
        if remaining <= 0 or float_eq(transparency, 0.0):
            return Colour.black()

        n_ratio = comps.n1 / comps.n2
        cos_i = dot(comps.eyev, comps.normalv)
        sin2_t = n_ratio**2 * (1.0 - cos_i**2)
        if sin2_t > 1.0:
            return Colour.black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(origin=comps.under_point, direction=direction)
        return self.colour_at(refract_ray, remaining - 1) * transparency


def default_world() -> World:
    """The standard two-sphere test world.

    A white light at (-10, 10, -10), a unit sphere with colour
    (0.8, 1.0, 0.6), diffuse 0.7 and specular 0.2, and a concentric sphere
    of radius 0.5 with the default material.
    """
    light = PointLight(point(-10.0, 10.0, -10.0), Colour.white())
    outer = sphere(
        material=Material(colour=Colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = sphere(transform=scaling(0.5, 0.5, 0.5))
    return World(light=light, objects=(outer, inner))
