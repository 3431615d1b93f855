"""Phong local lighting model.

Computes the colour of a surface point lit by a single point light as the
sum of three terms:

    ambient  = effective * material.ambient
    diffuse  = effective * material.diffuse * dot(lightv, normalv)
    specular = light.intensity * material.specular * dot(reflectv, eyev)^shininess

where ``effective`` is the surface colour (pattern or flat colour) blended
channel by channel with the light's intensity. Shadowing is all-or-nothing:
a point in shadow receives the ambient term only.

The result is not clamped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitted.core.colour import Colour
from whitted.core.vector import Vec4, dot, normalize, reflect

if TYPE_CHECKING:
    from whitted.scene.light import PointLight
    from whitted.scene.object import SceneObject


def surface_colour(obj: SceneObject, world_point: Vec4) -> Colour:
    """Base colour of an object at a point: its pattern if any, else its flat colour."""
    material = obj.material
    if material.pattern is not None:
        return material.pattern.at_object(world_point, obj)
    return material.colour


def lighting(
    obj: SceneObject,
    light: PointLight,
    point: Vec4,
    eyev: Vec4,
    normalv: Vec4,
    in_shadow: bool,
) -> Colour:
    """Shade a point on an object with the Phong model.

    Args:
        obj: The object being shaded (supplies material and pattern space).
        light: The point light.
        point: World-space point being shaded.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point, facing the eye.
        in_shadow: Whether the light is occluded from ``point``.

    Returns:
        The unclamped lit colour.
    """
    material = obj.material
    effective = surface_colour(obj, point) * light.intensity
    ambient = effective * material.ambient

    if in_shadow:
        return ambient

    lightv = normalize(light.position - point)
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal < 0.0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective * (material.diffuse * light_dot_normal)

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0.0:
        specular = Colour.black()
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
