"""Scene module for objects, intersections and shading.

Components:
    object: Shapes placed in the world with a transform and a material
    intersection: Intersection records and sorted per-ray intersection lists
    light: Point light source
    world: The world and its recursive shading
    showcase: Ready-made scenes

Example:
    >>> from whitted.scene import default_world
    >>> world = default_world()
    >>> len(world.objects)
    2
"""

from whitted.scene.intersection import (
    Intersection,
    Intersections,
    make_intersection,
    schlick,
)
from whitted.scene.light import PointLight
from whitted.scene.object import SceneObject, plane, sphere
from whitted.scene.world import World, default_world

# Note: showcase is NOT imported here to avoid circular imports with the camera.
# Import it directly from whitted.scene.showcase when needed.

__all__ = [
    # Intersections
    "Intersection",
    "Intersections",
    "make_intersection",
    "schlick",
    # Objects and lights
    "SceneObject",
    "sphere",
    "plane",
    "PointLight",
    # World
    "World",
    "default_world",
]
