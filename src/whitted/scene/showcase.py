"""Ready-made scenes for the example script and smoke tests.

Two scenes are provided:
    - patterns: a striped floor with three spheres carrying ring, gradient and
      checkers patterns (no reflection or refraction).
    - glass: a checkered floor, a mirror wall, a solid glass sphere with a
      hollow air bubble, and a coloured sphere seen through the glass.

Each factory returns ``(world, camera)`` for the requested image size.

Example:
    >>> from whitted.scene.showcase import create_patterns_scene
    >>> world, camera = create_patterns_scene(320, 180)
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import math
from collections.abc import Callable

from whitted.camera.pinhole import Camera
from whitted.core.colour import Colour
from whitted.core.transforms import (
    rotation_x,
    rotation_z,
    scaling,
    translation,
    view_transform,
)
from whitted.core.vector import point, vector
from whitted.materials.material import AIR, Material, glass
from whitted.materials.pattern import (
    checkers_pattern,
    gradient_pattern,
    ring_pattern,
    stripe_pattern,
)
from whitted.scene.light import PointLight
from whitted.scene.object import plane, sphere
from whitted.scene.world import World

# Vertical field of view shared by the showcase cameras
SHOWCASE_FOV = math.pi / 3.0


def _camera(width: int, height: int, from_point, to_point) -> Camera:
    return Camera(
        hsize=width,
        vsize=height,
        field_of_view=SHOWCASE_FOV,
        transform=view_transform(from_point, to_point, vector(0.0, 1.0, 0.0)),
    )


def create_patterns_scene(width: int = 320, height: int = 180) -> tuple[World, Camera]:
    """Create the patterned floor and spheres scene.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (world, camera).
    """
    floor = plane(
        material=Material(
            colour=Colour(0.5, 0.45, 0.45),
            specular=0.0,
            pattern=stripe_pattern(Colour.white(), Colour.black(), rotation_z(math.pi / 4.0)),
        ),
    )

    middle = sphere(
        transform=translation(-0.5, 1.0, 0.5),
        material=Material(
            colour=Colour(1.0, 0.49, 0.0),
            diffuse=0.7,
            specular=0.1,
            shininess=50.0,
            pattern=ring_pattern(
                Colour(1.0, 0.0, 0.0),
                Colour(0.0, 0.0, 1.0),
                rotation_x(math.pi / 3.0) @ scaling(0.25, 0.75, 0.8),
            ),
        ),
    )

    right = sphere(
        transform=translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
        material=Material(
            colour=Colour(0.51, 0.75, 0.06),
            pattern=gradient_pattern(
                Colour(1.0, 1.0, 0.0), Colour(1.0, 0.0, 1.0), scaling(1.0, 2.0, 3.0)
            ),
        ),
    )

    left = sphere(
        transform=translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
        material=Material(
            colour=Colour(0.78, 0.28, 0.96),
            pattern=checkers_pattern(
                Colour(0.0, 1.0, 0.0), Colour(0.0, 1.0, 1.0), translation(1.0, 2.0, 3.0)
            ),
        ),
    )

    world = World(
        light=PointLight(point(-10.0, 10.0, -10.0), Colour.white()),
        objects=(floor, middle, left, right),
    )
    camera = _camera(width, height, point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0))
    return world, camera


def create_glass_scene(width: int = 320, height: int = 180) -> tuple[World, Camera]:
    """Create the reflection and refraction scene.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (world, camera).
    """
    floor = plane(
        material=Material(
            specular=0.0,
            reflective=0.2,
            pattern=checkers_pattern(Colour(0.35, 0.35, 0.35), Colour(0.65, 0.65, 0.65)),
        ),
    )

    mirror = plane(
        transform=translation(0.0, 0.0, 6.0) @ rotation_x(math.pi / 2.0),
        material=Material(
            colour=Colour(0.05, 0.05, 0.1),
            diffuse=0.2,
            specular=0.8,
            reflective=0.9,
        ),
    )

    glass_ball = sphere(
        transform=translation(0.0, 1.0, 0.0),
        material=glass(),
    )

    # Air bubble inside the glass ball
    bubble = sphere(
        transform=translation(0.0, 1.0, 0.0) @ scaling(0.5, 0.5, 0.5),
        material=glass(refractive_index=AIR, reflective=0.0),
    )

    behind = sphere(
        transform=translation(1.2, 0.6, 2.5) @ scaling(0.6, 0.6, 0.6),
        material=Material(colour=Colour(0.9, 0.2, 0.1), diffuse=0.8, specular=0.3),
    )

    world = World(
        light=PointLight(point(-5.0, 8.0, -8.0), Colour.white()),
        objects=(floor, mirror, glass_ball, bubble, behind),
    )
    camera = _camera(width, height, point(0.0, 2.0, -5.0), point(0.0, 1.0, 0.0))
    return world, camera


SCENES: dict[str, Callable[[int, int], tuple[World, Camera]]] = {
    "patterns": create_patterns_scene,
    "glass": create_glass_scene,
}


def create_scene(name: str, width: int, height: int) -> tuple[World, Camera]:
    """Create a showcase scene by name.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        factory = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {sorted(SCENES)}") from None
    return factory(width, height)
