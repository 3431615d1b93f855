"""Tests for the ready-made scenes.

Tests cover:
- Scene contents and camera setup
- Scene lookup by name
- Small end-to-end renders
"""

import numpy as np
import pytest

from whitted.core.config import RenderSettings
from whitted.geometry.shape import ShapeKind
from whitted.scene.showcase import (
    SCENES,
    create_glass_scene,
    create_patterns_scene,
    create_scene,
)


class TestPatternsScene:
    """Tests for the patterned floor and spheres scene."""

    def test_contents(self):
        """A floor plane and three patterned spheres."""
        world, camera = create_patterns_scene(32, 18)
        shapes = [obj.shape for obj in world.objects]
        assert shapes == [ShapeKind.PLANE, ShapeKind.SPHERE, ShapeKind.SPHERE, ShapeKind.SPHERE]
        assert all(obj.material.pattern is not None for obj in world.objects)
        assert (camera.hsize, camera.vsize) == (32, 18)

    def test_render(self):
        """A tiny render produces a lit, non-empty image."""
        world, camera = create_patterns_scene(16, 9)
        image = camera.render(world, RenderSettings(max_depth=1)).to_numpy()
        assert image.shape == (9, 16, 3)
        assert np.all(np.isfinite(image))
        assert image.max() > 0.0


class TestGlassScene:
    """Tests for the reflection and refraction scene."""

    def test_contents(self):
        """The scene contains reflective and transparent objects."""
        world, _ = create_glass_scene(32, 18)
        assert any(obj.material.reflective > 0 for obj in world.objects)
        assert any(obj.material.transparency > 0 for obj in world.objects)

    def test_render(self):
        """A tiny render with reflection and refraction completes."""
        world, camera = create_glass_scene(12, 8)
        image = camera.render(world, RenderSettings(max_depth=3)).to_numpy()
        assert image.shape == (8, 12, 3)
        assert np.all(np.isfinite(image))


class TestSceneLookup:
    """Tests for create_scene."""

    def test_known_names(self):
        """Every registered scene can be created by name."""
        for name in SCENES:
            world, camera = create_scene(name, 8, 6)
            assert world.objects
            assert (camera.hsize, camera.vsize) == (8, 6)

    def test_unknown_name(self):
        """Unknown scene names are rejected."""
        with pytest.raises(ValueError, match="Unknown scene"):
            create_scene("cornell", 8, 6)
