"""Materials module for surface appearance.

Components:
    material: Phong coefficients plus reflection and refraction parameters
    pattern: Procedural colour patterns with their own transforms
    phong: The Phong lighting model
"""

from whitted.materials.material import (
    AIR,
    DIAMOND,
    GLASS,
    VACUUM,
    WATER,
    Material,
    glass,
)
from whitted.materials.pattern import (
    Pattern,
    PatternKind,
    checkers_pattern,
    gradient_pattern,
    position_pattern,
    ring_pattern,
    stripe_pattern,
)
from whitted.materials.phong import lighting, surface_colour

__all__ = [
    # Material
    "Material",
    "glass",
    "VACUUM",
    "AIR",
    "WATER",
    "GLASS",
    "DIAMOND",
    # Patterns
    "Pattern",
    "PatternKind",
    "stripe_pattern",
    "gradient_pattern",
    "ring_pattern",
    "checkers_pattern",
    "position_pattern",
    # Lighting
    "lighting",
    "surface_colour",
]
