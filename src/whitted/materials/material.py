"""Surface material properties for the Phong lighting model.

Materials compare by value. The refractive-index bookkeeping relies on this:
two objects with equal shape, transform and material are treated as the same
volume.

Common refractive indices:
    - Vacuum: 1.0
    - Air: 1.00029
    - Water: 1.333
    - Glass: 1.52
    - Diamond: 2.417
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whitted.core.colour import Colour
from whitted.materials.pattern import Pattern

VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.52
DIAMOND = 2.417


@dataclass(frozen=True)
class Material:
    """Phong material with reflection and refraction coefficients.

    Attributes:
        colour: Flat surface colour, used when no pattern is set.
        ambient: Ambient reflection coefficient (>= 0).
        diffuse: Diffuse reflection coefficient (>= 0).
        specular: Specular reflection coefficient (>= 0).
        shininess: Specular exponent (> 0); larger is a tighter highlight.
        reflective: Fraction of mirror reflection, in [0, 1].
        transparency: Fraction of refracted light, in [0, 1].
        refractive_index: Index of refraction of the volume (> 0).
        pattern: Optional procedural pattern overriding ``colour``.
    """

    colour: Colour = field(default_factory=Colour.white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} = {getattr(self, name)} must be non-negative")
        if self.shininess <= 0.0:
            raise ValueError(f"shininess = {self.shininess} must be positive")
        if not 0.0 <= self.reflective <= 1.0:
            raise ValueError(f"reflective = {self.reflective} must be in [0, 1]")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"transparency = {self.transparency} must be in [0, 1]")
        if self.refractive_index <= 0.0:
            raise ValueError(
                f"Index of refraction = {self.refractive_index} must be positive"
            )


def glass(refractive_index: float = GLASS, **overrides) -> Material:
    """A clear, fully transparent material with the given index."""
    params = {
        "colour": Colour.black(),
        "ambient": 0.0,
        "diffuse": 0.1,
        "specular": 1.0,
        "shininess": 300.0,
        "reflective": 0.9,
        "transparency": 1.0,
        "refractive_index": refractive_index,
    }
    params.update(overrides)
    return Material(**params)
