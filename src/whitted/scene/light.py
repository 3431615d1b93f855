"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.colour import Colour
from whitted.core.vector import Vec4


@dataclass(frozen=True)
class PointLight:
    """An idealized point emitter with no falloff.

    Attributes:
        position: World-space position (must be a point).
        intensity: Emitted colour.
    """

    position: Vec4
    intensity: Colour

    def __post_init__(self) -> None:
        if not self.position.is_point:
            raise ValueError(f"Light position must be a point, got {self.position!r}")
