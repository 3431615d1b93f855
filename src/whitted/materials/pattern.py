"""Procedural colour patterns.

A pattern is a closed-form function of a 3-D point that alternates (or
blends) between two colours. Each pattern has its own transform, applied on
top of the decorated object's transform, so a pattern can be moved, scaled or
rotated independently of its object:

    world point --(object inverse)--> object point --(pattern inverse)--> pattern point

Pattern kinds:
    STRIPE: alternates by floor(x) mod 2
    GRADIENT: linear blend from a to b by the fractional part of x
    RING: alternates by floor(sqrt(x^2 + z^2)) mod 2
    CHECKERS: alternates by (floor(x) + floor(y) + floor(z)) mod 2
    POSITION: returns the pattern-space point itself as a colour (diagnostic)

Example:
    >>> from whitted.core.colour import Colour
    >>> from whitted.materials.pattern import stripe_pattern
    >>> p = stripe_pattern(Colour.white(), Colour.black())
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING

from whitted.core.colour import Colour
from whitted.core.matrix import Matrix
from whitted.core.vector import Vec4

if TYPE_CHECKING:
    from whitted.scene.object import SceneObject


class PatternKind(Enum):
    """Procedural pattern functions."""

    STRIPE = "stripe"
    GRADIENT = "gradient"
    RING = "ring"
    CHECKERS = "checkers"
    POSITION = "position"


@dataclass(frozen=True)
class Pattern:
    """A procedural pattern with its own pattern-to-object transform.

    Attributes:
        kind: Which pattern function to evaluate.
        a: Colour for even cells (or the gradient start).
        b: Colour for odd cells (or the gradient end).
        transform: Pattern-to-object transform.
    """

    kind: PatternKind
    a: Colour = field(default_factory=Colour.white)
    b: Colour = field(default_factory=Colour.black)
    transform: Matrix = field(default_factory=Matrix.identity)

    @cached_property
    def inverse_transform(self) -> Matrix:
        return self.transform.inverse()

    def _pick(self, index: int) -> Colour:
        return self.a if index % 2 == 0 else self.b

    def at(self, pattern_point: Vec4) -> Colour:
        """Evaluate the pattern at a point already in pattern space."""
        x, y, z = pattern_point.x, pattern_point.y, pattern_point.z
        if self.kind is PatternKind.STRIPE:
            return self._pick(math.floor(x))
        elif self.kind is PatternKind.GRADIENT:
            return self.a + (self.b - self.a) * (x - math.floor(x))
        elif self.kind is PatternKind.RING:
            return self._pick(math.floor(math.sqrt(x * x + z * z)))
        elif self.kind is PatternKind.CHECKERS:
            return self._pick(math.floor(x) + math.floor(y) + math.floor(z))
        elif self.kind is PatternKind.POSITION:
            return Colour(x, y, z)
        raise ValueError(f"Unknown pattern kind: {self.kind!r}")

    def at_object(self, world_point: Vec4, obj: SceneObject) -> Colour:
        """Evaluate the pattern on an object at a world-space point."""
        object_point = obj.inverse_transform @ world_point
        pattern_point = self.inverse_transform @ object_point
        return self.at(pattern_point)


def stripe_pattern(a: Colour, b: Colour, transform: Matrix | None = None) -> Pattern:
    return Pattern(PatternKind.STRIPE, a, b, transform or Matrix.identity())


def gradient_pattern(a: Colour, b: Colour, transform: Matrix | None = None) -> Pattern:
    return Pattern(PatternKind.GRADIENT, a, b, transform or Matrix.identity())


def ring_pattern(a: Colour, b: Colour, transform: Matrix | None = None) -> Pattern:
    return Pattern(PatternKind.RING, a, b, transform or Matrix.identity())


def checkers_pattern(a: Colour, b: Colour, transform: Matrix | None = None) -> Pattern:
    return Pattern(PatternKind.CHECKERS, a, b, transform or Matrix.identity())


def position_pattern(transform: Matrix | None = None) -> Pattern:
    """Pattern that colours each point by its own pattern-space coordinates."""
    return Pattern(PatternKind.POSITION, transform=transform or Matrix.identity())
