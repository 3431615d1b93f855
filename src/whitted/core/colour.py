"""RGB colour values.

Colours are unclamped: channels may exceed 1.0 (bright highlights) or stay
below 0.0 until the image is encoded. Clamping happens only at export time.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.vector import float_eq


@dataclass(frozen=True, eq=False)
class Colour:
    """A linear RGB colour.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    @classmethod
    def black(cls) -> Colour:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Colour:
        return cls(1.0, 1.0, 1.0)

    def __add__(self, other: Colour) -> Colour:
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Colour) -> Colour:
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Colour | float) -> Colour:
        """Scale by a number, or blend with another colour channel by channel."""
        if isinstance(other, Colour):
            return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, (int, float)):
            return Colour(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Colour:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return (
            float_eq(self.red, other.red)
            and float_eq(self.green, other.green)
            and float_eq(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Colour({self.red:.5g}, {self.green:.5g}, {self.blue:.5g})"

    def clamped(self) -> Colour:
        """Return a copy with every channel limited to [0, 1]."""
        return Colour(*(min(max(c, 0.0), 1.0) for c in self.to_tuple()))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)
