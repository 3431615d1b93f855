"""Unit tests for RGB colours.

Tests cover:
- Channel access and approximate equality
- Addition, subtraction and scalar multiplication
- Channel-wise (Hadamard) products
- Clamping
"""

import pytest

from whitted.core.colour import Colour


class TestColourBasics:
    """Tests for construction and equality."""

    def test_channels(self):
        """Colours are (red, green, blue) tuples."""
        c = Colour(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)
        assert c.to_tuple() == (-0.5, 0.4, 1.7)

    def test_black_and_white(self):
        """Named constructors."""
        assert Colour.black() == Colour(0, 0, 0)
        assert Colour.white() == Colour(1, 1, 1)

    def test_approximate_equality(self):
        """Colours compare within EPSILON."""
        assert Colour(0.1 + 0.2, 0.5, 0.5) == Colour(0.3, 0.5, 0.5)
        assert Colour(0.3, 0.5, 0.5) != Colour(0.3, 0.5, 0.6)

    def test_unhashable(self):
        """Colours cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Colour.white())


class TestColourArithmetic:
    """Tests for colour operators."""

    def test_add(self):
        """Channel-wise addition."""
        assert Colour(0.9, 0.6, 0.75) + Colour(0.7, 0.1, 0.25) == Colour(1.6, 0.7, 1.0)

    def test_subtract(self):
        """Channel-wise subtraction."""
        assert Colour(0.9, 0.6, 0.75) - Colour(0.7, 0.1, 0.25) == Colour(0.2, 0.5, 0.5)

    def test_scalar_multiply(self):
        """Scalars multiply from either side."""
        assert Colour(0.2, 0.3, 0.4) * 2 == Colour(0.4, 0.6, 0.8)
        assert 2 * Colour(0.2, 0.3, 0.4) == Colour(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        """Multiplying two colours blends them channel by channel."""
        assert Colour(1, 0.2, 0.4) * Colour(0.9, 1, 0.1) == Colour(0.9, 0.2, 0.04)

    def test_hadamard_blue_uses_both_blue_channels(self):
        """The blue channel of a product depends only on the blue inputs."""
        product = Colour(0.0, 0.0, 0.5) * Colour(7.0, 3.0, 0.5)
        assert product.blue == pytest.approx(0.25)
        assert product == Colour(0.0, 0.0, 0.25)

    def test_multiply_rejects_other_types(self):
        """Multiplying by an unsupported type raises TypeError."""
        with pytest.raises(TypeError):
            Colour(1, 1, 1) * "red"


class TestColourClamp:
    """Tests for clamping."""

    def test_clamped(self):
        """Clamping limits every channel to [0, 1]."""
        assert Colour(1.5, -0.5, 0.5).clamped() == Colour(1.0, 0.0, 0.5)

    def test_unclamped_by_default(self):
        """Arithmetic never clamps."""
        assert (Colour.white() * 3).red == pytest.approx(3.0)
