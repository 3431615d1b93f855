"""Unit tests for square matrices.

Tests cover:
- Construction, indexing and approximate equality
- Products with matrices and tuples
- Transpose, submatrix, minor, cofactor and determinant
- Inversion, including singular matrices
"""

import pickle

import pytest

from whitted.core.matrix import Matrix, SingularMatrixError
from whitted.core.vector import Vec4

A4 = Matrix(
    [
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 8, 7, 6],
        [5, 4, 3, 2],
    ]
)


class TestMatrixBasics:
    """Tests for construction, indexing and equality."""

    def test_indexing(self):
        """Elements are addressed by (row, col)."""
        m = Matrix([[1, 2, 3, 4], [5.5, 6.5, 7.5, 8.5], [9, 10, 11, 12], [13.5, 14.5, 15.5, 16.5]])
        assert m[0, 0] == 1
        assert m[1, 2] == 7.5
        assert m[3, 2] == 15.5

    def test_rejects_non_square(self):
        """Only square matrices are supported."""
        with pytest.raises(ValueError, match="square"):
            Matrix([[1, 2, 3], [4, 5, 6]])

    def test_data_is_read_only(self):
        """The backing array cannot be mutated."""
        m = Matrix.identity()
        with pytest.raises(ValueError):
            m.data[0, 0] = 5.0

    def test_equality_within_epsilon(self):
        """Matrices compare element-wise within EPSILON."""
        assert A4 == Matrix(A4.data + 1e-7)
        assert A4 != Matrix(A4.data + 1e-3)

    def test_pickle_roundtrip(self):
        """Matrices survive pickling for worker processes."""
        restored = pickle.loads(pickle.dumps(A4))
        assert restored == A4
        assert not restored.data.flags.writeable


class TestMatrixProducts:
    """Tests for matrix-matrix and matrix-tuple products."""

    def test_matrix_product(self):
        """Standard row-by-column product."""
        b = Matrix([[-2, 1, 2, 3], [3, 2, 1, -1], [4, 3, 6, 5], [1, 2, 7, 8]])
        expected = Matrix(
            [
                [20, 22, 50, 48],
                [44, 54, 114, 108],
                [40, 58, 110, 102],
                [16, 26, 46, 42],
            ]
        )
        assert A4 @ b == expected

    def test_matrix_times_tuple(self):
        """A matrix transforms a tuple."""
        m = Matrix([[1, 2, 3, 4], [2, 4, 4, 2], [8, 6, 4, 1], [0, 0, 0, 1]])
        assert m @ Vec4(1, 2, 3, 1) == Vec4(18, 24, 33, 1)

    def test_identity_is_neutral(self):
        """Multiplying by the identity changes nothing."""
        assert A4 @ Matrix.identity() == A4
        assert Matrix.identity() @ Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 4)

    def test_size_mismatch(self):
        """Products need matching sizes."""
        with pytest.raises(ValueError):
            A4 @ Matrix.identity(3)


class TestMatrixAlgebra:
    """Tests for transpose, submatrix, determinant and cofactors."""

    def test_transpose(self):
        """Rows become columns."""
        m = Matrix([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = Matrix([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        assert m.transpose() == expected
        assert Matrix.identity().transpose() == Matrix.identity()

    def test_determinant_2x2(self):
        """Closed-form 2x2 determinant."""
        assert Matrix([[1, 5], [-3, 2]]).determinant() == pytest.approx(17)

    def test_submatrix(self):
        """A submatrix drops one row and one column."""
        m = Matrix([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        assert m.submatrix(0, 2) == Matrix([[-3, 2], [0, 6]])

    def test_submatrix_out_of_range(self):
        """Out-of-range indices raise IndexError."""
        with pytest.raises(IndexError):
            A4.submatrix(4, 0)

    def test_minor_and_cofactor_3x3(self):
        """Cofactor negates the minor at odd row + col."""
        m = Matrix([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert m.minor(0, 0) == pytest.approx(-12)
        assert m.cofactor(0, 0) == pytest.approx(-12)
        assert m.minor(1, 0) == pytest.approx(25)
        assert m.cofactor(1, 0) == pytest.approx(-25)

    def test_determinant_3x3(self):
        """Cofactor expansion of a 3x3 matrix."""
        m = Matrix([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])
        assert m.cofactor(0, 0) == pytest.approx(56)
        assert m.cofactor(0, 1) == pytest.approx(12)
        assert m.cofactor(0, 2) == pytest.approx(-46)
        assert m.determinant() == pytest.approx(-196)

    def test_determinant_4x4(self):
        """Cofactor expansion of a 4x4 matrix."""
        m = Matrix([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert m.determinant() == pytest.approx(-4071)


class TestMatrixInverse:
    """Tests for inversion."""

    def test_invertible(self):
        """A non-zero determinant means invertible."""
        m = Matrix([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
        assert m.is_invertible()

    def test_singular_matrix_raises(self):
        """Inverting a singular matrix raises instead of falling back."""
        m = Matrix([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert not m.is_invertible()
        with pytest.raises(SingularMatrixError):
            m.inverse()

    def test_singular_error_is_value_error(self):
        """SingularMatrixError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Matrix([[1, 2], [2, 4]]).inverse()

    def test_inverse(self):
        """Inverse from the transposed cofactor matrix."""
        m = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        expected = Matrix(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )
        inverse = m.inverse()
        assert m.determinant() == pytest.approx(532)
        assert inverse[3, 2] == pytest.approx(-160 / 532)
        assert inverse[2, 3] == pytest.approx(105 / 532)
        assert inverse == expected

    def test_product_times_inverse(self):
        """(A @ B) @ B^-1 recovers A."""
        a = Matrix([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]])
        b = Matrix([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]])
        assert (a @ b) @ b.inverse() == a

    def test_times_own_inverse_is_identity(self):
        """A matrix times its inverse is the identity."""
        m = Matrix([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        assert m @ m.inverse() == Matrix.identity()
        assert m.inverse() @ m == Matrix.identity()

    def test_inverse_of_inverse(self):
        """Inverting twice gives back the original matrix."""
        m = Matrix([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]])
        assert m.inverse().inverse() == m
