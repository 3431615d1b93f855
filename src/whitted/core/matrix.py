"""Square matrices with cofactor-based determinant and inverse.

Matrices are stored row-major in a numpy array. The determinant and inverse
follow the cofactor expansion so that the arithmetic is the same for every
size used by the recursion (4x4 down to 2x2).

Example:
    >>> from whitted.core.matrix import Matrix
    >>> m = Matrix([[2, 0, 0, 0], [0, 2, 0, 0], [0, 0, 2, 0], [0, 0, 0, 1]])
    >>> m.determinant()
    8.0
"""

from __future__ import annotations

from typing import overload

import numpy as np
import numpy.typing as npt

from whitted.core.vector import EPSILON, Vec4, float_eq


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


class Matrix:
    """An immutable square matrix.

    Attributes:
        data: Read-only numpy array of shape (n, n), row-major.
    """

    __slots__ = ("data",)

    def __init__(self, rows: npt.ArrayLike) -> None:
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {data.shape}")
        data.flags.writeable = False
        self.data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        return cls(np.identity(size))

    @property
    def size(self) -> int:
        return int(self.data.shape[0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self.data[index])

    @overload
    def __matmul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __matmul__(self, other: Vec4) -> Vec4: ...

    def __matmul__(self, other):
        """Multiply by a matrix (row . column) or transform a tuple."""
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
            return Matrix(self.data @ other.data)
        if isinstance(other, Vec4):
            if self.size != 4:
                raise ValueError(f"Only 4x4 matrices transform tuples, got {self.size}x{self.size}")
            return Vec4.from_array(self.data @ other.to_array())
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.data.shape != other.data.shape:
            return False
        return bool(np.all(np.abs(self.data - other.data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self.data)
        return f"Matrix([{rows}])"

    # Pickled as plain rows; the read-only flag is reapplied by __init__
    def __reduce__(self):
        return (Matrix, (self.data.tolist(),))

    def transpose(self) -> Matrix:
        return Matrix(self.data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return a copy with the given row and column removed."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} matrix")
        return Matrix(np.delete(np.delete(self.data, row, axis=0), col, axis=1))

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row."""
        if self.size == 1:
            return float(self.data[0, 0])
        if self.size == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[1, 0] * self.data[0, 1])
        return sum(float(self.data[0, col]) * self.cofactor(0, col) for col in range(self.size))

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def is_invertible(self) -> bool:
        return not float_eq(self.determinant(), 0.0)

    def inverse(self) -> Matrix:
        """Compute the inverse from the transposed cofactor matrix.

        Returns:
            The matrix M^-1 such that M @ M^-1 is the identity.

        Raises:
            SingularMatrixError: If the determinant is within EPSILON of zero.
        """
        det = self.determinant()
        if float_eq(det, 0.0):
            raise SingularMatrixError(f"Matrix has no inverse (determinant {det:g}): {self!r}")

        n = self.size
        inverse = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                # Writing to [col, row] transposes the cofactor matrix
                inverse[col, row] = self.cofactor(row, col) / det
        return Matrix(inverse)
