"""Dense matrices of floats with elimination-based algorithms."""

from __future__ import annotations

import operator
from numbers import Real
from typing import Iterable, TextIO

from tinylinalg.vector import DOUBLE_TOLERANCE, Vector, _read_numbers


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix is singular or too ill-conditioned to use."""


def _pivot_row(rows: list[list[float]], k: int) -> int:
    """Row at or below ``k`` with the largest absolute value in column ``k``."""
    return max(range(k, len(rows)), key=lambda r: abs(rows[r][k]))


class Matrix:
    """A rectangular matrix of floats.

    ``m[i, j]`` indexes from zero; ``m(i, j)`` indexes from one.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        self._rows = data

    @classmethod
    def zeros(cls, num_rows: int, num_cols: int) -> Matrix:
        """Return a matrix of zeros."""
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        return cls([[0.0] * num_cols for _ in range(num_rows)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """Return the ``n`` by ``n`` identity matrix."""
        m = cls.zeros(n, n)
        for i, row in enumerate(m._rows):
            row[i] = 1.0
        return m

    @classmethod
    def read(cls, num_rows: int, num_cols: int, stream: TextIO) -> Matrix:
        """Read the elements in row order from a text stream."""
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        values = _read_numbers(stream, num_rows * num_cols)
        return cls(
            values[start:start + num_cols]
            for start in range(0, len(values), num_cols)
        )

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def num_cols(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rows, self.num_cols

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def _zero_based(self, row: int, col: int) -> tuple[int, int]:
        row, col = operator.index(row), operator.index(col)
        if not (0 <= row < self.num_rows and 0 <= col < self.num_cols):
            raise IndexError(f"position ({row}, {col}) out of range for {self.shape}")
        return row, col

    def __call__(self, row: int, col: int) -> float:
        r, c = self._zero_based(operator.index(row) - 1, operator.index(col) - 1)
        return self._rows[r][c]

    def set(self, row: int, col: int, value: float) -> None:
        """Set the element at one-based position (``row``, ``col``)."""
        r, c = self._zero_based(operator.index(row) - 1, operator.index(col) - 1)
        self._rows[r][c] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        r, c = self._zero_based(*key)
        return self._rows[r][c]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        r, c = self._zero_based(*key)
        self._rows[r][c] = float(value)

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def _require_square(self) -> int:
        if self.num_rows != self.num_cols:
            raise ValueError(f"matrix must be square, not {self.shape}")
        return self.num_rows

    def __neg__(self) -> Matrix:
        return Matrix([-value for value in row] for row in self._rows)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [a + b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            [a - b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._rows, other._rows)
        )

    def __mul__(self, other: object):
        if isinstance(other, (Matrix, Vector)):
            return self @ other
        if isinstance(other, Real):
            return Matrix([value * other for value in row] for row in self._rows)
        return NotImplemented

    def __rmul__(self, scalar: object) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __matmul__(self, other: object):
        if isinstance(other, Matrix):
            if self.num_cols != other.num_rows:
                raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
            columns = list(zip(*other._rows))
            return Matrix(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._rows
            )
        if isinstance(other, Vector):
            if self.num_cols != other.size:
                raise ValueError(
                    f"cannot multiply {self.shape} by a vector of size {other.size}"
                )
            return Vector(sum(a * b for a, b in zip(row, other)) for row in self._rows)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(f"{value:10.6f}" for value in row) + "]"
            for row in self._rows
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def determinant(self) -> float:
        """Determinant by Gaussian elimination with partial pivoting."""
        n = self._require_square()
        if n == 1:
            return self._rows[0][0]
        work = [row[:] for row in self._rows]
        det = 1.0
        swaps = 0
        for k in range(n):
            pivot = _pivot_row(work, k)
            if pivot != k:
                work[k], work[pivot] = work[pivot], work[k]
                swaps += 1
            if abs(work[k][k]) < DOUBLE_TOLERANCE:
                return 0.0
            det *= work[k][k]
            pivot_row = work[k]
            for row in work[k + 1:]:
                factor = row[k] / pivot_row[k]
                row[k:] = [a - factor * b for a, b in zip(row[k:], pivot_row[k:])]
        return -det if swaps % 2 else det

    def inverse(self) -> Matrix:
        """Inverse by Gauss-Jordan elimination on ``[A | I]``."""
        n = self._require_square()
        identity = Matrix.identity(n)._rows
        aug = [row + unit for row, unit in zip(self._rows, identity)]
        for k in range(n):
            pivot = _pivot_row(aug, k)
            if pivot != k:
                aug[k], aug[pivot] = aug[pivot], aug[k]
            if abs(aug[k][k]) < DOUBLE_TOLERANCE:
                raise SingularMatrixError(
                    "matrix is singular or ill-conditioned; cannot invert"
                )
            pivot_value = aug[k][k]
            aug[k][k:] = [value / pivot_value for value in aug[k][k:]]
            pivot_row = aug[k]
            for i, row in enumerate(aug):
                if i == k:
                    continue
                factor = row[k]
                row[k:] = [a - factor * b for a, b in zip(row[k:], pivot_row[k:])]
        return Matrix(row[n:] for row in aug)

    def pseudo_inverse(self) -> Matrix:
        """Moore-Penrose pseudo-inverse via the normal equations."""
        transposed = self.transpose()
        return (transposed @ self).inverse() @ transposed

    def transpose(self) -> Matrix:
        """Return the transpose."""
        return Matrix(zip(*self._rows))

    def is_symmetric(self, tolerance: float = DOUBLE_TOLERANCE) -> bool:
        """True if square and equal to its transpose within ``tolerance``."""
        n = self.num_rows
        if n != self.num_cols:
            return False
        return all(
            abs(self._rows[i][j] - self._rows[j][i]) <= tolerance
            for i in range(n)
            for j in range(i + 1, n)
        )