"""Square linear systems ``A x = b`` and their solvers."""

from __future__ import annotations

import math
import warnings

from tinylinalg.matrix import Matrix, SingularMatrixError
from tinylinalg.vector import DOUBLE_TOLERANCE, Vector

CG_TOLERANCE = 1e-6


class LinearSystem:
    """A square system solved by Gaussian elimination with partial pivoting."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.num_rows != a.num_cols:
            raise ValueError(f"matrix must be square, not {a.shape}")
        if a.num_rows != b.size:
            raise ValueError(
                f"right-hand side has size {b.size}, expected {a.num_rows}"
            )
        self._a = Matrix(a.rows)
        self._b = Vector(b)

    @property
    def size(self) -> int:
        return self._a.num_rows

    def solve(self) -> Vector:
        """Return ``x`` with ``A x = b``; raise if ``A`` is singular."""
        rows = [list(row) for row in self._a.rows]
        rhs = list(self._b)
        n = self.size

        for k in range(n):
            pivot = max(range(k, n), key=lambda r: abs(rows[r][k]))
            if pivot != k:
                rows[k], rows[pivot] = rows[pivot], rows[k]
                rhs[k], rhs[pivot] = rhs[pivot], rhs[k]
            if abs(rows[k][k]) < DOUBLE_TOLERANCE:
                raise SingularMatrixError("singular or ill-conditioned matrix")
            pivot_row = rows[k]
            for r in range(k + 1, n):
                factor = rows[r][k] / pivot_row[k]
                rows[r][k:] = [
                    a - factor * b for a, b in zip(rows[r][k:], pivot_row[k:])
                ]
                rhs[r] -= factor * rhs[k]

        x = [0.0] * n
        for i in reversed(range(n)):
            partial = sum(a * xj for a, xj in zip(rows[i][i + 1:], x[i + 1:]))
            x[i] = (rhs[i] - partial) / rows[i][i]
        return Vector(x)


class PosSymLinSystem(LinearSystem):
    """A symmetric positive-definite system solved by conjugate gradients."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        super().__init__(a, b)
        if not a.is_symmetric():
            raise ValueError("matrix must be symmetric")

    def solve(self) -> Vector:
        """Return ``x`` with ``A x = b`` by at most ``2 n`` CG iterations."""
        a = self._a
        n = self.size
        x = Vector.zeros(n)
        r = self._b
        p = r
        r_dot_r = r.dot(r)
        if math.sqrt(r_dot_r) < DOUBLE_TOLERANCE:
            return x

        for _ in range(2 * n):
            ap = a @ p
            p_dot_ap = p.dot(ap)
            if abs(p_dot_ap) < DOUBLE_TOLERANCE:
                warnings.warn("CG denominator nearly zero", RuntimeWarning, stacklevel=2)
                break
            alpha = r_dot_r / p_dot_ap
            x = x + p * alpha
            r = r - ap * alpha
            r_dot_r_new = r.dot(r)
            if math.sqrt(r_dot_r_new) < CG_TOLERANCE:
                break
            beta = r_dot_r_new / r_dot_r
            p = r + p * beta
            r_dot_r = r_dot_r_new
        return x