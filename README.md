# tinylinalg

A small, dependency-free library for dense linear algebra in pure Python.

## What it provides

- `tinylinalg.vector.Vector`: a fixed-size vector of floats.
  - `Vector(values)` builds one from any iterable of numbers (at least one);
    `Vector.zeros(size)` gives a vector of zeros.
  - `v[i]` reads and writes elements from index 0; `v(i)` reads and
    `v.set(i, value)` writes from index 1. Out-of-range indices raise
    `IndexError`.
  - `-v`, `v + w`, `v - w`, `v * 2.0`, `2.0 * v`, `==`, `len(v)`, iteration,
    `v.size`, `v.dot(w)` and `v.norm()`. Adding, subtracting or taking the
    dot product of vectors of different sizes raises `ValueError`.
  - `str(v)` prints the elements with six decimals, e.g. `[1.000000, 2.500000]`.
- `tinylinalg.matrix.Matrix`: a dense rectangular matrix of floats.
  - `Matrix(rows)` from a list of equal-length rows, `Matrix.zeros(r, c)` and
    `Matrix.identity(n)`.
  - `m[i, j]` indexes from 0; `m(i, j)` reads and `m.set(i, j, value)` writes
    from 1.
  - `num_rows`, `num_cols`, `shape` and `rows` (a tuple of tuples).
  - `-m`, `m + n`, `m - n`, scalar products `m * 2.0` and `2.0 * m`, and
    matrix-matrix and matrix-vector products with `m @ n`, `m @ v` (or `*`).
    Shape mismatches raise `ValueError`.
  - `transpose()`, `determinant()` (Gaussian elimination with partial
    pivoting; returns `0.0` when a pivot falls below `1e-9`), `inverse()`
    (Gauss-Jordan elimination), `pseudo_inverse()` computed as `(AᵀA)⁻¹Aᵀ`,
    and `is_symmetric(tolerance=1e-9)`.
  - `inverse()` raises `SingularMatrixError` (a subclass of `ArithmeticError`)
    for a singular or ill-conditioned matrix; `determinant()` and `inverse()`
    raise `ValueError` for a non-square matrix.
- `tinylinalg.linear_system.LinearSystem(a, b)`: a square system `A x = b`,
  solved by Gaussian elimination with partial pivoting. `solve()` raises
  `SingularMatrixError` when a pivot falls below `1e-9`. The constructor raises
  `ValueError` if `a` is not square or `b` has the wrong size, and copies both.
- `tinylinalg.linear_system.PosSymLinSystem(a, b)`: a symmetric
  positive-definite system solved by conjugate gradients, with at most `2 n`
  iterations and a residual tolerance of `1e-6`. The constructor raises
  `ValueError` if `a` is not symmetric. If the step denominator becomes nearly
  zero, a `RuntimeWarning` is issued and the current estimate is returned.

## Installation

```
pip install .
```

## Usage

```python
from tinylinalg.vector import Vector
from tinylinalg.matrix import Matrix, SingularMatrixError
from tinylinalg.linear_system import LinearSystem, PosSymLinSystem

a = Matrix([[4.0, 1.0], [1.0, 3.0]])
b = Vector([1.0, 2.0])

print(a.determinant())          # 11.0
print(a.inverse())
print(a @ a.transpose())

x = LinearSystem(a, b).solve()
print(x)                        # [0.090909, 0.636364]

y = PosSymLinSystem(a, b).solve()
print(y)

try:
    Matrix([[1.0, 2.0], [2.0, 4.0]]).inverse()
except SingularMatrixError as exc:
    print("cannot invert:", exc)
```

Tall matrices have a least-squares pseudo-inverse:

```python
tall = Matrix([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
print(tall.pseudo_inverse())
```

## Reading values from text

`Vector.read(size, stream)` and `Matrix.read(num_rows, num_cols, stream)` take
whitespace-separated numbers from a text stream (matrix elements in row order),
spread over any number of lines. Too few numbers raise `ValueError`.

```python
import io

m = Matrix.read(2, 2, io.StringIO("1 2\n3 4\n"))
v = Vector.read(2, io.StringIO("5 6"))
```

## What it does not do

This is a library only: there is no command-line program and no interactive
prompt. It works on small dense matrices in plain Python lists, with no sparse
storage and no compiled speed-ups.

## Running the tests

```
pip install .[test]
pytest
```