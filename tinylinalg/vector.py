"""Dense vectors of floats with zero- and one-based element access."""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Iterable, Iterator, TextIO

DOUBLE_TOLERANCE = 1e-9


def _read_numbers(stream: TextIO, count: int) -> list[float]:
    """Read ``count`` whitespace-separated numbers from a text stream."""
    numbers: list[float] = []
    if count <= 0:
        return numbers
    for line in stream:
        for token in line.split():
            numbers.append(float(token))
            if len(numbers) == count:
                return numbers
    raise ValueError(f"expected {count} numbers, found {len(numbers)}")


class Vector:
    """A fixed-size vector of floats.

    Square brackets index from zero; calling the vector indexes from one.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float]) -> None:
        data = [float(value) for value in values]
        if not data:
            raise ValueError("a vector needs at least one element")
        self._data = data

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """Return a vector of ``size`` zeros."""
        if size <= 0:
            raise ValueError("vector size must be positive")
        return cls([0.0] * size)

    @classmethod
    def read(cls, size: int, stream: TextIO) -> Vector:
        """Read ``size`` numbers from a text stream."""
        if size <= 0:
            raise ValueError("vector size must be positive")
        return cls(_read_numbers(stream, size))

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def _zero_based(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for size {len(self._data)}")
        return index

    def _one_based(self, index: int) -> int:
        index = operator.index(index)
        if not 1 <= index <= len(self._data):
            raise IndexError(f"index {index} out of range 1..{len(self._data)}")
        return index - 1

    def __getitem__(self, index: int) -> float:
        return self._data[self._zero_based(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._zero_based(index)] = float(value)

    def __call__(self, index: int) -> float:
        return self._data[self._one_based(index)]

    def set(self, index: int, value: float) -> None:
        """Set the element at one-based ``index``."""
        self._data[self._one_based(index)] = float(value)

    def _check_same_size(self, other: Vector) -> None:
        if len(self._data) != len(other._data):
            raise ValueError(
                f"size mismatch: {len(self._data)} and {len(other._data)}"
            )

    def __neg__(self) -> Vector:
        return Vector(-value for value in self._data)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(value * scalar for value in self._data)

    def __rmul__(self, scalar: object) -> Vector:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(f"{value:.6f}" for value in self._data) + "]"

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def dot(self, other: Vector) -> float:
        """Return the inner product with ``other``."""
        self._check_same_size(other)
        return sum(a * b for a, b in zip(self._data, other._data))

    def norm(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.dot(self))