"""Points with a fixed number of coordinates and element-wise arithmetic."""

from __future__ import annotations

from enum import IntEnum
from numbers import Number
from typing import Iterable, Iterator


class Axis(IntEnum):
    """Axes of 2D, 3D or 4D space, usable as coordinate indices."""

    X = 0
    Y = 1
    Z = 2
    W = 3


class Point:
    """A point in N-dimensional space.

    The number of dimensions is fixed when the point is created.
    """

    __slots__ = ("_coordinates",)

    def __init__(self, coordinates: Iterable[float]) -> None:
        self._coordinates = list(coordinates)

    @classmethod
    def zeros(cls, dimensions: int) -> "Point":
        """Return a point of the given dimension with every coordinate zero."""
        if dimensions < 0:
            raise ValueError("Number of dimensions cannot be negative")
        return cls([0] * dimensions)

    @property
    def coordinates(self) -> tuple:
        """The coordinates as a tuple."""
        return tuple(self._coordinates)

    @property
    def axes(self) -> int:
        """Number of dimensions."""
        return len(self._coordinates)

    def __len__(self) -> int:
        return len(self._coordinates)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coordinates)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._coordinates):
            raise IndexError("Index out of range")

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._coordinates[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._coordinates[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coordinates == other._coordinates

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._coordinates!r})"

    def coordinate(self, index: int) -> float:
        """Return the coordinate at ``index``, or 0 if the index is out of range."""
        if 0 <= index < len(self._coordinates):
            return self._coordinates[index]
        return 0

    def set(self, index: int, value: float) -> None:
        """Set the coordinate at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self._coordinates):
            self._coordinates[index] = value

    def _check_not_larger(self, other: "Point") -> None:
        if len(self) < len(other):
            raise ValueError("Left side size is less than right side size")

    def _check_same_size(self, other: "Point") -> None:
        if len(self) != len(other):
            raise ValueError("Points must have the same number of dimensions")

    def _divisors(self, other: "Point | Number") -> list:
        if isinstance(other, Point):
            self._check_same_size(other)
            divisors = list(other)
        else:
            divisors = [other] * len(self)
        if any(d == 0 for d in divisors):
            raise ZeroDivisionError("Cannot divide by zero")
        return divisors

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_not_larger(other)
        return Point(
            value + other.coordinate(i) for i, value in enumerate(self._coordinates)
        )

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_not_larger(other)
        return Point(
            value - other.coordinate(i) for i, value in enumerate(self._coordinates)
        )

    def __iadd__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_not_larger(other)
        self._coordinates = [
            value + other.coordinate(i) for i, value in enumerate(self._coordinates)
        ]
        return self

    def __isub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        self._check_not_larger(other)
        self._coordinates = [
            value - other.coordinate(i) for i, value in enumerate(self._coordinates)
        ]
        return self

    def __mul__(self, other: "Point | Number") -> "Point":
        if isinstance(other, Point):
            self._check_same_size(other)
            return Point(a * b for a, b in zip(self._coordinates, other))
        if isinstance(other, Number):
            return Point(a * other for a in self._coordinates)
        return NotImplemented

    def __truediv__(self, other: "Point | Number") -> "Point":
        if not isinstance(other, (Point, Number)):
            return NotImplemented
        divisors = self._divisors(other)
        return Point(a / d for a, d in zip(self._coordinates, divisors))

    def __imul__(self, other: "Point | Number") -> "Point":
        if isinstance(other, Point):
            self._check_same_size(other)
            self._coordinates = [a * b for a, b in zip(self._coordinates, other)]
            return self
        if isinstance(other, Number):
            self._coordinates = [a * other for a in self._coordinates]
            return self
        return NotImplemented

    def __itruediv__(self, other: "Point | Number") -> "Point":
        if not isinstance(other, (Point, Number)):
            return NotImplemented
        divisors = self._divisors(other)
        self._coordinates = [a / d for a, d in zip(self._coordinates, divisors)]
        return self