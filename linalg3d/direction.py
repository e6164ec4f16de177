"""Directions (free vectors) in N-dimensional space."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Iterable

from linalg3d.point import Point


def _as_point(value: "Point | Iterable[float]") -> Point:
    return value if isinstance(value, Point) else Point(value)


class Direction(Point):
    """A vector in N-dimensional space, remembering where it starts and ends.

    ``Direction(p)`` is the vector from the origin to ``p``.
    ``Direction(a, b)`` is the vector from ``a`` to ``b``.
    """

    __slots__ = ("_beginning", "_end")

    def __init__(
        self,
        a: "Point | Iterable[float]",
        b: "Point | Iterable[float] | None" = None,
    ) -> None:
        start = _as_point(a)
        if b is None:
            super().__init__(start)
            self._beginning = (0,) * len(start)
            self._end = start.coordinates
            return
        finish = _as_point(b)
        if len(start) != len(finish):
            raise ValueError("Points must have the same number of dimensions")
        super().__init__(finish - start)
        self._beginning = start.coordinates
        self._end = finish.coordinates

    @property
    def beginning(self) -> tuple:
        """Coordinates of the point the direction starts at."""
        return self._beginning

    @property
    def end(self) -> tuple:
        """Coordinates of the point the direction ends at."""
        return self._end

    def length(self) -> float:
        """Euclidean length of the direction."""
        return math.sqrt(sum(value * value for value in self))

    def cos_axis_angle(self, axis: int) -> float:
        """Cosine of the angle between this direction and the given axis."""
        return self.coordinate(axis) / self.length()

    def cos_vector_angle(self, other: "Direction") -> float:
        """Cosine of the angle between this direction and ``other``."""
        return self.dot_product(other) / (self.length() * other.length())

    def projection(self, other: "Direction") -> float:
        """Scalar projection of this direction onto ``other``."""
        if other.is_zero():
            raise ValueError("Cannot project on zero-direction")
        return self.dot_product(other) / other.length()

    def dot_product(self, other: "Direction") -> float:
        """Dot product with ``other``."""
        return sum(value * other.coordinate(i) for i, value in enumerate(self))

    def cross_product(self, other: "Direction") -> "Direction":
        """Cross product with ``other``; defined for 3D directions only."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("Cross product only defined for 3D vectors")
        ax, ay, az = self
        bx, by, bz = other
        return Direction([ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx])

    def mixed_product(self, b: "Direction", c: "Direction") -> float:
        """Scalar triple product ``self . (b x c)``."""
        return self.dot_product(b.cross_product(c))

    def ort(self) -> "Direction":
        """Return the unit direction pointing the same way."""
        size = self.length()
        if size == 0:
            raise ZeroDivisionError("Cannot normalize a zero-direction")
        return Direction([value / size for value in self])

    def normalize(self) -> "Direction":
        """Scale this direction to unit length in place, anchored at the origin."""
        size = self.length()
        if size == 0:
            raise ZeroDivisionError("Cannot normalize a zero-direction")
        self._coordinates = [value / size for value in self._coordinates]
        self._beginning = (0,) * len(self._coordinates)
        self._end = tuple(self._coordinates)
        return self

    def is_zero(self) -> bool:
        """True if every coordinate is zero."""
        return all(value == 0 for value in self)

    def equal(self, other: "Direction") -> bool:
        """True if both directions have the same coordinates."""
        return self.coordinates == other.coordinates

    def orthogonal(self, other: "Direction") -> bool:
        """True if the dot product with ``other`` is zero."""
        return self.dot_product(other) == 0

    def colinear(self, other: "Direction") -> bool:
        """True if this direction and ``other`` lie on one line."""
        if self.is_zero() or other.is_zero():
            raise ValueError("Cannot calculate colinearity with zero-direction")
        size = max(len(self), len(other))
        return all(
            self.coordinate(i) * other.coordinate(j)
            == self.coordinate(j) * other.coordinate(i)
            for i, j in combinations(range(size), 2)
        )

    def complanar(self, b: "Direction", c: "Direction") -> bool:
        """True if this direction, ``b`` and ``c`` lie in one plane."""
        return self.mixed_product(b, c) == 0