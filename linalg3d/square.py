"""Small square matrices with closed-form determinants."""

from __future__ import annotations

from typing import Iterable

from linalg3d.matrix import Matrix


class _FixedSquare(Matrix):
    """A square matrix whose size is fixed by the class."""

    __slots__ = ()
    _size = 0

    def __init__(self, data: "Matrix | Iterable[Iterable[float]] | None" = None) -> None:
        if data is None:
            data = [[0] * self._size for _ in range(self._size)]
        elif isinstance(data, Matrix):
            data = data.to_lists()
        super().__init__(data)
        if self.rows != self._size or self.columns != self._size:
            raise ValueError(
                f"{type(self).__name__} requires a {self._size}x{self._size} table"
            )


class Matrix1x1(_FixedSquare):
    """A 1x1 matrix."""

    __slots__ = ()
    _size = 1

    def __init__(self, data: "Matrix | Iterable[Iterable[float]] | None" = None) -> None:
        super().__init__(data)

    def determinant(self) -> float:
        """The single element."""
        return self[0, 0]


class Matrix2x2(_FixedSquare):
    """A 2x2 matrix."""

    __slots__ = ()
    _size = 2

    def __init__(self, data: "Matrix | Iterable[Iterable[float]] | None" = None) -> None:
        super().__init__(data)

    def determinant(self) -> float:
        """``ad - bc``."""
        return self[0, 0] * self[1, 1] - self[0, 1] * self[1, 0]


class Matrix3x3(_FixedSquare):
    """A 3x3 matrix."""

    __slots__ = ()
    _size = 3

    def __init__(self, data: "Matrix | Iterable[Iterable[float]] | None" = None) -> None:
        super().__init__(data)

    def determinant(self) -> float:
        """Determinant by the rule of Sarrus."""
        main = (
            self[0, 0] * self[1, 1] * self[2, 2]
            + self[2, 1] * self[1, 0] * self[0, 2]
            + self[0, 1] * self[1, 2] * self[2, 0]
        )
        secondary = (
            self[2, 0] * self[1, 1] * self[0, 2]
            + self[1, 0] * self[0, 1] * self[2, 2]
            + self[0, 0] * self[1, 2] * self[2, 1]
        )
        return main - secondary