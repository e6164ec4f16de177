"""Dense matrices of arbitrary size with elementary linear algebra."""

from __future__ import annotations

from numbers import Number
from typing import Iterable, Iterator

from linalg3d.point import Point


class Matrix:
    """A rows x columns matrix of numbers.

    Elements are addressed with a ``(row, column)`` pair: ``m[1, 2]``.
    """

    __slots__ = ("_table", "_columns")

    def __init__(self, data: Iterable[Iterable[float]]) -> None:
        table = [list(row) for row in data]
        columns = len(table[0]) if table else 0
        if any(len(row) != columns for row in table):
            raise ValueError("All rows must have the same size")
        self._table = table
        self._columns = columns

    @classmethod
    def _build(cls, table: list, columns: int) -> "Matrix":
        obj = cls.__new__(cls)
        obj._table = table
        obj._columns = columns
        return obj

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """Return a rows x columns matrix filled with zeros."""
        if rows < 0 or columns < 0:
            raise ValueError("Matrix dimensions cannot be negative")
        return cls._build([[0] * columns for _ in range(rows)], columns)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Return the size x size identity matrix."""
        result = cls.zeros(size, size)
        for i in range(size):
            result._table[i][i] = 1
        return result

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Matrix":
        """Build a matrix whose rows are the coordinates of the given points."""
        return cls(point.coordinates for point in points)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._table)

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    def to_lists(self) -> list:
        """Return the elements as a fresh list of row lists."""
        return [list(row) for row in self._table]

    def _iter_cells(self) -> Iterator[float]:
        for row in self._table:
            yield from row

    def _locate(self, key: tuple) -> tuple:
        try:
            row, column = key
        except (TypeError, ValueError):
            raise TypeError("Matrix indices must be a (row, column) pair") from None
        if not self.is_row_valid(row):
            raise IndexError("Invalid row index")
        if not self.is_column_valid(column):
            raise IndexError("Invalid column index")
        return row, column

    def __getitem__(self, key: tuple) -> float:
        row, column = self._locate(key)
        return self._table[row][column]

    def __setitem__(self, key: tuple, value: float) -> None:
        row, column = self._locate(key)
        self._table[row][column] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self._table == other._table
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table!r})"

    def _check_row(self, row: int) -> None:
        if not self.is_row_valid(row):
            raise IndexError("Row index out of range")

    def _check_column(self, column: int) -> None:
        if not self.is_column_valid(column):
            raise IndexError("Column index out of range")

    def _check_same_shape(self, other: "Matrix") -> None:
        if self.rows != other.rows or self.columns != other.columns:
            raise ValueError("Matrices dimensions mismatch")

    def _require_square(self, purpose: str) -> None:
        if not self.is_square_matrix():
            raise ValueError(f"Matrix must be square for {purpose}")

    def find_non_zero_value(self, row: int) -> int:
        """Index of the first non-zero element in ``row``, or ``columns`` if none."""
        self._check_row(row)
        return next(
            (i for i, value in enumerate(self._table[row]) if value != 0),
            self._columns,
        )

    def main_diagonal(self) -> tuple:
        """Elements ``[i, i]`` of the main diagonal."""
        size = min(self.rows, self._columns)
        return tuple(self._table[i][i] for i in range(size))

    def secondary_diagonal(self) -> tuple:
        """Elements ``[rows - 1 - i, i]`` of the secondary diagonal."""
        size = min(self.rows, self._columns)
        last = self.rows - 1
        return tuple(self._table[last - i][i] for i in range(size))

    def trace(self) -> float:
        """Sum of the main diagonal."""
        return sum(self.main_diagonal())

    def __mul__(self, value: float) -> "Matrix":
        if not isinstance(value, Number):
            return NotImplemented
        return Matrix._build(
            [[a * value for a in row] for row in self._table], self._columns
        )

    def __rmul__(self, value: float) -> "Matrix":
        return self.__mul__(value)

    def __imul__(self, value: float) -> "Matrix":
        if not isinstance(value, Number):
            return NotImplemented
        self._table = [[a * value for a in row] for row in self._table]
        return self

    def __truediv__(self, value: float) -> "Matrix":
        if not isinstance(value, Number):
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("Division by zero")
        return Matrix._build(
            [[a / value for a in row] for row in self._table], self._columns
        )

    def __itruediv__(self, value: float) -> "Matrix":
        if not isinstance(value, Number):
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("Division by zero")
        self._table = [[a / value for a in row] for row in self._table]
        return self

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._columns != other.rows:
            raise ValueError("Matrices dimensions mismatch")
        other_columns = list(zip(*other._table)) or [()] * other.columns
        return Matrix._build(
            [
                [sum(a * b for a, b in zip(row, column)) for column in other_columns]
                for row in self._table
            ],
            other.columns,
        )

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._build(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._table, other._table)],
            self._columns,
        )

    def __iadd__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._table = [
            [a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._table, other._table)
        ]
        return self

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._build(
            [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._table, other._table)],
            self._columns,
        )

    def __isub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._table = [
            [a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._table, other._table)
        ]
        return self

    def transposed(self) -> "Matrix":
        """Return the transpose as a new columns x rows matrix."""
        table = [list(column) for column in zip(*self._table)]
        if not table:
            table = [[] for _ in range(self._columns)]
        return Matrix._build(table, self.rows)

    def minor_matrix(self, row: int, column: int) -> "Matrix":
        """Return the matrix with ``row`` and ``column`` removed."""
        self._check_row(row)
        self._check_column(column)
        table = [
            values[:column] + values[column + 1:]
            for i, values in enumerate(self._table)
            if i != row
        ]
        return Matrix._build(table, self._columns - 1)

    def minor(self, row: int, column: int) -> float:
        """Determinant of the minor matrix at ``(row, column)``."""
        return self.minor_matrix(row, column).determinant()

    def _lu(self) -> tuple:
        self._require_square("LU decomposition")
        size = self._columns
        lower = Matrix.identity(size)._table
        upper = self.to_lists()
        for i in range(size):
            pivot_row = upper[i]
            if pivot_row[i] == 0:
                raise ZeroDivisionError("Zero pivot in LU decomposition")
            for j in range(i + 1, size):
                factor = upper[j][i] / pivot_row[i]
                lower[j][i] = factor
                upper[j][i:] = [a - b * factor for a, b in zip(upper[j][i:], pivot_row[i:])]
        return Matrix._build(lower, size), Matrix._build(upper, size)

    def l_decomposition(self) -> "Matrix":
        """Unit lower factor L of the Doolittle LU decomposition (no pivoting)."""
        return self._lu()[0]

    def u_decomposition(self) -> "Matrix":
        """Upper factor U of the Doolittle LU decomposition (no pivoting)."""
        return self._lu()[1]

    def algebraic_complement(self, row: int, column: int) -> float:
        """Signed minor (cofactor) at ``(row, column)``."""
        self._check_row(row)
        self._check_column(column)
        sign = -1 if (row + column) % 2 else 1
        return sign * self.minor(row, column)

    def union_matrix(self) -> "Matrix":
        """Matrix of cofactors."""
        self._require_square("union")
        size = self._columns
        return Matrix._build(
            [[self.algebraic_complement(i, j) for j in range(size)] for i in range(size)],
            size,
        )

    def inverted(self) -> "Matrix":
        """Return the inverse matrix.

        Raises ValueError if the matrix is not square or is singular.
        """
        self._require_square("inverse calculation")
        det = self.determinant()
        if det == 0:
            raise ValueError("Matrix is singular (determinant is zero)")
        size = self._columns
        return Matrix._build(
            [
                [self.algebraic_complement(j, i) / det for j in range(size)]
                for i in range(size)
            ],
            size,
        )

    def determinant(self) -> float:
        """Determinant, by Gaussian elimination with row exchanges."""
        self._require_square("determinant calculation")
        table = self.to_lists()
        size = self._columns
        result = 1
        for i in range(size):
            pivot = next((r for r in range(i, size) if table[r][i] != 0), None)
            if pivot is None:
                return 0
            if pivot != i:
                table[i], table[pivot] = table[pivot], table[i]
                result = -result
            pivot_row = table[i]
            result *= pivot_row[i]
            for j in range(i + 1, size):
                factor = table[j][i] / pivot_row[i]
                if factor:
                    table[j][i:] = [
                        a - b * factor for a, b in zip(table[j][i:], pivot_row[i:])
                    ]
        return result

    def is_row_valid(self, row: int) -> bool:
        """True if ``row`` is a valid row index."""
        return 0 <= row < self.rows

    def is_column_valid(self, column: int) -> bool:
        """True if ``column`` is a valid column index."""
        return 0 <= column < self._columns

    def is_zero_row(self, row: int) -> bool:
        """True if every element of ``row`` is zero."""
        self._check_row(row)
        return all(value == 0 for value in self._table[row])

    def is_zero_column(self, column: int) -> bool:
        """True if every element of ``column`` is zero."""
        self._check_column(column)
        return all(row[column] == 0 for row in self._table)

    def is_non_zero_row(self, row: int) -> bool:
        """True if no element of ``row`` is zero."""
        self._check_row(row)
        return all(value != 0 for value in self._table[row])

    def is_non_zero_column(self, column: int) -> bool:
        """True if no element of ``column`` is zero."""
        self._check_column(column)
        return all(row[column] != 0 for row in self._table)

    def is_zero_matrix(self) -> bool:
        """True if every element is zero."""
        return all(value == 0 for value in self._iter_cells())

    def is_square_matrix(self) -> bool:
        """True if rows equal columns."""
        return self.rows == self._columns

    def is_vector_row(self) -> bool:
        """True if the matrix has exactly one row."""
        return self.rows == 1

    def is_vector_column(self) -> bool:
        """True if the matrix has exactly one column."""
        return self._columns == 1

    def _off_diagonal_zero(self) -> bool:
        return all(
            value == 0
            for i, row in enumerate(self._table)
            for j, value in enumerate(row)
            if i != j
        )

    def is_diagonal_matrix(self) -> bool:
        """True if square, with a non-zero diagonal and zeros elsewhere."""
        return (
            self.is_square_matrix()
            and all(value != 0 for value in self.main_diagonal())
            and self._off_diagonal_zero()
        )

    def is_identity_matrix(self) -> bool:
        """True if square, with ones on the diagonal and zeros elsewhere."""
        return (
            self.is_square_matrix()
            and all(value == 1 for value in self.main_diagonal())
            and self._off_diagonal_zero()
        )

    def is_upper_triangular_matrix(self) -> bool:
        """True if every element above the main diagonal is zero."""
        return all(
            value == 0
            for i, row in enumerate(self._table)
            for value in row[i + 1:]
        )

    def is_lower_triangular_matrix(self) -> bool:
        """True if every element below the main diagonal is zero."""
        return all(
            value == 0
            for i, row in enumerate(self._table)
            for value in row[:i]
        )

    def is_echelon_matrix(self) -> bool:
        """True if leading elements move strictly right and zero rows come last."""
        previous = None
        rows = iter(range(self.rows))
        for row in rows:
            leading = self.find_non_zero_value(row)
            if leading == self._columns:
                break
            if previous is not None and leading <= previous:
                return False
            previous = leading
        else:
            return True
        return all(self.is_zero_row(row) for row in rows)