"""Dense row-major matrices of floats."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from numbers import Real

from .vector import Vector

__all__ = ["Matrix"]


class Matrix:
    """A mutable ``rows x cols`` matrix of floats stored in row-major order."""

    __slots__ = ("_rows", "_cols", "_data")

    def __init__(
        self, rows: int, cols: int, data: Iterable[float] | None = None
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        if data is None:
            self._data = [0.0] * (rows * cols)
        else:
            values = [float(x) for x in data]
            if len(values) != rows * cols:
                raise ValueError(
                    f"expected {rows * cols} elements, got {len(values)}"
                )
            self._data = values

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the ``size x size`` identity matrix."""
        matrix = cls(size, size)
        for i in range(size):
            matrix._data[i * size + i] = 1.0
        return matrix

    @classmethod
    def from_array(cls, data: Sequence[float], rows: int, cols: int) -> Matrix:
        """Build a matrix from the first ``rows * cols`` values of a row-major sequence."""
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        count = rows * cols
        if len(data) < count:
            raise ValueError(f"need {count} elements, got {len(data)}")
        return cls(rows, cols, data[:count])

    @classmethod
    def from_array_stride(
        cls, data: Sequence[float], rows: int, cols: int, stride: int
    ) -> Matrix:
        """Build a matrix whose rows start every ``stride`` elements of ``data``."""
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        if stride < cols:
            raise ValueError("stride must be at least the number of columns")
        if len(data) < (rows - 1) * stride + cols:
            raise ValueError("data is too short for the requested shape")
        values: list[float] = []
        for start in range(0, rows * stride, stride):
            values.extend(data[start:start + cols])
        return cls(rows, cols, values)

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """Return ``vector`` as a column matrix."""
        return cls(len(vector), 1, vector)

    def to_vector(self) -> Vector:
        """Return a row or column matrix as a vector."""
        if self._rows != 1 and self._cols != 1:
            raise ValueError("only a row or column matrix converts to a vector")
        return Vector(self._data)

    @property
    def shape(self) -> tuple[int, int]:
        """The pair ``(rows, cols)``."""
        return (self._rows, self._cols)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(
                f"index ({row}, {col}) out of range for shape {self.shape}"
            )
        return row * self._cols + col

    def get(self, row: int, col: int) -> float:
        """Return the element at ``(row, col)``."""
        return self._data[self._index(row, col)]

    def set(self, row: int, col: int, value: float) -> None:
        """Store ``value`` at ``(row, col)``."""
        self._data[self._index(row, col)] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shapes differ: {self.shape} and {other.shape}")

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            self._rows, self._cols, (a + b for a, b in zip(self._data, other._data))
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(
            self._rows, self._cols, (a - b for a, b in zip(self._data, other._data))
        )

    def __mul__(self, scale: float) -> Matrix:
        if not isinstance(scale, Real):
            return NotImplemented
        return Matrix(self._rows, self._cols, (scale * x for x in self._data))

    def __rmul__(self, scale: float) -> Matrix:
        return self.__mul__(scale)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError(
                f"cannot multiply shapes {self.shape} and {other.shape}"
            )
        other_cols = list(zip(*other.rows())) if other._cols else []
        product = [
            sum(a * b for a, b in zip(row, col))
            for row in self.rows()
            for col in other_cols
        ]
        if not other_cols:
            product = []
        return Matrix(self._rows, other._cols, product)

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix(self._rows, self._cols, self._data)

    def transpose(self) -> Matrix:
        """Return the transpose."""
        values = [
            self._data[i * self._cols + j]
            for j in range(self._cols)
            for i in range(self._rows)
        ]
        return Matrix(self._cols, self._rows, values)

    def multiply_column_vector(self, vector: Vector) -> Matrix:
        """Return ``self @ vector`` with ``vector`` taken as a column."""
        if len(vector) != self._cols:
            raise ValueError("vector size must equal the number of columns")
        return self @ Matrix(len(vector), 1, vector)

    def multiply_row_vector(self, vector: Vector) -> Matrix:
        """Return ``vector @ self`` with ``vector`` taken as a row."""
        if len(vector) != self._rows:
            raise ValueError("vector size must equal the number of rows")
        return Matrix(1, len(vector), vector) @ self

    def row(self, index: int) -> Matrix:
        """Return row ``index`` as a ``1 x cols`` matrix."""
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} out of range")
        start = index * self._cols
        return Matrix(1, self._cols, self._data[start:start + self._cols])

    def column(self, index: int) -> Matrix:
        """Return column ``index`` as a ``rows x 1`` matrix."""
        if not 0 <= index < self._cols:
            raise IndexError(f"column {index} out of range")
        return Matrix(self._rows, 1, self._data[index::self._cols])

    def slice(
        self, row_start: int, row_end: int, col_start: int, col_end: int
    ) -> Matrix:
        """Return the sub-matrix between the given inclusive bounds."""
        if (
            row_start < 0
            or col_start < 0
            or row_start > row_end
            or col_start > col_end
            or row_end >= self._rows
            or col_end >= self._cols
        ):
            raise IndexError("slice bounds out of range")
        values: list[float] = []
        for i in range(row_start, row_end + 1):
            base = i * self._cols
            values.extend(self._data[base + col_start:base + col_end + 1])
        return Matrix(row_end - row_start + 1, col_end - col_start + 1, values)

    def rows(self) -> list[list[float]]:
        """Return the rows as lists of floats."""
        return [
            self._data[i * self._cols:(i + 1) * self._cols]
            for i in range(self._rows)
        ]

    def format(self, decimal_places: int) -> str:
        """Return one ``[ a, b ]`` line per row with fixed decimals."""
        return "\n".join(
            "[ " + ", ".join(f"{x:.{decimal_places}f}" for x in row) + " ]"
            for row in self.rows()
        )