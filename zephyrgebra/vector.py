"""Dense vectors of floats with the usual algebraic operations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real

__all__ = ["Vector", "is_right_angle_triangle"]

_NORMALIZE_EPSILON = 1e-12
_RIGHT_ANGLE_EPSILON = 1e-6


class Vector:
    """A mutable, fixed-length vector of floats."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[float] = ()) -> None:
        self._data = [float(x) for x in data]

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """Return a vector of ``size`` zeros."""
        return cls.filled(size, 0.0)

    @classmethod
    def filled(cls, size: int, value: float) -> Vector:
        """Return a vector of ``size`` elements all equal to ``value``."""
        if size < 0:
            raise ValueError("vector size must be non-negative")
        return cls([value] * size)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def _check_same_size(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(x * scalar for x in self._data)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def copy(self) -> Vector:
        """Return an independent copy of this vector."""
        return Vector(self._data)

    def resized(
        self, size: int, fill_value: float = 0.0, last_element_only: bool = False
    ) -> Vector:
        """Return a copy truncated or extended to ``size`` elements.

        When growing, new elements take ``fill_value``; with
        ``last_element_only`` only the final element does and the others are 0.
        """
        if size < 0:
            raise ValueError("vector size must be non-negative")
        data = self._data[:size]
        extra = size - len(data)
        if extra > 0:
            if last_element_only:
                data.extend([0.0] * (extra - 1))
                data.append(fill_value)
            else:
                data.extend([fill_value] * extra)
        return Vector(data)

    def fill(self, value: float) -> None:
        """Set every element to ``value`` in place."""
        self._data = [float(value)] * len(self._data)

    def normalize(self) -> None:
        """Scale this vector in place to unit length.

        Raises ValueError if its norm is too close to zero.
        """
        norm = math.sqrt(self.dot(self))
        if norm < _NORMALIZE_EPSILON:
            raise ValueError("cannot normalize a zero-length vector")
        self._data = [x / norm for x in self._data]

    def add_scalar(self, scalar: float) -> Vector:
        """Return ``scalar + self`` element-wise."""
        return Vector(scalar + x for x in self._data)

    def subtract_from_scalar(self, scalar: float) -> Vector:
        """Return ``scalar - self`` element-wise."""
        return Vector(scalar - x for x in self._data)

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(sum(x * x for x in self._data))

    def unit(self) -> Vector:
        """Return the unit vector in this direction."""
        mag = self.magnitude()
        if mag == 0:
            raise ValueError("zero vector has no direction")
        return self * (1.0 / mag)

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        self._check_same_size(other)
        return sum(a * b for a, b in zip(self._data, other._data))

    def angle(self, other: Vector) -> float:
        """Return the angle to ``other`` in radians."""
        mag_a = self.magnitude()
        mag_b = other.magnitude()
        if mag_a == 0 or mag_b == 0:
            raise ValueError("angle with a zero vector is undefined")
        cosine = self.dot(other) / (mag_a * mag_b)
        return math.acos(max(-1.0, min(1.0, cosine)))

    def angle_degrees(self, other: Vector) -> float:
        """Return the angle to ``other`` in degrees."""
        return self.angle(other) * (180.0 / math.pi)

    def projection_onto(self, other: Vector) -> Vector:
        """Return the projection of this vector onto ``other``."""
        mag_b = other.magnitude()
        if mag_b == 0:
            raise ValueError("cannot project onto a zero vector")
        return other * (self.dot(other) / (mag_b * mag_b))

    def equals(self, other: Vector, epsilon: float) -> bool:
        """Return True if sizes match and all elements differ by at most ``epsilon``."""
        if len(self) != len(other):
            return False
        return all(abs(a - b) <= epsilon for a, b in zip(self._data, other._data))

    def format(self, decimal_places: int) -> str:
        """Return the vector as ``[a, b, ...]`` with fixed decimals."""
        body = ", ".join(f"{x:.{decimal_places}f}" for x in self._data)
        return f"[{body}]"


def is_right_angle_triangle(a: Vector, b: Vector, c: Vector) -> bool:
    """Return True if the triangle with vertices ``a``, ``b``, ``c`` has a right angle."""
    ab = b - a
    bc = c - b
    ca = a - c
    return (
        abs(ab.dot(bc)) < _RIGHT_ANGLE_EPSILON
        or abs(bc.dot(ca)) < _RIGHT_ANGLE_EPSILON
        or abs(ca.dot(ab)) < _RIGHT_ANGLE_EPSILON
    )