"""Linear algebra types for 2D graphics: vectors, points and 4x4 matrices."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator


class Origin(enum.Enum):
    """View origin."""

    BOTTOM_LEFT = "bottom-left"
    TOP_LEFT = "top-left"


@dataclass(frozen=True)
class Vector2:
    """2D vector."""

    x: Any
    y: Any

    def __iter__(self) -> Iterator[Any]:
        yield from (self.x, self.y)

    def normalize(self) -> Vector2:
        """Return a vector with the same direction and unit magnitude."""
        return self * (1.0 / self.magnitude())

    def magnitude(self) -> float:
        """The distance from the tail to the tip of the vector."""
        return math.sqrt(Vector2.dot(self, self))

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> Any:
        """Dot product of two vectors."""
        return a.x * b.x + a.y * b.y

    def distance(self, other: Vector2) -> float:
        """Distance between two vectors."""
        return (other - self).magnitude()

    def extend(self, z: Any) -> Vector3:
        """Extend the vector to three dimensions."""
        return Vector3(self.x, self.y, z)

    def map(self, f: Callable[[Any], Any]) -> Vector2:
        return Vector2(f(self.x), f(self.y))

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0, 0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, s: Any) -> Vector2:
        return Vector2(self.x * s, self.y * s)


@dataclass(frozen=True)
class Vector3:
    """3D vector."""

    x: Any
    y: Any
    z: Any

    def __iter__(self) -> Iterator[Any]:
        yield from (self.x, self.y, self.z)

    def extend(self, w: Any) -> Vector4:
        """Extend the vector to four dimensions."""
        return Vector4(self.x, self.y, self.z, w)


@dataclass(frozen=True)
class Vector4:
    """4D vector."""

    x: Any
    y: Any
    z: Any
    w: Any

    def __iter__(self) -> Iterator[Any]:
        yield from (self.x, self.y, self.z, self.w)

    def __mul__(self, other: Any) -> Any:
        """Dot product with another vector, or scaling by a scalar."""
        if isinstance(other, Vector4):
            return other.x * self.x + other.y * self.y + other.z * self.z + other.w * self.w
        return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)


@dataclass(frozen=True)
class Point2:
    """2D point."""

    x: Any
    y: Any

    def __iter__(self) -> Iterator[Any]:
        yield from (self.x, self.y)

    def map(self, f: Callable[[Any], Any]) -> Point2:
        return Point2(f(self.x), f(self.y))

    def __truediv__(self, s: Any) -> Point2:
        return Point2(self.x / s, self.y / s)

    def __mul__(self, s: Any) -> Point2:
        return Point2(self.x * s, self.y * s)

    def __add__(self, other: Vector2) -> Point2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2 | Vector2) -> Point2 | Vector2:
        """Subtracting a point gives a vector; subtracting a vector gives a point."""
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2):
            return Point2(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 column-major matrix; ``x``, ``y``, ``z`` and ``w`` are its columns."""

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    @classmethod
    def _new(cls, *values: Any) -> Matrix4:
        if len(values) != 16:
            raise ValueError("a 4x4 matrix needs 16 values")
        return cls(*(Vector4(*values[i : i + 4]) for i in range(0, 16, 4)))

    @classmethod
    def identity(cls) -> Matrix4:
        return cls.from_nonuniform_scale(1.0, 1.0, 1.0)

    @classmethod
    def from_translation(cls, v: Vector3) -> Matrix4:
        """Create a homogeneous transformation matrix from a translation vector."""
        return cls._new(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            v.x, v.y, v.z, 1.0,
        )

    def row(self, n: int) -> Vector4:
        if n not in range(4):
            raise IndexError(f"invalid row number: {n}")
        field = "xyzw"[n]
        return Vector4(*(getattr(col, field) for col in (self.x, self.y, self.z, self.w)))

    @classmethod
    def from_scale(cls, value: Any) -> Matrix4:
        """Create a homogeneous transformation matrix from a scale value."""
        return cls.from_nonuniform_scale(value, value, value)

    @classmethod
    def from_nonuniform_scale(cls, x: Any, y: Any, z: Any) -> Matrix4:
        """Create a homogeneous transformation matrix from per-axis scale values."""
        return cls._new(
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def ortho(cls, w: int, h: int, origin: Origin) -> Matrix4:
        """Create an orthographic projection for a ``w`` by ``h`` viewport."""
        if origin is Origin.BOTTOM_LEFT:
            top, bottom = float(h), 0.0
        else:
            top, bottom = 0.0, float(h)
        return Ortho(
            left=0.0, right=float(w), bottom=bottom, top=top, near=-1.0, far=1.0
        ).to_matrix()

    def to_array(self) -> list[list[Any]]:
        """Return the matrix as a list of columns."""
        return [list(col) for col in (self.x, self.y, self.z, self.w)]

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix4):
            a, b, c, d = self.x, self.y, self.z, self.w

            def column(v: Vector4) -> Vector4:
                return a * v.x + b * v.y + c * v.z + d * v.w

            return Matrix4(column(other.x), column(other.y), column(other.z), column(other.w))
        if isinstance(other, Vector4):
            return Vector4(*(self.row(n) * other for n in range(4)))
        if isinstance(other, Vector3):
            vec = other.extend(1.0)
            return Vector3(*(self.row(n) * vec for n in range(3)))
        if isinstance(other, Point2):
            vec = Vector4(other.x, other.y, 0.0, 1.0)
            return Point2(self.row(0) * vec, self.row(1) * vec)
        return NotImplemented


@dataclass(frozen=True)
class Ortho:
    """An orthographic projection with arbitrary left/right/bottom/top distances."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float

    def to_matrix(self) -> Matrix4:
        two = 2.0
        return Matrix4._new(
            two / (self.right - self.left), 0.0, 0.0, 0.0,
            0.0, two / (self.top - self.bottom), 0.0, 0.0,
            0.0, 0.0, -two / (self.far - self.near), 0.0,
            -(self.right + self.left) / (self.right - self.left),
            -(self.top + self.bottom) / (self.top - self.bottom),
            -(self.far + self.near) / (self.far - self.near),
            1.0,
        )