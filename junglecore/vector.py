"""Two-, three- and four-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from .mathutil import KINDA_SMALL_NUMBER, SMALL_NUMBER, inv_sqrt


@dataclass
class Vector2D:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self


@dataclass
class Vector:
    """A 3D vector with the usual geometric operations."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, scalar: float) -> Vector:
        """A vector with every component set to ``scalar``."""
        return cls(scalar, scalar, scalar)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> Vector:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def down(cls) -> Vector:
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def forward(cls) -> Vector:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def backward(cls) -> Vector:
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def right(cls) -> Vector:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def left(cls) -> Vector:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector:
        return cls(0.0, 0.0, 1.0)

    @staticmethod
    def distance(v1: Vector, v2: Vector) -> float:
        """Euclidean distance between two points."""
        return math.sqrt((v2.x - v1.x) ** 2 + (v2.y - v1.y) ** 2 + (v2.z - v1.z) ** 2)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def equals(self, other: Vector, tolerance: float = KINDA_SMALL_NUMBER) -> bool:
        """Component-wise comparison within ``tolerance``."""
        return (
            abs(self.x - other.x) <= tolerance
            and abs(self.y - other.y) <= tolerance
            and abs(self.z - other.z) <= tolerance
        )

    def all_components_equal(self, tolerance: float = KINDA_SMALL_NUMBER) -> bool:
        return (
            abs(self.x - self.y) <= tolerance
            and abs(self.x - self.z) <= tolerance
            and abs(self.y - self.z) <= tolerance
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self, tolerance: float = SMALL_NUMBER) -> bool:
        """Normalize in place; return False and leave the vector alone if too small."""
        square_sum = self.length_squared()
        if square_sum > tolerance:
            scale = inv_sqrt(square_sum)
            self.x *= scale
            self.y *= scale
            self.z *= scale
            return True
        return False

    def get_unsafe_normal(self) -> Vector:
        """Normalized copy without checking for a zero length."""
        scale = inv_sqrt(self.length_squared())
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def get_safe_normal(self, tolerance: float = SMALL_NUMBER) -> Vector:
        """Normalized copy, or the zero vector if the length is below ``tolerance``."""
        square_sum = self.length_squared()
        if square_sum == 1.0:
            return Vector(self.x, self.y, self.z)
        if square_sum < tolerance:
            return Vector.zero()
        scale = inv_sqrt(square_sum)
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def component_min(self, other: Vector) -> Vector:
        return Vector(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def component_max(self, other: Vector) -> Vector:
        return Vector(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def is_nearly_zero(self, tolerance: float = SMALL_NUMBER) -> bool:
        return abs(self.x) <= tolerance and abs(self.y) <= tolerance and abs(self.z) <= tolerance

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector, float]) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, other: Union[Vector, float]) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vector(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"vector index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        elif index == 2:
            self.z = value
        else:
            raise IndexError(f"vector index out of range: {index}")


@dataclass
class Vector4:
    """A 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __truediv__(self, scalar: float) -> Vector4:
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)