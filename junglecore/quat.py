"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix import Matrix
from .vector import Vector

_DEG_TO_RAD = 3.14159265359 / 180.0


@dataclass
class Quat:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_axis_angle(axis: Vector, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis``."""
        half_angle = angle * 0.5
        sin_half = math.sin(half_angle)
        return Quat(math.cos(half_angle), axis.x * sin_half, axis.y * sin_half, axis.z * sin_half)

    @staticmethod
    def create_rotation(roll: float, pitch: float, yaw: float) -> Quat:
        """Rotation from Euler angles in degrees, combined as roll * pitch * yaw."""
        q_roll = Quat.from_axis_angle(Vector(1.0, 0.0, 0.0), roll * _DEG_TO_RAD)
        q_pitch = Quat.from_axis_angle(Vector(0.0, 1.0, 0.0), pitch * _DEG_TO_RAD)
        q_yaw = Quat.from_axis_angle(Vector(0.0, 0.0, 1.0), yaw * _DEG_TO_RAD)
        return q_roll * q_pitch * q_yaw

    def __mul__(self, other: Quat) -> Quat:
        w, x, y, z = self.w, self.x, self.y, self.z
        return Quat(
            w * other.w - x * other.x - y * other.y - z * other.z,
            w * other.x + x * other.w + y * other.z - z * other.y,
            w * other.y - x * other.z + y * other.w + z * other.x,
            w * other.z + x * other.y - y * other.x + z * other.w,
        )

    def conjugate(self) -> Quat:
        return Quat(self.w, -self.x, -self.y, -self.z)

    def rotate_vector(self, vec: Vector) -> Vector:
        """Rotate ``vec`` as ``q * v * conj(q)``."""
        result = self * Quat(0.0, vec.x, vec.y, vec.z) * self.conjugate()
        return Vector(result.x, result.y, result.z)

    def is_normalized(self) -> bool:
        return abs(self.w**2 + self.x**2 + self.y**2 + self.z**2 - 1.0) < 1e-6

    def normalize(self) -> Quat:
        """A unit-length copy of this quaternion."""
        magnitude = math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)
        return Quat(self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def to_matrix(self) -> Matrix:
        """The rotation matrix for this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Matrix(
            [
                (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y), 0.0),
                (2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x), 0.0),
                (2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ]
        )