"""4x4 row-major matrices using the row-vector convention (v * M)."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .mathutil import PI
from .vector import Vector, Vector4

_SIZE = 4


class Matrix:
    """A 4x4 matrix of floats, indexed as ``m[row][column]``."""

    __slots__ = ("m",)

    def __init__(self, rows: Optional[Iterable[Sequence[float]]] = None) -> None:
        if rows is None:
            self.m: List[List[float]] = [[0.0] * _SIZE for _ in range(_SIZE)]
            return
        values = [[float(value) for value in row] for row in rows]
        if len(values) != _SIZE or any(len(row) != _SIZE for row in values):
            raise ValueError("a matrix needs exactly 4 rows of 4 values")
        self.m = values

    @staticmethod
    def identity() -> Matrix:
        """A new identity matrix."""
        return Matrix(
            [
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ]
        )

    def __getitem__(self, row: int) -> List[float]:
        return self.m[row]

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self.m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m == other.m

    def __repr__(self) -> str:
        return f"Matrix({self.m!r})"

    def copy(self) -> Matrix:
        return Matrix(self.m)

    def __add__(self, other: Matrix) -> Matrix:
        return Matrix(
            [a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(self.m, other.m)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        return Matrix(
            [a - b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(self.m, other.m)
        )

    def __mul__(self, other: Union[Matrix, float]) -> Matrix:
        if isinstance(other, Matrix):
            return self._multiply(other)
        return Matrix([value * other for value in row] for row in self.m)

    def __rmul__(self, scalar: float) -> Matrix:
        return Matrix([value * scalar for value in row] for row in self.m)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self._multiply(other)

    def __truediv__(self, scalar: float) -> Matrix:
        return Matrix([value / scalar for value in row] for row in self.m)

    def _multiply(self, other: Matrix) -> Matrix:
        columns = list(zip(*other.m))
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns] for row in self.m
        )

    def transpose(self) -> Matrix:
        return Matrix(zip(*self.m))

    def inverse(self) -> Matrix:
        """The inverse, or the identity if the matrix is singular or not finite."""
        m = self.m
        tmp = [[0.0] * _SIZE for _ in range(_SIZE)]

        tmp[0][0] = m[2][2] * m[3][3] - m[2][3] * m[3][2]
        tmp[0][1] = m[1][2] * m[3][3] - m[1][3] * m[3][2]
        tmp[0][2] = m[1][2] * m[2][3] - m[1][3] * m[2][2]

        tmp[1][0] = m[2][2] * m[3][3] - m[2][3] * m[3][2]
        tmp[1][1] = m[0][2] * m[3][3] - m[0][3] * m[3][2]
        tmp[1][2] = m[0][2] * m[2][3] - m[0][3] * m[2][2]

        tmp[2][0] = m[1][2] * m[3][3] - m[1][3] * m[3][2]
        tmp[2][1] = m[0][2] * m[3][3] - m[0][3] * m[3][2]
        tmp[2][2] = m[0][2] * m[1][3] - m[0][3] * m[1][2]

        tmp[3][0] = m[1][2] * m[2][3] - m[1][3] * m[2][2]
        tmp[3][1] = m[0][2] * m[2][3] - m[0][3] * m[2][2]
        tmp[3][2] = m[0][2] * m[1][3] - m[0][3] * m[1][2]

        det = [
            m[1][1] * tmp[0][0] - m[2][1] * tmp[0][1] + m[3][1] * tmp[0][2],
            m[0][1] * tmp[1][0] - m[2][1] * tmp[1][1] + m[3][1] * tmp[1][2],
            m[0][1] * tmp[2][0] - m[1][1] * tmp[2][1] + m[3][1] * tmp[2][2],
            m[0][1] * tmp[3][0] - m[1][1] * tmp[3][1] + m[2][1] * tmp[3][2],
        ]

        determinant = m[0][0] * det[0] - m[1][0] * det[1] + m[2][0] * det[2] - m[3][0] * det[3]
        if determinant == 0.0 or not math.isfinite(determinant):
            return Matrix.identity()

        r = 1.0 / determinant
        result = Matrix()
        out = result.m

        out[0][0] = r * det[0]
        out[0][1] = -r * det[1]
        out[0][2] = r * det[2]
        out[0][3] = -r * det[3]
        out[1][0] = -r * (m[1][0] * tmp[0][0] - m[2][0] * tmp[0][1] + m[3][0] * tmp[0][2])
        out[1][1] = r * (m[0][0] * tmp[1][0] - m[2][0] * tmp[1][1] + m[3][0] * tmp[1][2])
        out[1][2] = -r * (m[0][0] * tmp[2][0] - m[1][0] * tmp[2][1] + m[3][0] * tmp[2][2])
        out[1][3] = r * (m[0][0] * tmp[3][0] - m[1][0] * tmp[3][1] + m[2][0] * tmp[3][2])
        out[2][0] = r * (
            m[1][0] * (m[2][1] * m[3][3] - m[2][3] * m[3][1])
            - m[2][0] * (m[1][1] * m[3][3] - m[1][3] * m[3][1])
            + m[3][0] * (m[1][1] * m[2][3] - m[1][3] * m[2][1])
        )
        out[2][1] = -r * (
            m[0][0] * (m[2][1] * m[3][3] - m[2][3] * m[3][1])
            - m[2][0] * (m[0][1] * m[3][3] - m[0][3] * m[3][1])
            + m[3][0] * (m[0][1] * m[2][3] - m[0][3] * m[2][1])
        )
        out[2][2] = r * (
            m[0][0] * (m[1][1] * m[3][3] - m[1][3] * m[3][1])
            - m[1][0] * (m[0][1] * m[3][3] - m[0][3] * m[3][1])
            + m[3][0] * (m[0][1] * m[1][3] - m[0][3] * m[1][1])
        )
        out[2][3] = -r * (
            m[0][0] * (m[1][1] * m[2][3] - m[1][3] * m[2][1])
            - m[1][0] * (m[0][1] * m[2][3] - m[0][3] * m[2][1])
            + m[2][0] * (m[0][1] * m[1][3] - m[0][3] * m[1][1])
        )
        out[3][0] = -r * (
            m[1][0] * (m[2][1] * m[3][2] - m[2][2] * m[3][1])
            - m[2][0] * (m[1][1] * m[3][2] - m[1][2] * m[3][1])
            + m[3][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        )
        out[3][1] = r * (
            m[0][0] * (m[2][1] * m[3][2] - m[2][2] * m[3][1])
            - m[2][0] * (m[0][1] * m[3][2] - m[0][2] * m[3][1])
            + m[3][0] * (m[0][1] * m[2][2] - m[0][2] * m[2][1])
        )
        out[3][2] = -r * (
            m[0][0] * (m[1][1] * m[3][2] - m[1][2] * m[3][1])
            - m[1][0] * (m[0][1] * m[3][2] - m[0][2] * m[3][1])
            + m[3][0] * (m[0][1] * m[1][2] - m[0][2] * m[1][1])
        )
        out[3][3] = r * (
            m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
            - m[1][0] * (m[0][1] * m[2][2] - m[0][2] * m[2][1])
            + m[2][0] * (m[0][1] * m[1][2] - m[0][2] * m[1][1])
        )
        return result

    @staticmethod
    def create_rotation(roll: float, pitch: float, yaw: float) -> Matrix:
        """Rotation from Euler angles in degrees, applied yaw, then pitch, then roll."""
        rad_roll = roll * (PI / 180.0)
        rad_pitch = pitch * (PI / 180.0)
        rad_yaw = yaw * (PI / 180.0)

        cos_roll, sin_roll = math.cos(rad_roll), math.sin(rad_roll)
        cos_pitch, sin_pitch = math.cos(rad_pitch), math.sin(rad_pitch)
        cos_yaw, sin_yaw = math.cos(rad_yaw), math.sin(rad_yaw)

        rotation_z = Matrix(
            [
                (cos_yaw, sin_yaw, 0.0, 0.0),
                (-sin_yaw, cos_yaw, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ]
        )
        rotation_y = Matrix(
            [
                (cos_pitch, 0.0, -sin_pitch, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (sin_pitch, 0.0, cos_pitch, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ]
        )
        rotation_x = Matrix(
            [
                (1.0, 0.0, 0.0, 0.0),
                (0.0, cos_roll, sin_roll, 0.0),
                (0.0, -sin_roll, cos_roll, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ]
        )
        return rotation_x * rotation_y * rotation_z

    @staticmethod
    def create_scale(scale_x: float, scale_y: float, scale_z: float) -> Matrix:
        return Matrix(
            [
                (scale_x, 0.0, 0.0, 0.0),
                (0.0, scale_y, 0.0, 0.0),
                (0.0, 0.0, scale_z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            ]
        )

    @staticmethod
    def create_translation(position: Vector) -> Matrix:
        result = Matrix.identity()
        result.m[3][0] = position.x
        result.m[3][1] = position.y
        result.m[3][2] = position.z
        return result

    def transform_vector(self, v: Union[Vector, Vector4]) -> Union[Vector, Vector4]:
        """Transform ``v``; a 3D vector is treated as a direction (w = 0)."""
        if isinstance(v, Vector4):
            return self.transform_fvector4(v)
        m = self.m
        return Vector(
            v.x * m[0][0] + v.y * m[1][0] + v.z * m[2][0],
            v.x * m[0][1] + v.y * m[1][1] + v.z * m[2][1],
            v.x * m[0][2] + v.y * m[1][2] + v.z * m[2][2],
        )

    def transform_fvector4(self, vector: Vector4) -> Vector4:
        m = self.m
        return Vector4(
            m[0][0] * vector.x + m[1][0] * vector.y + m[2][0] * vector.z + m[3][0] * vector.w,
            m[0][1] * vector.x + m[1][1] * vector.y + m[2][1] * vector.z + m[3][1] * vector.w,
            m[0][2] * vector.x + m[1][2] * vector.y + m[2][2] * vector.z + m[3][2] * vector.w,
            m[0][3] * vector.x + m[1][3] * vector.y + m[2][3] * vector.z + m[3][3] * vector.w,
        )

    def transform_position(self, vector: Vector) -> Vector:
        """Transform a point (w = 1), dividing by the resulting w when it is non-zero."""
        m = self.m
        x = m[0][0] * vector.x + m[1][0] * vector.y + m[2][0] * vector.z + m[3][0]
        y = m[0][1] * vector.x + m[1][1] * vector.y + m[2][1] * vector.z + m[3][1]
        z = m[0][2] * vector.x + m[1][2] * vector.y + m[2][2] * vector.z + m[3][2]
        w = m[0][3] * vector.x + m[1][3] * vector.y + m[2][3] * vector.z + m[3][3]
        if w != 0.0:
            return Vector(x / w, y / w, z / w)
        return Vector(x, y, z)