"""3D vector math and 3x3 matrix helpers."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Sequence


Matrix3 = List[List[float]]


@dataclass
class Vector3:
    """A basic 3D floating-point vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"<{self.x:g}, {self.y:g}, {self.z:g}>"

    def copy(self) -> Vector3:
        """Create a copy of this Vector3."""
        return Vector3(self.x, self.y, self.z)


def magnitude(v: Vector3) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of v.

    Raises:
        ZeroDivisionError: For the zero vector.
    """
    return v * (1.0 / magnitude(v))


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def angle(a: Vector3, b: Vector3) -> float:
    """Angle between two vectors, in degrees.

    Raises:
        ZeroDivisionError: If either vector is the zero vector.
    """
    if magnitude(a) == 0.0 or magnitude(b) == 0.0:
        raise ZeroDivisionError("angle with a zero vector is undefined")
    # atan2 stays exact at 0 and 180 degrees where acos loses precision
    return math.degrees(math.atan2(magnitude(cross(a, b)), dot(a, b)))


def make_matrix_3x3(identity: bool = True) -> Matrix3:
    """3x3 identity matrix, or the zero matrix when identity is False."""
    if identity:
        return [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    return [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def mat_mul_vec(matrix: Sequence[Sequence[float]], v: Vector3) -> Vector3:
    """Multiply a 3x3 matrix by a vector (matrix[col][row] layout).

    Raises:
        ValueError: If matrix is not 3x3.
    """
    if len(matrix) != 3 or any(len(col) != 3 for col in matrix):
        raise ValueError("Vector3 matrix multiplication is only defined for 3x3 matrices")
    return Vector3(
        matrix[0][0] * v.x + matrix[1][0] * v.y + matrix[2][0] * v.z,
        matrix[0][1] * v.x + matrix[1][1] * v.y + matrix[2][1] * v.z,
        matrix[0][2] * v.x + matrix[1][2] * v.y + matrix[2][2] * v.z,
    )
