"""Numeric constants, 1-D table interpolation and a small 3-D vector type."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise

PI = math.pi
TWO_PI = 2.0 * PI

# Default air properties at sea level (ISA)
RHO_AIR = 1.225  # kg/m^3
MU_AIR = 1.7894e-5  # Pa*s


def linear_interpolate(
    x_table: Sequence[float], y_table: Sequence[float], x: float
) -> float:
    """Linearly interpolate y(x) from the tables, clamping outside their range.

    Raises ValueError when the tables are empty or differ in length.
    """
    if len(x_table) != len(y_table) or not x_table:
        raise ValueError("Interpolation tables are invalid.")

    if x <= x_table[0]:
        return y_table[0]
    if x >= x_table[-1]:
        return y_table[-1]

    for (x0, x1), (y0, y1) in zip(pairwise(x_table), pairwise(y_table)):
        if x0 <= x <= x1:
            if x1 == x0:
                return y0
            t = (x - x0) / (x1 - x0)
            return y0 + t * (y1 - y0)

    return y_table[-1]


@dataclass(frozen=True)
class Vector3:
    """An immutable Cartesian 3-vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: Vector3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Vector product self x other."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)