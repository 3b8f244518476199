"""Three-component vectors used for points, directions and normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from numbers import Real
from typing import Iterator


class Axis(IntEnum):
    """Coordinate axis used for rotations."""

    X = 0
    Y = 1
    Z = 2


class ZeroVectorError(ValueError):
    """Raised when a null vector would have to be normalized."""

    def __init__(self, message: str = "cant normalize null vector") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.sqnorm())

    def sqnorm(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Unit vector with the same direction; raises ZeroVectorError for null vectors."""
        if self.x == 0 and self.y == 0 and self.z == 0:
            raise ZeroVectorError()
        n = self.norm()
        return Vec3(self.x / n, self.y / n, self.z / n)

    def rotated(self, axis: Axis | int, theta: float) -> Vec3:
        """Rotate by ``theta`` degrees around one coordinate axis."""
        axis = Axis(axis)
        rad = math.radians(theta)
        c, s = math.cos(rad), math.sin(rad)
        x, y, z = self.x, self.y, self.z
        if axis is Axis.Z:
            return Vec3(x * c - y * s, x * s + y * c, z)
        if axis is Axis.Y:
            return Vec3(x * c - z * s, y, x * s + z * c)
        return Vec3(x, y * c - z * s, y * s + z * c)

    def rotated_by(self, angles: Vec3) -> Vec3:
        """Rotate successively around X, Y then Z by the angles (degrees) in ``angles``."""
        result = self
        for axis, angle in zip(Axis, angles):
            if angle:
                result = result.rotated(axis, angle)
        return result


def up() -> Vec3:
    """Reference 'up' vector of the scene."""
    return Vec3(1.0, 0.0, 0.0)


def right() -> Vec3:
    """Reference 'right' vector of the scene."""
    return Vec3(0.0, 1.0, 0.0)


def forward() -> Vec3:
    """Reference 'forward' vector of the scene."""
    return Vec3(0.0, 0.0, 1.0)