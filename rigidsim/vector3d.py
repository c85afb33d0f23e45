"""Three-component vector used for positions, velocities and forces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Vector3d:
    """A mutable 3D vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3d) -> Vector3d:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3d) -> Vector3d:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector3d(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3d:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3d:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector3d(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3d:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        n = self.norm()
        if n != 0:
            return Vector3d(self.x / n, self.y / n, self.z / n)
        return Vector3d(0.0, 0.0, 0.0)

    def dot(self, other: Vector3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance(self, other: Vector3d) -> float:
        """Distance between two points."""
        return (self - other).norm()