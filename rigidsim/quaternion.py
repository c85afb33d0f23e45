"""Quaternions for orientations and their integration over time."""

from __future__ import annotations

import math
from typing import Iterator

from rigidsim.vector3d import Vector3d


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Quaternion:
    """A quaternion w + xi + yj + zk; the default is the identity rotation."""

    __slots__ = ("w", "x", "y", "z")

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.w = float(w)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_vector(cls, vec: Vector3d) -> Quaternion:
        """Pure quaternion (0, vec)."""
        return cls(0.0, vec.x, vec.y, vec.z)

    def norm(self) -> float:
        return math.sqrt(sum(c * c for c in self))

    def normalize(self) -> None:
        """Scale to unit length in place; a zero quaternion is left unchanged."""
        n = self.norm()
        if n != 0:
            self.w /= n
            self.x /= n
            self.y /= n
            self.z /= n

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        if isinstance(other, Quaternion):
            w1, x1, y1, z1 = self
            w2, x2, y2, z2 = other
            return Quaternion(
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
                w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
            )
        if _is_scalar(other):
            return Quaternion(*(other * c for c in self))
        return NotImplemented

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self, other)))

    def __getitem__(self, index: int) -> float:
        return (self.w, self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "Quaternion : " + " ".join(f"{c:g}" for c in self)

    def __repr__(self) -> str:
        return f"Quaternion(w={self.w!r}, x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def copy(self) -> Quaternion:
        return Quaternion(self.w, self.x, self.y, self.z)

    def set(self, index: int) -> None:
        """Set the component at ``index`` to the value ``index``, then normalize."""
        values = [self.w, self.x, self.y, self.z]
        values[index] = float(index)
        self.w, self.x, self.y, self.z = values
        self.normalize()

    def rotate_by_vector(self, vector: Vector3d) -> None:
        """Multiply in place by the pure quaternion of ``vector`` and normalize."""
        self.w, self.x, self.y, self.z = self * Quaternion.from_vector(vector)
        self.normalize()

    def update_by_angular_speed(self, vector: Vector3d, time: float) -> None:
        """Integrate an angular velocity over ``time`` and normalize."""
        updated = self + Quaternion.from_vector(vector) * self * (time / 2)
        self.w, self.x, self.y, self.z = updated
        self.normalize()