"""Position, rotation and scale of a game object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from rigidsim.matrix34 import Matrix34
from rigidsim.quaternion import Quaternion
from rigidsim.vector3d import Vector3d


@dataclass
class Transform:
    """Placement of an object in the world."""

    NAME: ClassVar[str] = "Transform"

    position_x: float = 0.0
    position_y: float = 0.0
    position_z: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    rotation: Quaternion = field(default_factory=Quaternion)

    @property
    def position(self) -> Vector3d:
        return Vector3d(self.position_x, self.position_y, self.position_z)

    @position.setter
    def position(self, value: Vector3d) -> None:
        self.position_x, self.position_y, self.position_z = value

    def matrix(self) -> Matrix34:
        """The affine transform of this rotation and position."""
        result = Matrix34()
        result.set_orientation_and_position(self.rotation, self.position)
        return result