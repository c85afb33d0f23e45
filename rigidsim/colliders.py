"""Colliders for particles and rigid bodies."""

from __future__ import annotations

import math
from abc import abstractmethod
from enum import IntEnum
from typing import Any, ClassVar

from rigidsim.component import (
    PARTICLE_COLLIDER_COMPONENT,
    RIGIDBODY_CUBOID_RECTANGLE_COLLIDER,
    RIGIDBODY_PLANE_COLLIDER,
    RIGIDBODY_SPHERE_COLLIDER,
    Component,
)
from rigidsim.matrix33 import Matrix33
from rigidsim.vector3d import Vector3d


class ColliderType(IntEnum):
    """Shape of a rigid-body collider."""

    NONE = 0
    SPHERE = 1
    BOX = 2
    PLANE = 3


class ParticleCollider(Component):
    """A sphere of given radius around a particle."""

    NAME: ClassVar[str] = PARTICLE_COLLIDER_COMPONENT

    def __init__(self, game_object: Any, radius: float = 1.0) -> None:
        super().__init__(game_object)
        self.radius = radius
        self.age = 0.0

    def update(self, time: float) -> None:
        """Advance the collider's age; its shape has no per-frame state."""
        self.age += time


class RigidbodyPrimitiveCollider(Component):
    """A primitive shape centred on its game object's position."""

    NAME: ClassVar[str] = "Rigidbody_Primitive_Collider"
    collider_type: ClassVar[ColliderType] = ColliderType.NONE

    def __init__(self, game_object: Any) -> None:
        super().__init__(game_object)
        self.age = 0.0

    def center(self) -> Vector3d:
        """World position of the collider's centre."""
        return self.game_object.transform.position

    @abstractmethod
    def normal_vector(self) -> Vector3d:
        """Surface normal of the shape, where it has one."""

    @abstractmethod
    def bounding_radius(self) -> float:
        """Radius of a sphere enclosing the shape."""

    def update(self, time: float) -> None:
        """Advance the collider's age; its shape has no per-frame state."""
        self.age += time


class RigidbodySphereCollider(RigidbodyPrimitiveCollider):
    """A sphere collider."""

    NAME: ClassVar[str] = RIGIDBODY_SPHERE_COLLIDER
    collider_type: ClassVar[ColliderType] = ColliderType.SPHERE

    def __init__(self, game_object: Any, radius: float = 1.0) -> None:
        super().__init__(game_object)
        self.radius = radius

    def normal_vector(self) -> Vector3d:
        return Vector3d(0.0, 0.0, 0.0)

    def bounding_radius(self) -> float:
        return self.radius


class RigidbodyCuboidRectangleCollider(RigidbodyPrimitiveCollider):
    """A box collider described by its half extents."""

    NAME: ClassVar[str] = RIGIDBODY_CUBOID_RECTANGLE_COLLIDER
    collider_type: ClassVar[ColliderType] = ColliderType.BOX

    def __init__(self, game_object: Any, width: float = 1.0, height: float = 1.0,
                 depth: float = 1.0) -> None:
        super().__init__(game_object)
        self.half_width = width
        self.half_height = height
        self.half_depth = depth

    def all_points(self) -> list[Vector3d]:
        """The eight corners in body coordinates, +x face first."""
        w, h, d = self.half_width, self.half_height, self.half_depth
        return [
            Vector3d(sx * w, sy * h, sz * d)
            for sx in (1, -1)
            for sy in (1, -1)
            for sz in (1, -1)
        ]

    def normal_vector(self) -> Vector3d:
        return Vector3d(0.0, 0.0, 0.0)

    def bounding_radius(self) -> float:
        return math.sqrt(
            self.half_width ** 2 + self.half_height ** 2 + self.half_depth ** 2
        )


class RigidbodyPlaneCollider(RigidbodyPrimitiveCollider):
    """A finite plane whose normal is the object's rotated y axis."""

    NAME: ClassVar[str] = RIGIDBODY_PLANE_COLLIDER
    collider_type: ClassVar[ColliderType] = ColliderType.PLANE

    def __init__(self, game_object: Any, width: float = 1.0, depth: float = 1.0) -> None:
        super().__init__(game_object)
        self.width = width
        self.depth = depth

    def normal_vector(self) -> Vector3d:
        rotation = Matrix33.from_orientation(self.game_object.transform.rotation)
        return rotation * Vector3d(0.0, 1.0, 0.0)

    def bounding_radius(self) -> float:
        return math.sqrt(self.width ** 2 + self.depth ** 2) / 2