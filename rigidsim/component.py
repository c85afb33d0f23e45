"""Base class for the optional components attached to a game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

RIGIDBODY_COMPONENT = "Rigidbody"
PARTICLE_COMPONENT = "Particle"
RIGIDBODY_PLANE_COLLIDER = "Rigidbody_Plane_Collider"
RIGIDBODY_SPHERE_COLLIDER = "Rigidbody_Sphere_Collider"
RIGIDBODY_CUBOID_RECTANGLE_COLLIDER = "Rigidbody_CuboidRectangle_Collider"
PARTICLE_COLLIDER_COMPONENT = "Particle_Collider"

COMPONENT_NAMES: tuple[str, ...] = (
    RIGIDBODY_COMPONENT,
    PARTICLE_COMPONENT,
    RIGIDBODY_PLANE_COLLIDER,
    RIGIDBODY_SPHERE_COLLIDER,
    RIGIDBODY_CUBOID_RECTANGLE_COLLIDER,
    PARTICLE_COLLIDER_COMPONENT,
)


class Component(ABC):
    """Something attached to a game object and updated every frame."""

    NAME: ClassVar[str] = "Component"

    def __init__(self, game_object: Any) -> None:
        self.game_object = game_object

    @property
    def name(self) -> str:
        """The component's type name."""
        return type(self).NAME

    @abstractmethod
    def update(self, time: float) -> None:
        """Advance the component by ``time`` seconds."""