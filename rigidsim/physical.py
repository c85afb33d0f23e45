"""Physical components: point-mass particles and rigid bodies driven by forces."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from rigidsim.component import PARTICLE_COMPONENT, RIGIDBODY_COMPONENT, Component
from rigidsim.matrix33 import Matrix33
from rigidsim.matrix34 import Matrix34
from rigidsim.quaternion import Quaternion
from rigidsim.vector3d import Vector3d

logger = logging.getLogger(__name__)


class ForceSource(ABC):
    """Something that produces a force on a physical component."""

    NAME: ClassVar[str] = "ForceGenerator"

    @property
    def name(self) -> str:
        return type(self).NAME

    @abstractmethod
    def force_value(self, component: PhysicalComponent) -> Vector3d:
        """The force this source exerts on ``component`` right now."""

    def add_force(self, component: PhysicalComponent) -> None:
        """Add this source's force to the component's accumulated net force."""
        component.net_force = component.net_force + self.force_value(component)


class PhysicalComponent(Component):
    """Mass, linear motion and the forces acting on a game object.

    ``gravity`` is an optional force source applied before the listed forces;
    it is None until one is assigned.
    """

    NAME: ClassVar[str] = "PhysicalComponent"

    def __init__(self, game_object: Any, mass: float = 1.0) -> None:
        super().__init__(game_object)
        self.mass = mass
        self.is_kinematic = True
        self.net_force = Vector3d()
        self.linear_speed = Vector3d()
        self.linear_acceleration = Vector3d()
        self.gravity: ForceSource | None = None
        self.forces: list[ForceSource] = []

    def distance(self, other: PhysicalComponent) -> float:
        """Distance between the positions of the two components' objects."""
        return (self.position - other.position).norm()

    @property
    def position(self) -> Vector3d:
        """Position of the owning game object."""
        return self.game_object.transform.position

    @position.setter
    def position(self, value: Vector3d) -> None:
        self.game_object.transform.position = value

    def add_force(self, force: ForceSource) -> None:
        self.forces.append(force)

    def force_by_name(self, name: str) -> ForceSource | None:
        """The first force with the given name, or None."""
        return next((f for f in self.forces if f.name == name), None)

    def has_force(self, name: str) -> bool:
        return any(f.name == name for f in self.forces)

    def remove_force(self, force: ForceSource) -> None:
        """Remove ``force``; raises ValueError if it is not attached."""
        for i, existing in enumerate(self.forces):
            if existing is force:
                del self.forces[i]
                return
        raise ValueError(f"force {force.name!r} is not attached")

    def _accumulate_forces(self) -> None:
        if self.gravity is not None:
            self.gravity.add_force(self)
        for force in self.forces:
            force.add_force(self)

    @abstractmethod
    def stop(self) -> None:
        """Halt all motion and make the component kinematic."""


class Particle(PhysicalComponent):
    """A point mass with linear motion only."""

    NAME: ClassVar[str] = PARTICLE_COMPONENT

    def __init__(self, game_object: Any, mass: float = 1.0) -> None:
        super().__init__(game_object, mass)

    def update(self, delta_time: float) -> None:
        """Apply forces, then integrate acceleration into speed."""
        if not self.is_kinematic:
            self._accumulate_forces()
        self.linear_acceleration = self.net_force / self.mass
        self.linear_speed = self.linear_speed + self.linear_acceleration * delta_time
        self.net_force = Vector3d()

    def stop(self) -> None:
        self.linear_speed = Vector3d()
        self.linear_acceleration = Vector3d()
        self.is_kinematic = True


@dataclass
class ForcePoint:
    """A force source applied at a point in body coordinates."""

    force: ForceSource
    point: Vector3d = field(default_factory=Vector3d)


class Rigidbody(PhysicalComponent):
    """A body with linear and angular motion."""

    NAME: ClassVar[str] = RIGIDBODY_COMPONENT

    def __init__(self, game_object: Any) -> None:
        super().__init__(game_object, 1.0)
        self.angular_speed = Vector3d()
        self.angular_acceleration = Vector3d()
        self.inertia_tensor = Matrix33()
        self.torque_accum = Vector3d()
        self.orientation = Quaternion()
        self.transform_matrix = Matrix34()
        self.point_forces: list[ForcePoint] = []

    def add_force_at_point(self, force: Vector3d, world_point: Vector3d) -> None:
        """Add a force applied at a point given in world coordinates."""
        self.net_force = self.net_force + force
        local = self.game_object.transform.matrix().inverse().transform_position(world_point)
        self.torque_accum = self.torque_accum + local.cross(force)

    def add_force_at_body_point(self, force: Vector3d, local_point: Vector3d) -> None:
        """Add a force applied at a point given in body coordinates."""
        self.net_force = self.net_force + force
        self.torque_accum = self.torque_accum + local_point.cross(force)

    def add_force_to_point_list(self, force: ForceSource, point: Vector3d) -> None:
        self.point_forces.append(ForcePoint(force, point))

    def delete_force_at_point(self, force: ForceSource) -> None:
        """Remove the first point force using ``force``; does nothing if absent."""
        for i, entry in enumerate(self.point_forces):
            if entry.force is force:
                del self.point_forces[i]
                return

    def clear_accumulator(self) -> None:
        self.net_force = Vector3d()
        self.torque_accum = Vector3d()

    def calculate_derived_data(self) -> None:
        """Refresh the transform matrix and the inertia tensor from the mesh."""
        self.transform_matrix.set_orientation_and_position(self.orientation, self.position)
        mesh = getattr(self.game_object, "mesh", None)
        if mesh is not None:
            self.inertia_tensor = mesh.inertia_tensor(self.mass)
        else:
            logger.error("No mesh found for rigidbody")
            self.inertia_tensor = Matrix33()

    def update(self, time: float) -> None:
        """Apply forces and torques, then integrate linear and angular speed.

        Raises SingularMatrixError when the inertia tensor cannot be inverted,
        which is the case for an object without a mesh.
        """
        if not self.is_kinematic:
            self._accumulate_forces()
            for entry in self.point_forces:
                self.add_force_at_body_point(entry.force.force_value(self), entry.point)

        self.calculate_derived_data()

        self.linear_acceleration = self.net_force / self.mass
        self.angular_acceleration = self.inertia_tensor.inverse() * self.torque_accum

        self.linear_speed = self.linear_speed + self.linear_acceleration * time
        self.angular_speed = self.angular_speed + self.angular_acceleration * time

        self.clear_accumulator()

    def stop(self) -> None:
        self.net_force = Vector3d()
        self.linear_speed = Vector3d()
        self.linear_acceleration = Vector3d()
        self.angular_speed = Vector3d()
        self.angular_acceleration = Vector3d()
        self.is_kinematic = True