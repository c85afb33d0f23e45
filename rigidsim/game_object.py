"""Game objects: a transform, an optional mesh and a list of components."""

from __future__ import annotations

import itertools
from typing import Any, Callable, ClassVar, TypeVar

from rigidsim.colliders import (
    ParticleCollider,
    RigidbodyCuboidRectangleCollider,
    RigidbodyPlaneCollider,
    RigidbodySphereCollider,
)
from rigidsim.component import (
    COMPONENT_NAMES,
    PARTICLE_COLLIDER_COMPONENT,
    PARTICLE_COMPONENT,
    RIGIDBODY_COMPONENT,
    RIGIDBODY_CUBOID_RECTANGLE_COLLIDER,
    RIGIDBODY_PLANE_COLLIDER,
    RIGIDBODY_SPHERE_COLLIDER,
    Component,
)
from rigidsim.meshes import Mesh
from rigidsim.physical import Particle, Rigidbody
from rigidsim.transform import Transform

C = TypeVar("C", bound=Component)

_COMPONENT_FACTORIES: dict[str, Callable[[Any], Component]] = {
    RIGIDBODY_COMPONENT: Rigidbody,
    PARTICLE_COMPONENT: Particle,
    RIGIDBODY_PLANE_COLLIDER: RigidbodyPlaneCollider,
    RIGIDBODY_SPHERE_COLLIDER: lambda go: RigidbodySphereCollider(go, 1.0),
    RIGIDBODY_CUBOID_RECTANGLE_COLLIDER: lambda go: RigidbodyCuboidRectangleCollider(
        go, 1.0, 1.0, 1.0
    ),
    PARTICLE_COLLIDER_COMPONENT: lambda go: ParticleCollider(go, 1.0),
}


def create_component(name: str, game_object: Any) -> Component:
    """Create the component registered under ``name`` for ``game_object``."""
    try:
        factory = _COMPONENT_FACTORIES[name]
    except KeyError:
        raise ValueError(f"unknown component name: {name!r}") from None
    return factory(game_object)


class GameObject:
    """An object of the scene with a transform, a mesh and components."""

    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self, scene: Any = None, mesh: Mesh | None = None) -> None:
        self.id = next(GameObject._ids)
        self.scene = scene
        self.object_name = "GameObject"
        self.transform = Transform()
        self.mesh = mesh
        self.components: list[Component] = []

    @property
    def name(self) -> str:
        """Display name: the object's kind followed by its id."""
        return f"{self.object_name} {self.id}"

    def model_matrix(self) -> list[float]:
        """The transform as a column-major 4x4 model matrix."""
        return self.transform.matrix().to_column_major()

    def update(self, delta_time: float) -> None:
        for component in self.components:
            component.update(delta_time)

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def add_component_by_name(self, name: str) -> Component | None:
        """Add a new component of the named kind unless one is already there.

        Returns the added component, or None when nothing was added.
        """
        if name not in COMPONENT_NAMES or self.has_component_by_name(name):
            return None
        component = create_component(name, self)
        self.components.append(component)
        return component

    def component_by_name(self, name: str) -> Component | None:
        """The first component with the given name, or None."""
        return next((c for c in self.components if c.name == name), None)

    def component_of_type(self, cls: type[C]) -> C | None:
        """The last component that is an instance of ``cls``, or None."""
        found = None
        for component in self.components:
            if isinstance(component, cls):
                found = component
        return found

    def has_component_by_name(self, name: str) -> bool:
        return any(c.name == name for c in self.components)

    def has_component_of_type(self, cls: type[Component]) -> bool:
        return any(isinstance(c, cls) for c in self.components)

    def delete_component_by_name(self, name: str) -> None:
        """Remove the first component with the given name, if any."""
        for i, component in enumerate(self.components):
            if component.name == name:
                del self.components[i]
                return

    def delete_component_of_type(self, cls: type[Component]) -> None:
        """Remove the first component that is an instance of ``cls``, if any."""
        for i, component in enumerate(self.components):
            if isinstance(component, cls):
                del self.components[i]
                return