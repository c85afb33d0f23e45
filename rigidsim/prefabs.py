"""Ready-made game objects: a floor plane and a rigid body."""

from __future__ import annotations

from typing import Any

from rigidsim.game_object import GameObject
from rigidsim.meshes import CuboidRectangle, Mesh
from rigidsim.physical import Rigidbody


class PlanePrefab(GameObject):
    """A thin grey slab placed below the origin."""

    def __init__(self, scene: Any, width: float, height: float) -> None:
        super().__init__(scene, CuboidRectangle(width, 0.01, height))
        self.object_name = "Plane"
        self.transform.position_y = -2.0
        self.mesh.color = (0.4, 0.4, 0.4, 1.0)


class RigidbodyPrefab(GameObject):
    """A game object carrying a rigid body; a 2x1x1 box unless a mesh is given."""

    def __init__(self, scene: Any, mesh: Mesh | None = None) -> None:
        super().__init__(scene, mesh if mesh is not None else CuboidRectangle(2, 1, 1))
        self.object_name = "Rigidbody"
        self.add_component(Rigidbody(self))