"""Triangle meshes of the primitive shapes, with their inertia tensors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

from rigidsim.matrix33 import Matrix33

Color = tuple[float, float, float, float]


class Mesh(ABC):
    """Vertices, triangle indices and normals of a shape, plus its colour."""

    NAME: ClassVar[str] = "Mesh"
    mesh_type: ClassVar[str] = "Mesh"

    def __init__(self) -> None:
        self.vertices: list[float] = []
        self.indices: list[int] = []
        self.normals: list[float] = []
        self.vertices_use_indices = True
        self.color: Color = (0.0, 0.0, 0.0, 0.0)

    @abstractmethod
    def inertia_tensor(self, mass: float) -> Matrix33:
        """Inertia tensor of the shape for the given mass."""


class CuboidRectangle(Mesh):
    """An axis-aligned box centred on the origin."""

    mesh_type: ClassVar[str] = "Cuboid_Rectangle"

    def __init__(self, width: float = 1.0, height: float = 1.0, length: float = 1.0) -> None:
        super().__init__()
        self.width = width
        self.height = height
        self.length = length
        self.vertices_use_indices = True

        l2, h2, p2 = width / 2, height / 2, length / 2
        self.vertices = [
            coord
            for sx in (l2, -l2)
            for sy in (h2, -h2)
            for sz in (p2, -p2)
            for coord in (sx, sy, sz)
        ]
        norm = math.sqrt(l2 * l2 + h2 * h2 + p2 * p2)
        self.normals = [v / norm for v in self.vertices]
        self.indices = [
            0, 1, 3,
            0, 2, 3,
            0, 4, 6,
            0, 6, 2,
            0, 1, 5,
            0, 4, 5,
            7, 6, 4,
            7, 4, 5,
            7, 1, 3,
            7, 1, 5,
            7, 2, 6,
            7, 2, 3,
        ]
        self.color = (0.1, 0.8, 0.0, 1.0)

    def inertia_tensor(self, mass: float) -> Matrix33:
        w, h, l = self.width, self.height, self.length
        return Matrix33(
            [
                mass * (h * h + l * l) / 12, 0.0, 0.0,
                0.0, mass * (w * w + l * l) / 12, 0.0,
                0.0, 0.0, mass * (w * w + h * h) / 12,
            ]
        )


class Cube(CuboidRectangle):
    """A box with three equal sides."""

    def __init__(self, length: float = 1.0) -> None:
        super().__init__(length, length, length)
        self.color = (0.1, 0.8, 0.0, 1.0)


class Cylinder(Mesh):
    """A cylinder around the y axis, built from ``rings`` segments."""

    mesh_type: ClassVar[str] = "Cylinder"

    def __init__(self, radius: float = 1.0, height: float = 1.0, rings: int = 16) -> None:
        super().__init__()
        if rings <= 0:
            raise ValueError("a cylinder needs at least one ring")
        self.radius = radius
        self.height = height
        self._generate_points_and_normals(radius, height, rings)
        self._generate_triangles(rings)
        self.color = (0.0, 0.5, 1.0, 1.0)

    def _generate_points_and_normals(self, radius: float, height: float, rings: int) -> None:
        r2 = radius / 2
        h2 = height / 2
        step = 2 * math.pi / rings
        for i in range(rings):
            angle = i * step
            x = r2 * math.cos(angle)
            y = r2 * math.sin(angle)
            self.vertices.extend((x, h2, y, x, -h2, y))
        self.normals = [v / r2 for v in self.vertices]

    def _generate_triangles(self, rings: int) -> None:
        for i in range(rings):
            nxt = (i + 1) % rings
            self.indices.extend((i * 2, i * 2 + 1, nxt * 2, i * 2 + 1, nxt * 2 + 1, nxt * 2))
        for i in range(rings):
            nxt = (i + 1) % rings
            self.indices.extend(
                (i * 2, i * 2 + 1, rings * 2, i * 2 + 1, nxt * 2 + 1, rings * 2 + 1)
            )

    def inertia_tensor(self, mass: float) -> Matrix33:
        r2 = self.radius ** 2
        h2 = self.height ** 2
        side = mass * h2 / 12 + mass * r2 / 4
        axial = mass * r2 / 2
        return Matrix33([side, 0.0, 0.0, 0.0, axial, 0.0, 0.0, 0.0, side])


_MESH_FACTORIES: dict[str, type[Mesh]] = {
    Cylinder.mesh_type: Cylinder,
    CuboidRectangle.mesh_type: CuboidRectangle,
}

MESH_NAMES: tuple[str, ...] = tuple(_MESH_FACTORIES)


def create_mesh(mesh_type: str) -> Mesh:
    """Create a mesh of the named type with its default dimensions."""
    try:
        factory = _MESH_FACTORIES[mesh_type]
    except KeyError:
        raise ValueError(f"unknown mesh type: {mesh_type!r}") from None
    return factory()