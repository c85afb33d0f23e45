import pytest

from rigidsim.meshes import CuboidRectangle, Cylinder
from rigidsim.physical import Rigidbody
from rigidsim.prefabs import PlanePrefab, RigidbodyPrefab
from rigidsim.vector3d import Vector3d


def test_plane_prefab_mesh_and_placement():
    scene = object()
    plane = PlanePrefab(scene, 10.0, 20.0)
    assert plane.scene is scene
    assert isinstance(plane.mesh, CuboidRectangle)
    assert (plane.mesh.width, plane.mesh.height, plane.mesh.length) == (10.0, 0.01, 20.0)
    assert plane.transform.position_y == -2.0
    assert plane.mesh.color == (0.4, 0.4, 0.4, 1.0)


def test_plane_prefab_name():
    plane = PlanePrefab(None, 1.0, 1.0)
    assert plane.name == "Plane " + str(plane.id)
    assert plane.components == []


def test_rigidbody_prefab_default_mesh():
    prefab = RigidbodyPrefab(None)
    assert isinstance(prefab.mesh, CuboidRectangle)
    assert (prefab.mesh.width, prefab.mesh.height, prefab.mesh.length) == (2, 1, 1)
    assert prefab.name.startswith("Rigidbody ")


def test_rigidbody_prefab_has_rigidbody():
    prefab = RigidbodyPrefab(None)
    body = prefab.component_of_type(Rigidbody)
    assert isinstance(body, Rigidbody)
    assert body.game_object is prefab
    assert len(prefab.components) == 1


def test_rigidbody_prefab_custom_mesh():
    mesh = Cylinder(1.0, 2.0, 8)
    prefab = RigidbodyPrefab(None, mesh)
    assert prefab.mesh is mesh
    assert prefab.has_component_by_name("Rigidbody")


def test_rigidbody_prefab_can_update():
    prefab = RigidbodyPrefab(None)
    body = prefab.component_of_type(Rigidbody)
    prefab.update(0.1)
    assert body.angular_speed == Vector3d()
    assert body.linear_speed == Vector3d()
    assert body.inertia_tensor[0, 0] == pytest.approx(prefab.mesh.inertia_tensor(1.0)[0, 0])