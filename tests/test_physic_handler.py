import pytest

from rigidsim.colliders import ParticleCollider
from rigidsim.game_object import GameObject
from rigidsim.physic_handler import PhysicHandler
from rigidsim.physical import Particle, Rigidbody
from rigidsim.quaternion import Quaternion
from rigidsim.vector3d import Vector3d


def test_particle_moves_by_speed_times_dt():
    go = GameObject()
    particle = Particle(go)
    particle.linear_speed = Vector3d(1.0, 2.0, 3.0)
    go.add_component(particle)
    PhysicHandler().update(go, 0.5)
    pos = go.transform.position
    assert pos.x == pytest.approx(0.5)
    assert pos.y == pytest.approx(1.0)
    assert pos.z == pytest.approx(1.5)


def test_object_without_physical_component_is_untouched():
    go = GameObject()
    go.add_component(ParticleCollider(go))
    go.transform.position = Vector3d(4.0, 5.0, 6.0)
    PhysicHandler().update(go, 1.0)
    assert go.transform.position == Vector3d(4.0, 5.0, 6.0)
    assert go.transform.rotation == Quaternion()


def test_particle_does_not_rotate():
    go = GameObject()
    go.add_component(Particle(go))
    PhysicHandler().update(go, 1.0)
    assert go.transform.rotation == Quaternion()


def test_rigidbody_without_angular_speed_keeps_identity_rotation():
    go = GameObject()
    go.add_component(Rigidbody(go))
    PhysicHandler().update(go, 1.0)
    assert go.transform.rotation == Quaternion()


def test_rigidbody_rotation_follows_angular_speed():
    go = GameObject()
    body = Rigidbody(go)
    body.angular_speed = Vector3d(0.0, 1.0, 0.0)
    go.add_component(body)
    PhysicHandler().update(go, 0.2)

    expected = Quaternion()
    expected.update_by_angular_speed(Vector3d(0.0, 1.0, 0.0), 0.2)
    rotation = go.transform.rotation
    assert list(rotation) == pytest.approx(list(expected))
    assert rotation.norm() == pytest.approx(1.0)
    assert rotation != Quaternion()


def test_rigidbody_also_translates():
    go = GameObject()
    body = Rigidbody(go)
    body.linear_speed = Vector3d(0.0, -2.0, 0.0)
    go.add_component(body)
    PhysicHandler().update(go, 1.0)
    assert go.transform.position.y == pytest.approx(-2.0)