import pytest

from rigidsim.colliders import ParticleCollider, RigidbodySphereCollider
from rigidsim.component import COMPONENT_NAMES, Component


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component(object())


def test_game_object_is_kept():
    owner = object()
    assert ParticleCollider(owner).game_object is owner


def test_name_comes_from_class():
    assert ParticleCollider(None).name == "Particle_Collider"
    assert RigidbodySphereCollider(None, 1.0).name == "Rigidbody_Sphere_Collider"


def test_component_names_order():
    assert COMPONENT_NAMES.index("Rigidbody") == 0
    assert COMPONENT_NAMES.index("Particle") == 1
    assert ParticleCollider(None).name == COMPONENT_NAMES[-1]
    assert len(set(COMPONENT_NAMES)) == len(COMPONENT_NAMES)