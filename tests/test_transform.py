import math

import pytest

from rigidsim.matrix33 import Matrix33
from rigidsim.quaternion import Quaternion
from rigidsim.transform import Transform
from rigidsim.vector3d import Vector3d


def test_defaults():
    t = Transform()
    assert t.position == Vector3d(0, 0, 0)
    assert (t.scale_x, t.scale_y, t.scale_z) == (1.0, 1.0, 1.0)
    assert t.rotation == Quaternion()
    assert Transform.NAME == "Transform"


def test_position_setter_updates_components():
    t = Transform()
    t.position = Vector3d(1.5, -2.0, 3.25)
    assert (t.position_x, t.position_y, t.position_z) == (1.5, -2.0, 3.25)
    assert t.position == Vector3d(1.5, -2.0, 3.25)


def test_component_change_visible_in_position():
    t = Transform()
    t.position_y = -2
    assert t.position == Vector3d(0, -2, 0)


def test_default_matrix_is_identity():
    m = Transform().matrix()
    assert m.extract_matrix33() == Matrix33([1, 0, 0, 0, 1, 0, 0, 0, 1])
    assert m.translation == Vector3d(0, 0, 0)


def test_matrix_maps_origin_to_position():
    t = Transform()
    t.position = Vector3d(4, 5, 6)
    half = math.sqrt(0.5)
    t.rotation = Quaternion(half, 0, 0, half)
    assert list(t.matrix().transform_position(Vector3d())) == pytest.approx([4, 5, 6])


def test_matrix_rotation_preserves_length():
    t = Transform(rotation=Quaternion(0.5, 0.5, 0.5, 0.5))
    d = Vector3d(1, -2, 2)
    assert t.matrix().transform_direction(d).norm() == pytest.approx(d.norm())


def test_instances_do_not_share_rotation():
    a, b = Transform(), Transform()
    a.rotation.rotate_by_vector(Vector3d(1, 0, 0))
    assert b.rotation == Quaternion()
    assert a.rotation != b.rotation