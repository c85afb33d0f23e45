import math

import pytest

from rigidsim.matrix33 import Matrix33, SingularMatrixError
from rigidsim.matrix34 import Matrix34
from rigidsim.matrix44 import Matrix44
from rigidsim.quaternion import Quaternion
from rigidsim.vector3d import Vector3d

IDENTITY33 = Matrix33([1, 0, 0, 0, 1, 0, 0, 0, 1])


def _vals(matrix, count):
    return [matrix[k] for k in range(count)]


def _symmetric():
    rotation = Matrix33([2, 1, 0, 1, 3, 0, 0, 0, 4])
    return Matrix34.from_rotation_translation(rotation, Vector3d(1.5, -2.0, 3.0))


def test_default_is_zero():
    assert _vals(Matrix34(), 12) == [0.0] * 12


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        Matrix34([1, 2, 3])


def test_row_column_indexing():
    m = Matrix34(range(12))
    assert m[1, 2] == m[6]
    assert m[2, 3] == m[11]
    with pytest.raises(IndexError):
        m[3, 0]


def test_from_rotation_translation_layout():
    rotation = Matrix33(range(9))
    t = Vector3d(10, 20, 30)
    m = Matrix34.from_rotation_translation(rotation, t)
    for i in range(3):
        for j in range(3):
            assert m[i, j] == rotation[i, j]
    assert (m[0, 3], m[1, 3], m[2, 3]) == (10, 20, 30)
    assert m.translation == t


def test_extract_matrix33_round_trip():
    rotation = Matrix33(range(1, 10))
    m = Matrix34.from_rotation_translation(rotation, Vector3d(1, 2, 3))
    assert m.extract_matrix33() == rotation


def test_matrix44_round_trip():
    m = Matrix34(range(12))
    m44 = m.to_matrix44()
    assert _vals(m44, 16)[12:] == [0.0, 0.0, 0.0, 1.0]
    assert Matrix34.from_matrix44(m44) == m


def test_identity_is_neutral_for_multiplication():
    identity = Matrix34.from_rotation_translation(IDENTITY33, Vector3d())
    m = _symmetric()
    assert m * identity == m
    assert identity * m == m


def test_product_composes_point_transforms():
    a = _symmetric()
    b = Matrix34.from_rotation_translation(Matrix33(range(9)), Vector3d(-1, 4, 2))
    p = Vector3d(0.5, -1.0, 2.0)
    composed = (a * b).transform_position(p)
    step = a.transform_position(b.transform_position(p))
    assert list(composed) == pytest.approx(list(step))


def test_inverse_of_pure_translation():
    m = Matrix34.from_rotation_translation(IDENTITY33, Vector3d(1, 2, 3))
    inv = m.inverse()
    assert inv.extract_matrix33() == IDENTITY33
    assert inv.translation == Vector3d(-1, -2, -3)


def test_inverse_round_trip_symmetric():
    m = _symmetric()
    product = m * m.inverse()
    expected = Matrix34.from_rotation_translation(IDENTITY33, Vector3d())
    assert _vals(product, 12) == pytest.approx(_vals(expected, 12))


def test_inverse_undoes_transform_position():
    m = _symmetric()
    p = Vector3d(3.0, -1.0, 0.25)
    back = m.inverse().transform_position(m.transform_position(p))
    assert list(back) == pytest.approx(list(p))


def test_invert_in_place_matches_inverse():
    m = _symmetric()
    expected = m.inverse()
    m.invert_in_place()
    assert m == expected


def test_singular_inverse_raises():
    with pytest.raises(SingularMatrixError):
        Matrix34().inverse()


def test_identity_orientation_gives_identity_rotation():
    m = Matrix34()
    m.set_orientation_and_position(Quaternion(), Vector3d(4, 5, 6))
    assert m.extract_matrix33() == IDENTITY33
    assert m.translation == Vector3d(4, 5, 6)


def test_transform_direction_ignores_translation():
    m = Matrix34()
    half = math.sqrt(0.5)
    m.set_orientation_and_position(Quaternion(half, 0, half, 0), Vector3d(7, 8, 9))
    d = Vector3d(1, 2, 3)
    assert m.transform_direction(d).norm() == pytest.approx(d.norm())
    moved = m.transform_position(d) - m.transform_direction(d)
    assert list(moved) == pytest.approx([7, 8, 9])


def test_to_column_major_layout():
    m = Matrix34(range(12))
    cols = m.to_column_major()
    assert len(cols) == 16
    assert cols[0:4] == [m[0, 0], m[1, 0], m[2, 0], 0.0]
    assert cols[12:16] == [m[0, 3], m[1, 3], m[2, 3], 1.0]


def test_multiply_rejects_other_types():
    with pytest.raises(TypeError):
        Matrix34() * Matrix44()