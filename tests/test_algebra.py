import math

import pytest

from rxpaint.algebra import (
    Matrix4,
    Origin,
    Ortho,
    Point2,
    Vector2,
    Vector3,
    Vector4,
)


def test_vector4_dot():
    v1 = Vector4(1, 3, -5, 4)
    v2 = Vector4(4, -2, -1, 3)
    assert v1 * v2 == 15


def test_matrix_times_vector3():
    m = Matrix4.from_translation(Vector3(8.0, 8.0, 0.0))
    assert m * Vector3(1.0, 1.0, 0.0) == Vector3(9.0, 9.0, 0.0)


def test_matrix_times_vector4():
    m = Matrix4.from_translation(Vector3(8.0, 8.0, 0.0))
    assert m * Vector4(1.0, 1.0, 0.0, 1.0) == Vector4(9.0, 9.0, 0.0, 1.0)


def test_matrix_times_point():
    m = Matrix4.from_translation(Vector3(8.0, 8.0, 0.0))
    assert m * Point2(1.0, 1.0) == Point2(9.0, 9.0)


def test_identity_is_neutral():
    m = Matrix4.from_translation(Vector3(3.0, -2.0, 5.0)) * Matrix4.from_scale(2.0)
    identity = Matrix4.identity()
    assert identity * m == m
    assert m * identity == m


def test_translation_composition():
    a = Matrix4.from_translation(Vector3(1.0, 2.0, 3.0))
    b = Matrix4.from_translation(Vector3(4.0, 5.0, 6.0))
    p = Point2(7.0, 7.0)
    assert (a * b) * p == a * (b * p)


def test_from_scale_matches_nonuniform():
    assert Matrix4.from_scale(3.0) == Matrix4.from_nonuniform_scale(3.0, 3.0, 3.0)


def test_scale_applies_to_point():
    m = Matrix4.from_nonuniform_scale(2.0, 4.0, 1.0)
    assert m * Point2(3.0, 5.0) == Point2(6.0, 20.0)


def test_row_and_column_agree():
    m = Matrix4.from_translation(Vector3(8.0, 9.0, 10.0))
    assert m.row(0).w == m.w.x
    assert m.row(1).w == m.w.y
    assert m.to_array()[3] == [8.0, 9.0, 10.0, 1.0]


def test_row_out_of_range():
    with pytest.raises(IndexError):
        Matrix4.identity().row(4)


def test_ortho_origins_flip_y():
    w, h = 64, 32
    top_left = Matrix4.ortho(w, h, Origin.TOP_LEFT)
    bottom_left = Matrix4.ortho(w, h, Origin.BOTTOM_LEFT)
    p = Point2(10.0, 5.0)
    a, b = top_left * p, bottom_left * p
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(-b.y)


def test_ortho_center_maps_to_origin():
    m = Matrix4.ortho(64, 32, Origin.TOP_LEFT)
    center = m * Point2(32.0, 16.0)
    assert center.x == pytest.approx(0.0)
    assert center.y == pytest.approx(0.0)


def test_ortho_matches_projection():
    proj = Ortho(left=0.0, right=20.0, bottom=0.0, top=10.0, near=-1.0, far=1.0)
    assert Matrix4.ortho(20, 10, Origin.BOTTOM_LEFT) == proj.to_matrix()


def test_normalize_unit_length():
    v = Vector2(3.0, -7.0).normalize()
    assert v.magnitude() == pytest.approx(1.0)
    assert math.copysign(1.0, v.y) == -1.0


def test_distance_symmetric():
    a, b = Vector2(1.0, 2.0), Vector2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


def test_vector_arithmetic_round_trip():
    a, b = Vector2(5, 9), Vector2(2, -3)
    assert (a + b) - b == a
    assert a * 2 == a + a


def test_zero_vector():
    assert Vector2.zero().is_zero()
    assert not Vector2(0, 1).is_zero()


def test_extend_chain():
    assert Vector2(1, 2).extend(3).extend(4) == Vector4(1, 2, 3, 4)


def test_map():
    assert Vector2(1.5, 2.5).map(int) == Vector2(1, 2)
    assert Point2(2, 4).map(lambda n: n * 10) == Point2(20, 40)


def test_point_difference_and_add():
    p, q = Point2(1, 1), Point2(4, 6)
    d = q - p
    assert isinstance(d, Vector2)
    assert p + d == q
    assert q - d == p


def test_point_scaling():
    p = Point2(8.0, 4.0)
    assert (p * 2.0) / 2.0 == p


def test_vector4_add_and_scale():
    v = Vector4(1, 2, 3, 4)
    assert v + v == v * 2
    assert Vector2.dot(Vector2(1, 2), Vector2(3, 4)) == Vector4(1, 2, 0, 0) * Vector4(3, 4, 0, 0)