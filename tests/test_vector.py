import math
import struct

import pytest

from wither.math.vector import Vector2, Vector3


def test_vector2_add_is_commutative_and_sub_inverts():
    a = Vector2(1, 2)
    b = Vector2(-7, 11)
    assert a + b == b + a
    assert a.add(b) == a + b
    assert (a + b).sub(b) == a


def test_vector2_scaling_and_negation():
    a = Vector2(3, -5)
    assert a * 2 == a.multiply(2, 2)
    assert -(-a) == a
    assert a + (-a) == Vector2(0, 0)


def test_vector2_length():
    a = Vector2(3.0, 4.0)
    assert a.length_squared() == 3.0 * 3.0 + 4.0 * 4.0
    assert a.length() == 5.0
    assert math.isclose(a.normalize().length(), 1.0)


def test_vector2_from_vector3_drops_y():
    assert Vector2.from_vector3(Vector3(9, 8, 7)) == Vector2(9, 7)


def test_vector3_arithmetic():
    a = Vector3(1, 2, 3)
    b = Vector3(4, -5, 6)
    assert a + b == b + a
    assert (a + b).sub(b) == a
    assert a * 3 == a.multiply(3, 3, 3)
    assert a.as_tuple() == (1, 2, 3)


def test_vector3_distances():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 7.0)
    assert a.squared_distance_to_vec(b) == b.squared_distance_to_vec(a)
    assert a.squared_distance_to_vec(a) == 0
    assert math.isclose(a.squared_distance_to_vec(b), a.sub(b).length_squared())


def test_vector3_normalize():
    n = Vector3(2.0, -3.0, 6.0).normalize()
    assert math.isclose(n.length(), 1.0)


def test_vector3_pack_round_trip():
    v = Vector3(1.5, -2.25, 100.0)
    assert struct.unpack(">3d", v.pack("f64")) == v.as_tuple()
    assert struct.unpack(">3f", v.pack("f32")) == v.as_tuple()
    iv = Vector3(-1, 300, 32767)
    assert struct.unpack(">3h", iv.pack("i16")) == iv.as_tuple()


def test_vector3_pack_errors():
    with pytest.raises(ValueError):
        Vector3(1, 2, 3).pack("u8")
    with pytest.raises(ValueError):
        Vector3(70000, 0, 0).pack("i16")


def test_vector3_from_sequence():
    assert Vector3.from_sequence([1.0, 2.0, 3.0]) == Vector3(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        Vector3.from_sequence([1.0, 2.0])