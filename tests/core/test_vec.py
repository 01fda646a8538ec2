import math

import numpy as np
import pytest

from pursuit.core.vec import Vec3


def test_arithmetic_and_products():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-1.0, 0.5, 2.0)
    assert a + b == Vec3(0.0, 2.5, 5.0)
    assert a - b == Vec3(2.0, 1.5, 1.0)
    assert 2.0 * a == Vec3(2.0, 4.0, 6.0)
    assert a / 2.0 == Vec3(0.5, 1.0, 1.5)
    assert a.dot(b) == pytest.approx(-1.0 + 1.0 + 6.0)
    assert Vec3(3.0, 4.0, 0.0).norm() == pytest.approx(5.0)
    assert Vec3(3.0, 4.0, 0.0).sqr_norm() == pytest.approx(25.0)


def test_rotation_about_vertical_axis_keeps_z():
    v = Vec3(1.0, 0.0, 2.0).rotated_z(math.pi / 2)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)
    assert v.z == 2.0


def test_heading_and_lerp():
    assert Vec3(0.0, -1.0, 5.0).heading() == pytest.approx(-math.pi / 2)
    mid = Vec3(0.0, 0.0, 0.0).lerp(Vec3(2.0, 4.0, -2.0), 0.5)
    assert mid == Vec3(1.0, 2.0, -1.0)


def test_limit_and_normalized():
    assert Vec3(10.0, 0.0, 0.0).limit(2.0) == Vec3(2.0, 0.0, 0.0)
    assert Vec3(1.0, 0.0, 0.0).limit(2.0) == Vec3(1.0, 0.0, 0.0)
    assert Vec3().normalized() == Vec3()
    assert Vec3(0.0, 0.0, 4.0).normalized() == Vec3(0.0, 0.0, 1.0)


def test_conversions():
    v = Vec3(1.5, -2.0, 0.25)
    assert Vec3.from_dict(v.to_dict()) == v
    assert Vec3.from_dict({"x": 1.0}) == Vec3(1.0, 0.0, 0.0)
    np.testing.assert_allclose(v.to_array(), [1.5, -2.0, 0.25])
    assert Vec3.from_any([1, 2, 3]) == Vec3(1.0, 2.0, 3.0)
    assert Vec3.from_any({"y": 2}) == Vec3(0.0, 2.0, 0.0)
    assert Vec3.from_any(v) is v
    with pytest.raises(ValueError):
        Vec3.from_any([1, 2])


def test_is_finite():
    assert Vec3(1.0, 2.0, 3.0).is_finite()
    assert not Vec3(float("nan"), 0.0, 0.0).is_finite()
    assert not Vec3(0.0, float("inf"), 0.0).is_finite()
