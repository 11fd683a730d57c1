# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from volray.math.vec3 import Vec3
from volray.math.ray import Ray, Hit


def test_vec3_ops():
    a = Vec3(1, 2, 3)
    b = Vec3(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (2 * a).as_np().tolist() == [2, 4, 6]
    assert (a / 2).as_np().tolist() == [0.5, 1, 1.5]
    assert a.dot(b) == pytest.approx(2.0)
    assert a.multiply(b) == Vec3(4, -2, 0)


def test_vec3_is_immutable():
    a = Vec3(1, 2, 3)
    _ = a + Vec3(1, 1, 1)
    assert a == Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        a.x = 5.0
    with pytest.raises(ValueError):
        a._v[0] = 5.0


def test_vec3_normalize():
    v = Vec3(3, 0, 4).normalized()
    assert v.length() == pytest.approx(1.0)
    assert np.allclose(v.as_np(), [0.6, 0.0, 0.8])
    # нулевой (и почти нулевой) вектор нормализуется в ноль
    assert Vec3().normalized() == Vec3()
    assert Vec3(1e-12, 0, 0).normalized() == Vec3()


def test_vec3_clamp_per_component():
    assert Vec3(1.4, -0.95, 0.5).clamp(0.0, 1.0) == Vec3(1.0, 0.0, 0.5)


def test_vec3_hash_and_iter():
    assert hash(Vec3(1, 2, 3)) == hash(Vec3(1, 2, 3))
    assert list(Vec3(1, 2, 3)) == [1.0, 2.0, 3.0]


def test_ray_direction_is_normalized():
    r = Ray(Vec3(0, 0, -5), Vec3(0, 0, 10))
    assert r.direction == Vec3(0, 0, 1)
    assert r.at(2.5) == Vec3(0, 0, -2.5)


def test_ray_zero_direction_degenerates_to_zero():
    r = Ray(Vec3(1, 1, 1), Vec3())
    assert r.direction == Vec3()


def test_hit_defaults_to_no_hit():
    h = Hit()
    assert math.isinf(h.t)
    assert not h.is_hit
    assert h.density == 0.0
