# -*- coding: utf-8 -*-
import pytest

from volray.math.vec3 import Vec3
from volray.math.ray import Ray
from volray.scene.objects import Sphere, Plane, ObjectKind


def make_sphere(density=0.5):
    return Sphere(Vec3(0, 0, 0), 2.0, density, Vec3(1, 0, 0))


def test_sphere_density_profile():
    s = make_sphere()
    assert s.kind is ObjectKind.SPHERE
    assert s.density_at(Vec3(0, 0, 0)) == pytest.approx(0.5)
    assert s.density_at(Vec3(1, 0, 0)) == pytest.approx(0.25)
    assert s.density_at(Vec3(0, 2, 0)) == 0.0
    assert s.density_at(Vec3(0, 0, 3)) == 0.0


def test_sphere_density_is_linear_inside():
    s = make_sphere(1.0)
    values = [s.density_at(Vec3(0, 0, d)) for d in (0.0, 0.5, 1.0, 1.5)]
    assert values == pytest.approx([1.0, 0.75, 0.5, 0.25])


def test_sphere_intersect_from_outside():
    s = Sphere(Vec3(0, 0, 0), 1.0, 0.1)
    hit = s.intersect(Ray(Vec3(0, 0, -5), Vec3(0, 0, 1)))
    assert hit is not None
    assert hit.t == pytest.approx(4.0)
    assert hit.point.z == pytest.approx(-1.0)
    assert hit.normal.z == pytest.approx(-1.0)
    assert hit.density == pytest.approx(0.1)


def test_sphere_intersect_from_inside_uses_far_root():
    s = Sphere(Vec3(0, 0, 0), 1.0)
    hit = s.intersect(Ray(Vec3(0, 0, 0), Vec3(1, 0, 0)))
    assert hit.t == pytest.approx(1.0)
    assert hit.normal.x == pytest.approx(1.0)


def test_sphere_behind_or_missed():
    s = Sphere(Vec3(0, 0, 0), 1.0)
    assert s.intersect(Ray(Vec3(0, 0, 5), Vec3(0, 0, 1))) is None
    assert s.intersect(Ray(Vec3(0, 5, -5), Vec3(0, 0, 1))) is None


def test_sphere_zero_direction_is_no_hit():
    s = Sphere(Vec3(0, 0, 0), 1.0)
    assert s.intersect(Ray(Vec3(0, 0, -5), Vec3())) is None


def test_sphere_rejects_bad_parameters():
    with pytest.raises(ValueError):
        Sphere(Vec3(), 0.0)
    with pytest.raises(ValueError):
        Sphere(Vec3(), 1.0, -0.1)


def test_plane_intersect():
    p = Plane(Vec3(0, 2, 0), 2.0, 0.02)
    assert p.kind is ObjectKind.PLANE
    assert p.normal == Vec3(0, 1, 0)

    hit = p.intersect(Ray(Vec3(0, 0, 0), Vec3(0, -1, 0)))
    assert hit.t == pytest.approx(2.0)
    assert hit.point.y == pytest.approx(-2.0)
    assert hit.normal == Vec3(0, 1, 0)
    assert hit.density == pytest.approx(0.02)


def test_plane_parallel_and_behind():
    p = Plane(Vec3(0, 1, 0), 2.0)
    assert p.intersect(Ray(Vec3(0, 0, 0), Vec3(1, 0, 0))) is None
    assert p.intersect(Ray(Vec3(0, 0, 0), Vec3(0, 1, 0))) is None


def test_plane_density_is_uniform():
    p = Plane(Vec3(0, 1, 0), 2.0, 0.3)
    for point in (Vec3(), Vec3(100, -50, 3), Vec3(0, -2, 0)):
        assert p.density_at(point) == pytest.approx(0.3)
    assert Plane(Vec3(0, 1, 0), 0.0).density_at(Vec3()) == 0.0


def test_color_at_returns_base_color():
    s = make_sphere()
    assert s.color_at(Vec3(10, 10, 10)) == Vec3(1, 0, 0)
    assert Plane(Vec3(0, 1, 0), 0.0).color_at(Vec3()) == Vec3(1, 1, 1)
