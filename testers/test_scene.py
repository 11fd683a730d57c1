# -*- coding: utf-8 -*-
import logging
import math

import numpy as np
import pytest

from volray.math.vec3 import Vec3
from volray.math.ray import Ray
from volray.scene import Scene, Sphere, Plane, SceneObject


# ----------------------------------------------------------------------
# объёмный свет
# ----------------------------------------------------------------------
def test_red_sphere_scenario(red_scene):
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    total, color = red_scene.integrate_volumetric_light(ray, 20.0, 15)
    assert total > 0.0
    assert color.x > color.y
    assert color.x > color.z


def test_ray_missing_all_media_is_black(red_scene):
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 1, 0))
    total, color = red_scene.integrate_volumetric_light(ray, 20.0, 15)
    assert total == 0.0
    assert color == Vec3(0, 0, 0)


def test_empty_scene_is_black():
    total, color = Scene(Vec3(1, 1, 1), 1.0).integrate_volumetric_light(
        Ray(Vec3(), Vec3(0, 0, 1)))
    assert total == 0.0
    assert color == Vec3()


def test_uniform_medium_matches_closed_form():
    scene = Scene(Vec3(0, 0, 0), 1.0)
    scene.add_object(Plane(Vec3(0, 1, 0), 0.0, 0.5, Vec3(0.2, 0.4, 0.6)))
    ray = Ray(Vec3(0, 0, 1), Vec3(0, 0, 1))

    total, color = scene.integrate_volumetric_light(ray, 2.0, 2)

    # выборки в z = 1 и z = 2; вторая ослаблена exp(-0.5 * 1)
    expected = 0.5 * 1.0 + 0.5 * 0.25 * math.exp(-0.5)
    assert total == pytest.approx(expected)
    assert np.allclose(color.as_np(), [0.2, 0.4, 0.6])


def test_empty_samples_do_not_attenuate():
    scene = Scene(Vec3(0, 0, 10), 1.0)
    scene.add_object(Sphere(Vec3(0, 0, 3), 1.0, 1.0))
    ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, 1))

    # выборки в z = 0, 1, 2 пусты (z = 2 – ровно поверхность), z = 3 – центр
    total, _ = scene.integrate_volumetric_light(ray, 4.0, 4)
    assert total == pytest.approx(1.0 / 49.0)


def test_first_sample_is_at_ray_origin():
    scene = Scene(Vec3(0, 0, 10), 1.0)
    scene.add_object(Sphere(Vec3(0, 0, 0), 1.0, 1.0))
    total, _ = scene.integrate_volumetric_light(
        Ray(Vec3(0, 0, 0), Vec3(0, 0, 1)), 5.0, 1)
    assert total == pytest.approx(1.0 * (1.0 / 100.0) * 5.0)


def test_overlapping_media_blend_by_density():
    scene = Scene(Vec3(0, 0, 10), 1.0)
    scene.add_object(Sphere(Vec3(0, 0, 0), 1.0, 0.3, Vec3(1, 0, 0)))
    scene.add_object(Sphere(Vec3(0, 0, 0), 1.0, 0.1, Vec3(0, 0, 1)))

    assert scene.density_at(Vec3(0, 0, 0)) == pytest.approx(0.4)
    density, sample_color = scene.sample(Vec3(0, 0, 0))
    assert density == pytest.approx(0.4)
    assert np.allclose(sample_color.as_np(), [0.75, 0.0, 0.25])

    _, color = scene.integrate_volumetric_light(
        Ray(Vec3(0, 0, 0), Vec3(0, 0, 1)), 1.0, 1)
    assert np.allclose(color.as_np(), [0.75, 0.0, 0.25])


def test_sample_count_must_be_positive(red_scene):
    with pytest.raises(ValueError):
        red_scene.integrate_volumetric_light(Ray(Vec3(), Vec3(0, 0, 1)), 20.0, 0)


def test_light_intensity_must_be_positive():
    with pytest.raises(ValueError):
        Scene(Vec3(), 0.0)


# ----------------------------------------------------------------------
# изменение объектов
# ----------------------------------------------------------------------
def test_add_object_returns_insertion_index(scene):
    assert len(scene) == 3
    idx = scene.add_object(Sphere(Vec3(0, 3, 5), 0.5))
    assert idx == 3
    assert scene[3].radius == 0.5
    assert [o.kind.value for o in scene] == ["sphere", "sphere", "plane", "sphere"]


def test_adjust_density_never_negative(three_objects):
    for _ in range(3):
        assert three_objects.adjust_density(0, -1.0)
    assert three_objects[0].volume_density == 0.0


def test_adjust_density_preserves_identity(three_objects):
    obj = three_objects[1]
    three_objects.adjust_density(1, 0.25)
    assert three_objects[1] is obj
    assert obj.volume_density == pytest.approx(0.35)
    assert obj.center == Vec3(2, 0, 5)
    assert obj.color == Vec3(0.05, 0.0, 0.0)


def test_adjust_density_on_plane(three_objects):
    three_objects.adjust_density(2, 0.05)
    assert three_objects[2].volume_density == pytest.approx(0.07)
    assert three_objects[2].normal == Vec3(0, 1, 0)


def test_adjust_color_clamps(three_objects):
    three_objects.adjust_color(0, Vec3(0.5, 0.5, 0.5))
    assert three_objects[0].color == Vec3(1.0, 1.0, 1.0)

    three_objects.adjust_color(1, Vec3(-1.0, 0.0, 0.0))
    assert three_objects[1].color == Vec3(0.0, 0.0, 0.0)


def test_zero_deltas_are_idempotent(three_objects):
    before_density = three_objects[0].volume_density
    before_color = three_objects[2].color
    for _ in range(5):
        three_objects.adjust_density(0, 0.0)
        three_objects.adjust_color(2, Vec3(0, 0, 0))
    assert three_objects[0].volume_density == before_density
    assert three_objects[2].color == before_color


def test_zero_color_delta_keeps_out_of_range_color():
    scene = Scene(Vec3(5, 5, 5), 1.0)
    scene.add_object(Sphere(Vec3(), 1.0, color=Vec3(2.0, 0.5, 0.5)))
    scene.adjust_color(0, Vec3())
    assert scene[0].color == Vec3(2.0, 0.5, 0.5)


@pytest.mark.parametrize("index", [5, 3, -1])
def test_invalid_index_is_reported_noop(three_objects, caplog, index):
    before = [(o.volume_density, o.color) for o in three_objects]

    with caplog.at_level(logging.ERROR, logger="VolRay"):
        assert three_objects.adjust_density(index, 1.0) is False
        assert three_objects.adjust_color(index, Vec3(1, 1, 1)) is False

    assert [(o.volume_density, o.color) for o in three_objects] == before
    assert "Wrong object index" in caplog.text


def test_mutation_visible_on_next_integration(red_scene):
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    total_before, _ = red_scene.integrate_volumetric_light(ray, 20.0, 15)
    red_scene.adjust_density(0, 0.4)
    total_after, _ = red_scene.integrate_volumetric_light(ray, 20.0, 15)
    assert total_after > total_before

    red_scene.adjust_density(0, -10.0)
    total_zero, color = red_scene.integrate_volumetric_light(ray, 20.0, 15)
    assert total_zero == 0.0
    assert color == Vec3()


def test_replace_object(three_objects):
    new = Plane(Vec3(0, 0, 1), 1.0)
    assert three_objects.replace_object(1, new)
    assert three_objects[1] is new
    assert three_objects.replace_object(7, new) is False


def test_unknown_object_kind_is_rejected():
    class Cube(SceneObject):
        kind = "cube"

        def intersect(self, ray):
            return None

        def density_at(self, point):
            return 0.0

    with pytest.raises(TypeError):
        Scene(Vec3(), 1.0).add_object(Cube())


def test_objects_view_is_read_only(scene):
    objs = scene.objects
    assert isinstance(objs, tuple)
    assert len(objs) == 3


# ----------------------------------------------------------------------
# упаковка
# ----------------------------------------------------------------------
def test_pack_layout(scene):
    kinds, params, light = scene.pack()
    assert kinds.tolist() == [0, 0, 1]
    assert params.shape == (3, 8)
    assert np.allclose(params[0], [-1.5, 0, 5, 1.0, 0.1, 1.0, 0.2, 0.2])
    assert np.allclose(params[2], [0, 1, 0, 2.0, 0.02, 0.5, 0.5, 1.0])
    assert np.allclose(light, [5, 5, 5, 50])


def test_pack_rejects_unknown_kind(scene):
    scene[0].kind = "cube"
    with pytest.raises(TypeError):
        scene.pack()
    with pytest.raises(TypeError):
        scene.adjust_density(0, 0.1)
