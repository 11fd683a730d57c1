# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: готовые сцены и изолированный Config.
"""

import pytest

from volray.math.vec3 import Vec3
from volray.scene import Scene, Sphere, Plane, default_scene, single_sphere_scene
from volray.utils.config import Config


@pytest.fixture(autouse=True)
def _fresh_config():
    """Config – singleton; каждый тест начинает с чистого экземпляра."""
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def config(tmp_path):
    return Config(str(tmp_path / "config.json"))


@pytest.fixture
def scene():
    """Стандартная сцена: две сферы + плоскость."""
    return default_scene()


@pytest.fixture
def red_scene():
    """Одна красная сфера в (0, 0, 5), радиус 1, плотность 0.1."""
    return single_sphere_scene()


@pytest.fixture
def three_objects():
    s = Scene(Vec3(5.0, 5.0, 5.0), 50.0)
    s.add_object(Sphere(Vec3(0.0, 0.0, 5.0), 1.0, 0.1, Vec3(0.9, 0.9, 0.9)))
    s.add_object(Sphere(Vec3(2.0, 0.0, 5.0), 1.0, 0.1, Vec3(0.05, 0.0, 0.0)))
    s.add_object(Plane(Vec3(0.0, 1.0, 0.0), 2.0, 0.02, Vec3(0.5, 0.5, 1.0)))
    return s
