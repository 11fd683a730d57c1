"""
Готовые сцены: стандартная (две сферы + плоскость) и одиночная сфера.
"""

from volray.math.vec3 import Vec3
from volray.scene.objects import Sphere, Plane
from volray.scene.scene import Scene
from volray.utils.logger import logger


def default_scene() -> Scene:
    scene = Scene(Vec3(5.0, 5.0, 5.0), 50.0)

    scene.add_object(Sphere(Vec3(-1.5, 0.0, 5.0), 1.0, 0.1, Vec3(1.0, 0.2, 0.2)))
    scene.add_object(Sphere(Vec3(1.5, 0.0, 5.0), 1.0, 0.1, Vec3(0.2, 1.0, 0.2)))
    scene.add_object(Plane(Vec3(0.0, 1.0, 0.0), 2.0, 0.02, Vec3(0.5, 0.5, 1.0)))

    logger.info("[Scene] Scene created: 2 spheres, 1 plane.")
    return scene


def single_sphere_scene(density: float = 0.1, color: Vec3 = None) -> Scene:
    scene = Scene(Vec3(5.0, 5.0, 5.0), 50.0)
    scene.add_object(Sphere(Vec3(0.0, 0.0, 5.0), 1.0, density,
                            color if color is not None else Vec3(1.0, 0.0, 0.0)))
    return scene
