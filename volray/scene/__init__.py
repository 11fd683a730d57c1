"""
Пакет scene – объекты с объёмной средой, свет, камера и сама сцена.
"""

from volray.scene.objects import SceneObject, ObjectKind, Sphere, Plane
from volray.scene.light import PointLight
from volray.scene.camera import Camera
from volray.scene.scene import Scene
from volray.scene.presets import default_scene, single_sphere_scene

__all__ = ["SceneObject", "ObjectKind", "Sphere", "Plane", "PointLight",
           "Camera", "Scene", "default_scene", "single_sphere_scene"]
