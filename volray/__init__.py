"""
VolRay – однопоточный трассировщик лучей с объёмным светом.

Объекты сцены (сферы, плоскости) несут участвующую среду; цвет пикселя
получается ray‑marching'ом по полю плотности с затуханием по
закону Бугера–Ламберта.
"""

from volray.utils import logger
from volray.math import Vec3, Ray, Hit
from volray.scene import (
    Scene, Camera, PointLight, SceneObject, ObjectKind, Sphere, Plane,
    default_scene, single_sphere_scene,
)
from volray.renderer import (
    VolumetricRayTracer,
    NumbaRayTracer,
    create_renderer,
)

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "Ray",
    "Hit",
    "Scene",
    "Camera",
    "PointLight",
    "SceneObject",
    "ObjectKind",
    "Sphere",
    "Plane",
    "default_scene",
    "single_sphere_scene",
    "VolumetricRayTracer",
    "NumbaRayTracer",
    "create_renderer",
]
