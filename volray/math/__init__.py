"""
Математический суб‑пакет: Vec3, Ray, Hit.
"""

from volray.math.vec3 import Vec3
from volray.math.ray import Ray, Hit

__all__ = ["Vec3", "Ray", "Hit"]
