# volray/scene/objects.py
"""
Геометрические объекты сцены с объёмной (участвующей) средой.

Каждый объект умеет три вещи: пересечься с лучом, вернуть плотность
среды в точке и вернуть цвет в точке. Вариант объекта хранится явно в
поле ``kind`` – сцена выбирает логику изменения параметров по этому тегу,
а не по типу класса.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from volray.math.vec3 import Vec3
from volray.math.ray import Ray, Hit

# Ниже этого |n·d| луч считается параллельным плоскости
PARALLEL_EPS = 1e-6


class ObjectKind(Enum):
    SPHERE = "sphere"
    PLANE = "plane"


class SceneObject(ABC):
    """Базовый класс объекта: цвет + плотность среды."""

    kind: ObjectKind

    def __init__(self, color: Vec3 = None, volume_density: float = 0.0):
        if volume_density < 0.0:
            raise ValueError(f"Volume density must be non-negative, got {volume_density}")
        self.color = color if color is not None else Vec3(1.0, 1.0, 1.0)
        self.volume_density = float(volume_density)

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[Hit]:
        """Ближайшее пересечение с t ≥ 0 или None."""
        pass

    @abstractmethod
    def density_at(self, point: Vec3) -> float:
        """Плотность среды в точке (≥ 0)."""
        pass

    def color_at(self, point: Vec3) -> Vec3:
        # Текстурированные варианты могут переопределить
        return self.color


class Sphere(SceneObject):
    """Сфера с линейным спадом плотности от центра к поверхности."""

    kind = ObjectKind.SPHERE

    def __init__(self,
                 center: Vec3,
                 radius: float,
                 volume_density: float = 0.1,
                 color: Vec3 = None):
        if radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(color, volume_density)
        self.center = center
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> Optional[Hit]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        if a == 0.0:
            return None
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)
        t = (-b - sqrt_d) / (2.0 * a)
        if t < 0.0:
            # начало луча внутри сферы – берём дальний корень
            t = (-b + sqrt_d) / (2.0 * a)
            if t < 0.0:
                return None

        point = ray.at(t)
        return Hit(t=t,
                   point=point,
                   normal=(point - self.center).normalized(),
                   density=self.volume_density)

    def density_at(self, point: Vec3) -> float:
        dist = (point - self.center).length()
        if dist > self.radius:
            return 0.0
        return self.volume_density * (1.0 - dist / self.radius)

    def __repr__(self) -> str:
        return (f"Sphere(center={self.center!r}, radius={self.radius:.3f}, "
                f"density={self.volume_density:.3f}, color={self.color!r})")


class Plane(SceneObject):
    """
    Бесконечная плоскость n·p + distance = 0.

    Плотность однородна во всём пространстве: ненулевая плотность
    плоскости моделирует равномерную среду, а не тонкий слой.
    """

    kind = ObjectKind.PLANE

    def __init__(self,
                 normal: Vec3,
                 distance: float,
                 volume_density: float = 0.0,
                 color: Vec3 = None):
        super().__init__(color, volume_density)
        self.normal = normal.normalized()
        self.distance = float(distance)

    def intersect(self, ray: Ray) -> Optional[Hit]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPS:
            return None

        t = -(self.normal.dot(ray.origin) + self.distance) / denom
        if t < 0.0:
            return None

        return Hit(t=t,
                   point=ray.at(t),
                   normal=self.normal,
                   density=self.volume_density)

    def density_at(self, point: Vec3) -> float:
        return self.volume_density

    def __repr__(self) -> str:
        return (f"Plane(normal={self.normal!r}, distance={self.distance:.3f}, "
                f"density={self.volume_density:.3f}, color={self.color!r})")
