# volray/math/ray.py
"""
Луч и запись о пересечении. Оба – короткоживущие объекты на один вызов.
"""

import math

from volray.math.vec3 import Vec3


class Ray:
    """Луч: origin + нормализованное направление."""

    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vec3, direction: Vec3):
        self.origin = origin
        # Нулевое направление превращается в нулевой вектор – вызывающий
        # код не должен строить такие лучи.
        self.direction = direction.normalized()

    def at(self, t: float) -> Vec3:
        """Точка на луче на расстоянии t от начала."""
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"


class Hit:
    """Результат теста пересечения."""

    __slots__ = ("t", "point", "normal", "density")

    def __init__(self,
                 t: float = math.inf,
                 point: Vec3 = None,
                 normal: Vec3 = None,
                 density: float = 0.0):
        self.t = t                                  # расстояние вдоль луча
        self.point = point if point is not None else Vec3()
        self.normal = normal if normal is not None else Vec3()
        self.density = density                      # плотность среды на поверхности

    @property
    def is_hit(self) -> bool:
        return math.isfinite(self.t)

    def __repr__(self) -> str:
        return (f"Hit(t={self.t:.3f}, point={self.point!r}, "
                f"normal={self.normal!r}, density={self.density:.3f})")
