# volray/math/vec3.py
"""
Трёхмерный вектор на базе NumPy (float64).

Неизменяемый: все операции возвращают новый объект, так что вектор можно
безопасно хранить в объектах сцены и передавать между лучами.
"""

import numpy as np
from typing import Iterator, Tuple

# Порог, ниже которого вектор считаем нулевым при нормализации
_NORMALIZE_EPS = 1e-9


class Vec3:
    """Короткий неизменяемый вектор‑3."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)
        self._v.flags.writeable = False

    # -----------------------------------------------------------------
    # свойства (только чтение)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v / scalar))

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(*np.cross(self._v, other._v))

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vec3":
        """Нормализованный вектор; для (почти) нулевого – нулевой вектор."""
        n = self.length()
        if n < _NORMALIZE_EPS:
            return Vec3()
        return Vec3(*(self._v / n))

    def multiply(self, other: "Vec3") -> "Vec3":
        """Покомпонентное умножение (например, для смешивания цветов)."""
        return Vec3(*(self._v * other._v))

    def clamp(self, lo: float = 0.0, hi: float = 1.0) -> "Vec3":
        """Каждая компонента независимо зажимается в [lo, hi]."""
        return Vec3(*np.clip(self._v, lo, hi))

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float64."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
