# volray/scene/scene.py
"""
Сцена: упорядоченный список объектов + один точечный источник света.

Здесь живёт основной алгоритм – ray‑marching по полю плотности с
однократным рассеянием и экспоненциальным затуханием (закон Бугера–Ламберта),
а также операции изменения плотности/цвета объектов между кадрами.
"""

import math
from typing import Iterator, Optional, Tuple

import numpy as np

from volray.math.vec3 import Vec3
from volray.math.ray import Ray
from volray.scene.light import PointLight
from volray.scene.objects import SceneObject, ObjectKind
from volray.utils.logger import logger

DEFAULT_MAX_DISTANCE = 20.0
DEFAULT_NUM_SAMPLES = 15
# Ниже этого суммарного света цвет считаем чёрным
LIGHT_EPS = 1e-9

# Коды вариантов в упакованном представлении (см. Scene.pack)
KIND_CODES = {ObjectKind.SPHERE: 0, ObjectKind.PLANE: 1}
PACKED_WIDTH = 8


def _kind_label(obj: SceneObject) -> str:
    if obj.kind is ObjectKind.SPHERE:
        return "sphere"
    elif obj.kind is ObjectKind.PLANE:
        return "plane"
    raise TypeError(f"Unknown scene object kind: {obj.kind!r}")


class Scene:
    """Упорядоченная коллекция объектов с общим источником света."""

    def __init__(self, light_position: Vec3 = None, light_intensity: float = 1.0):
        self.light = PointLight(light_position, light_intensity)
        self._objects: list[SceneObject] = []

    # -----------------------------------------------------------------
    # коллекция объектов
    # -----------------------------------------------------------------
    def add_object(self, obj: SceneObject) -> int:
        """Добавить объект в конец, вернуть его индекс."""
        _kind_label(obj)
        self._objects.append(obj)
        index = len(self._objects) - 1
        logger.debug(f"[Scene] Added {obj!r} at index {index}")
        return index

    def replace_object(self, index: int, obj: SceneObject) -> bool:
        """Заменить объект на позиции index; старый объект отбрасывается."""
        if self._get(index, "replace_object") is None:
            return False
        _kind_label(obj)
        self._objects[index] = obj
        return True

    @property
    def objects(self) -> Tuple[SceneObject, ...]:
        return tuple(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __getitem__(self, index: int) -> SceneObject:
        return self._objects[index]

    def __iter__(self) -> Iterator[SceneObject]:
        return iter(self._objects)

    def _get(self, index: int, operation: str) -> Optional[SceneObject]:
        if not 0 <= index < len(self._objects):
            logger.error(
                f"[Scene] Wrong object index {index} for {operation} "
                f"(scene has {len(self._objects)} objects)"
            )
            return None
        return self._objects[index]

    # -----------------------------------------------------------------
    # выборка поля плотности
    # -----------------------------------------------------------------
    def density_at(self, point: Vec3) -> float:
        return sum(obj.density_at(point) for obj in self._objects)

    def sample(self, point: Vec3) -> Tuple[float, Vec3]:
        """
        Суммарная плотность в точке и цвет, усреднённый с весами плотностей.
        При нулевой плотности цвет – чёрный.
        """
        density = 0.0
        weighted = Vec3()
        for obj in self._objects:
            obj_density = obj.density_at(point)
            if obj_density > 0.0:
                density += obj_density
                weighted = weighted + obj.color_at(point) * obj_density
        if density > 0.0:
            return density, weighted / density
        return 0.0, Vec3()

    # -----------------------------------------------------------------
    # объёмный свет
    # -----------------------------------------------------------------
    def integrate_volumetric_light(self,
                                   ray: Ray,
                                   max_distance: float = DEFAULT_MAX_DISTANCE,
                                   num_samples: int = DEFAULT_NUM_SAMPLES
                                   ) -> Tuple[float, Vec3]:
        """
        Ray‑marching вдоль луча: num_samples равных шагов от t = 0.

        Возвращает (суммарный свет, цвет). Тени и многократное рассеяние
        не учитываются: вклад каждой выборки зависит только от плотности,
        расстояния до света и накопленного пропускания.
        """
        if num_samples < 1:
            raise ValueError(f"num_samples must be >= 1, got {num_samples}")

        step = max_distance / num_samples
        total_light = 0.0
        accumulated = Vec3()
        transmittance = 1.0

        for i in range(num_samples):
            point = ray.at(i * step)
            density, sample_color = self.sample(point)
            if density <= 0.0:
                continue

            contribution = density * self.light.falloff(point) * step * transmittance
            total_light += contribution
            accumulated = accumulated + sample_color * contribution

            # пропускание только убывает и не обновляется на пустых выборках
            transmittance *= math.exp(-density * step)

        if total_light > LIGHT_EPS:
            return total_light, accumulated / total_light
        return total_light, Vec3()

    # -----------------------------------------------------------------
    # изменение объектов между кадрами
    # -----------------------------------------------------------------
    def adjust_density(self, index: int, delta: float) -> bool:
        """Изменить плотность объекта на delta (не ниже нуля)."""
        obj = self._get(index, "adjust_density")
        if obj is None:
            return False

        label = _kind_label(obj)
        old_density = obj.volume_density
        obj.volume_density = max(0.0, old_density + delta)
        logger.info(
            f"[Scene] Changing {label} {index} density from "
            f"{old_density:.3f} to {obj.volume_density:.3f}"
        )
        return True

    def adjust_color(self, index: int, color_delta: Vec3) -> bool:
        """Сдвинуть цвет объекта на color_delta, каждая компонента в [0, 1]."""
        obj = self._get(index, "adjust_color")
        if obj is None:
            return False

        label = _kind_label(obj)
        old_color = obj.color
        # нулевой сдвиг не трогает цвет, даже если он вне [0, 1]
        if color_delta != Vec3():
            obj.color = (old_color + color_delta).clamp(0.0, 1.0)
        logger.info(
            f"[Scene] Changing {label} {index} color from "
            f"{old_color.to_tuple()} to {obj.color.to_tuple()}"
        )
        return True

    # -----------------------------------------------------------------
    # упаковка для numba‑ядра
    # -----------------------------------------------------------------
    def pack(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Снимок сцены в виде плоских массивов:
            kinds  – int32[N]: 0 = сфера, 1 = плоскость
            params – float64[N, 8]:
                сфера     (cx, cy, cz, radius,   density, r, g, b)
                плоскость (nx, ny, nz, distance, density, r, g, b)
            light  – float64[4]: (x, y, z, intensity)
        """
        kinds = np.zeros(len(self._objects), dtype=np.int32)
        params = np.zeros((len(self._objects), PACKED_WIDTH), dtype=np.float64)

        for i, obj in enumerate(self._objects):
            if obj.kind is ObjectKind.SPHERE:
                params[i, 0:3] = obj.center.as_np()
                params[i, 3] = obj.radius
            elif obj.kind is ObjectKind.PLANE:
                params[i, 0:3] = obj.normal.as_np()
                params[i, 3] = obj.distance
            else:
                raise TypeError(f"Unknown scene object kind: {obj.kind!r}")
            kinds[i] = KIND_CODES[obj.kind]
            params[i, 4] = obj.volume_density
            params[i, 5:8] = obj.color.as_np()

        light = np.array([self.light.position.x,
                          self.light.position.y,
                          self.light.position.z,
                          self.light.intensity], dtype=np.float64)
        return kinds, params, light

    def __repr__(self) -> str:
        return f"Scene({len(self._objects)} objects, light={self.light!r})"
