# volray/scene/light.py
# ---------------------------------------------------------------
# Точечный источник света: позиция + интенсивность.
# Освещённость убывает по закону обратных квадратов.
# ---------------------------------------------------------------

from volray.math.vec3 import Vec3

# Минимальный квадрат расстояния до источника (точка совпала со светом)
MIN_DIST_SQ = 1e-12


class PointLight:
    """Точечный свет."""
    def __init__(self, position: Vec3 = None, intensity: float = 1.0):
        if intensity <= 0.0:
            raise ValueError(f"Light intensity must be positive, got {intensity}")
        self.position = position if position is not None else Vec3()
        self.intensity = float(intensity)

    def falloff(self, point: Vec3) -> float:
        """intensity / d² от источника до точки."""
        to_light = self.position - point
        dist_sq = max(to_light.dot(to_light), MIN_DIST_SQ)
        return self.intensity / dist_sq

    def __repr__(self) -> str:
        return f"PointLight(position={self.position!r}, intensity={self.intensity:.3f})"
