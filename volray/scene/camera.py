"""
Камера‑pinhole: перевод пикселя в луч.
"""

from volray.math.vec3 import Vec3
from volray.math.ray import Ray

class Camera:
    """
    Неподвижная камера, смотрящая вдоль +z.

    Пиксель (x, y) отображается на плоскость z = 1:
        u = (2x - W) / H,   v = (H - 2y) / H
    Строка 0 – верх кадра, +y мира смотрит вверх.
    """
    def __init__(self, position: Vec3 = None, width: int = 800, height: int = 600):
        self.position = position if position is not None else Vec3(0.0, 0.0, -5.0)
        self.resize(width, height)

    def resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid viewport size {width}x{height}")
        self.width, self.height = int(width), int(height)

    def view_plane(self, x: int, y: int):
        """Координаты (u, v) пикселя на плоскости z = 1."""
        u = (2.0 * x - self.width) / self.height
        v = (self.height - 2.0 * y) / self.height
        return u, v

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        u, v = self.view_plane(x, y)
        return Ray(self.position, Vec3(u, v, 1.0))

    def __repr__(self) -> str:
        return f"Camera(position={self.position!r}, {self.width}x{self.height})"
