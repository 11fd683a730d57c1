# -*- coding: utf-8 -*-
"""
Абстрактный базовый рендерер.
"""

from abc import ABC, abstractmethod

import numpy as np

class BaseRenderer(ABC):
    def __init__(self, width: int, height: int, max_distance: float = 20.0):
        self.max_distance = float(max_distance)
        self.resize(width, height)

    @abstractmethod
    def render(self, scene, camera, num_samples: int = 15) -> np.ndarray:
        """Отрисовать один кадр, вернуть (H, W, 3) uint8."""
        pass

    def resize(self, w: int, h: int) -> None:
        """Обновить размер кадра."""
        if w <= 0 or h <= 0:
            raise ValueError(f"Invalid frame size {w}x{h}")
        self.width, self.height = int(w), int(h)
        self.image = np.zeros((self.height, self.width, 3), dtype=np.uint8)


def to_rgb8(color) -> tuple:
    """Цвет ~[0, 1] → (r, g, b) в 0..255: clamp(c * 255, 0, 255)."""
    return tuple(int(min(255.0, max(0.0, c * 255.0))) for c in color)
