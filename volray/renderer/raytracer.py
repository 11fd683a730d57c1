# volray/renderer/raytracer.py
"""
Однопоточный CPU‑трассировщик на чистом Python поверх объектов Scene.

Медленный, но напрямую использует Scene.integrate_volumetric_light –
эталон для numba‑варианта и удобен для маленьких кадров.
"""

import numpy as np

from volray.renderer.base_renderer import BaseRenderer, to_rgb8
from volray.scene.camera import Camera
from volray.utils.logger import logger
from volray.utils.profiler import Profiler


class VolumetricRayTracer(BaseRenderer):
    """Проход по каждому пикселю → луч → объёмный свет → RGB8."""

    def render(self, scene, camera, num_samples: int = 15) -> np.ndarray:
        # размер кадра задаёт рендерер; камера вызывающего не меняется
        if (camera.width, camera.height) != (self.width, self.height):
            camera = Camera(camera.position, self.width, self.height)

        logger.info(f"[Renderer] Rendering scene... (num_samples={num_samples})")
        with Profiler("Render Scene"):
            for y in range(self.height):
                for x in range(self.width):
                    ray = camera.ray_for_pixel(x, y)
                    _, color = scene.integrate_volumetric_light(
                        ray, self.max_distance, num_samples
                    )
                    self.image[y, x] = to_rgb8(color)
        logger.info("[Renderer] Scene render complete.")
        return self.image
