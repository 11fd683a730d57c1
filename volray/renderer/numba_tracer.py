# volray/renderer/numba_tracer.py
"""
Трассировщик на numba‑ядре: Scene.pack() → kernel_volumetric → RGB8.
"""

import numpy as np

from volray.renderer.base_renderer import BaseRenderer
from volray.renderer.kernels import kernel_volumetric
from volray.utils.logger import logger
from volray.utils.profiler import Profiler


class NumbaRayTracer(BaseRenderer):
    """Тот же алгоритм, что у VolumetricRayTracer, но в скомпилированном цикле."""

    def render(self, scene, camera, num_samples: int = 15) -> np.ndarray:
        if num_samples < 1:
            raise ValueError(f"num_samples must be >= 1, got {num_samples}")

        kinds, params, light = scene.pack()
        cam_pos = camera.position.as_np()

        logger.info(f"[Renderer] Rendering scene... (num_samples={num_samples})")
        with Profiler("Render Scene"):
            kernel_volumetric(
                self.width, self.height, cam_pos,
                self.max_distance, int(num_samples),
                kinds, params, light,
                self.image,
            )
        logger.info("[Renderer] Scene render complete.")
        return self.image
