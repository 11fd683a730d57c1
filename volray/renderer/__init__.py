"""
Экспорт рендер‑компонентов, а также фабрики.
"""

from volray.renderer.base_renderer import BaseRenderer, to_rgb8
from volray.renderer.raytracer import VolumetricRayTracer
from volray.renderer.numba_tracer import NumbaRayTracer

RENDERERS = {
    "python": VolumetricRayTracer,
    "numba": NumbaRayTracer,
}


def create_renderer(backend: str, width: int, height: int,
                    max_distance: float = 20.0) -> BaseRenderer:
    try:
        cls = RENDERERS[backend]
    except KeyError:
        raise ValueError(f"Unknown renderer backend: {backend}") from None
    return cls(width, height, max_distance)


__all__ = [
    "BaseRenderer",
    "VolumetricRayTracer",
    "NumbaRayTracer",
    "RENDERERS",
    "create_renderer",
    "to_rgb8",
]
