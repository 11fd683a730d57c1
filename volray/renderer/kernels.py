# volray/renderer/kernels.py
"""
numba‑ядро объёмного трассировщика.

Работает со снимком сцены из Scene.pack() и повторяет
Scene.integrate_volumetric_light выборка в выборку, только без
Python‑объектов в горячем цикле. Компилируется в однопоточный CPU‑код.
"""

import math

from numba import njit

from volray.scene.light import MIN_DIST_SQ
from volray.scene.objects import ObjectKind
from volray.scene.scene import KIND_CODES, LIGHT_EPS

KIND_SPHERE = KIND_CODES[ObjectKind.SPHERE]
KIND_PLANE = KIND_CODES[ObjectKind.PLANE]


# -------------------------------------------------------------
@njit
def density_at(kind, p, px, py, pz):
    """Плотность одного упакованного объекта в точке (px, py, pz)."""
    if kind == KIND_SPHERE:
        dx = px - p[0]
        dy = py - p[1]
        dz = pz - p[2]
        dist = math.sqrt(dx * dx + dy * dy + dz * dz)
        if dist > p[3]:
            return 0.0
        return p[4] * (1.0 - dist / p[3])
    # плоскость: однородная плотность везде
    return p[4]


# -------------------------------------------------------------
@njit
def integrate_ray(ox, oy, oz, dx, dy, dz,
                  max_distance, num_samples,
                  kinds, params, light):
    """Возвращает (total_light, r, g, b) для одного луча."""
    step = max_distance / num_samples
    total = 0.0
    acc_r = 0.0
    acc_g = 0.0
    acc_b = 0.0
    transmittance = 1.0

    for i in range(num_samples):
        t = i * step
        px = ox + dx * t
        py = oy + dy * t
        pz = oz + dz * t

        density = 0.0
        cr = 0.0
        cg = 0.0
        cb = 0.0
        for k in range(kinds.shape[0]):
            d = density_at(kinds[k], params[k], px, py, pz)
            if d > 0.0:
                density += d
                cr += params[k, 5] * d
                cg += params[k, 6] * d
                cb += params[k, 7] * d

        if density <= 0.0:
            continue

        cr /= density
        cg /= density
        cb /= density

        lx = light[0] - px
        ly = light[1] - py
        lz = light[2] - pz
        dist_sq = lx * lx + ly * ly + lz * lz
        if dist_sq < MIN_DIST_SQ:
            dist_sq = MIN_DIST_SQ

        contribution = density * (light[3] / dist_sq) * step * transmittance
        total += contribution
        acc_r += cr * contribution
        acc_g += cg * contribution
        acc_b += cb * contribution
        transmittance *= math.exp(-density * step)

    if total > LIGHT_EPS:
        return total, acc_r / total, acc_g / total, acc_b / total
    return total, 0.0, 0.0, 0.0


# -------------------------------------------------------------
@njit
def kernel_volumetric(width, height, cam_pos,
                      max_distance, num_samples,
                      kinds, params, light,
                      out_image):
    """
    Проход по всем пикселям кадра:
        - луч из cam_pos через (u, v, 1)
        - объёмный свет вдоль луча
        - цвет → uint8, clamp(c * 255, 0, 255)
    """
    for y in range(height):
        v = (height - 2.0 * y) / height
        for x in range(width):
            u = (2.0 * x - width) / height
            norm = math.sqrt(u * u + v * v + 1.0)

            _, r, g, b = integrate_ray(
                cam_pos[0], cam_pos[1], cam_pos[2],
                u / norm, v / norm, 1.0 / norm,
                max_distance, num_samples,
                kinds, params, light,
            )
            out_image[y, x, 0] = int(min(255.0, max(0.0, r * 255.0)))
            out_image[y, x, 1] = int(min(255.0, max(0.0, g * 255.0)))
            out_image[y, x, 2] = int(min(255.0, max(0.0, b * 255.0)))
