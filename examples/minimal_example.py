import volray as vr
from volray.utils import logger, save_image


def create_fog_scene():
    """Минимальная сцена для отладки: туманная сфера над слабой дымкой"""
    scene = vr.Scene(vr.Vec3(5.0, 5.0, 5.0), 50.0)
    scene.add_object(vr.Sphere(vr.Vec3(0.0, 0.0, 5.0), 1.5, 0.2, vr.Vec3(0.9, 0.6, 0.2)))
    scene.add_object(vr.Plane(vr.Vec3(0.0, 1.0, 0.0), 2.0, 0.01, vr.Vec3(0.3, 0.3, 0.8)))
    return scene


if __name__ == "__main__":
    logger.info("Starting minimal example...")

    scene = create_fog_scene()
    camera = vr.Camera(vr.Vec3(0.0, 0.0, -5.0), width=320, height=240)
    renderer = vr.create_renderer("numba", camera.width, camera.height)

    # Быстрый предпросмотр, затем кадр в полном качестве
    save_image(renderer.render(scene, camera, num_samples=5), "preview.png")

    scene.adjust_density(0, 0.1)
    scene.adjust_color(1, vr.Vec3(0.0, 0.0, 0.2))
    save_image(renderer.render(scene, camera, num_samples=15), "final.png")

    logger.info("Done.")
