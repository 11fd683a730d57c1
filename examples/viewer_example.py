import volray as vr
from volray.app import Application
from volray.utils import logger


if __name__ == "__main__":
    logger.info("Starting viewer example...")

    # Три сферы вместо стандартной сцены; клавиши 1/2/3 выбирают объект
    scene = vr.Scene(vr.Vec3(0.0, 6.0, 3.0), 80.0)
    scene.add_object(vr.Sphere(vr.Vec3(-2.2, 0.0, 5.0), 1.0, 0.15, vr.Vec3(1.0, 0.3, 0.3)))
    scene.add_object(vr.Sphere(vr.Vec3(0.0, 0.0, 5.0), 1.0, 0.15, vr.Vec3(0.3, 1.0, 0.3)))
    scene.add_object(vr.Sphere(vr.Vec3(2.2, 0.0, 5.0), 1.0, 0.15, vr.Vec3(0.3, 0.3, 1.0)))

    Application(scene=scene).run()
