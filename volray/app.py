# volray/app.py
# -*- coding: utf-8 -*-
"""
Интерактивный просмотрщик.

* Первый кадр – полное качество.
* Любая применённая команда → быстрый предпросмотр (мало выборок).
* Отпускание 1/2/3/R/G/B → повторный рендер в полном качестве.
Изменения сцены применяются строго между кадрами.
"""

from volray.core.controls import QuitCommand, map_key_event, is_refine_event
from volray.math.vec3 import Vec3
from volray.renderer import create_renderer
from volray.scene import Camera, default_scene
from volray.utils import logger, Config


class Application:
    """Главный цикл просмотрщика."""

    def __init__(self, scene=None, config: Config = None):
        self.cfg = config if config is not None else Config()
        win_cfg = self.cfg.section("window")
        render_cfg = self.cfg.section("render")
        ctrl_cfg = self.cfg.section("controls")

        self.scene = scene if scene is not None else default_scene()
        self.camera = Camera(Vec3(*self.cfg.section("camera")["position"]),
                             win_cfg["width"], win_cfg["height"])
        self.renderer = create_renderer(render_cfg["backend"],
                                        win_cfg["width"], win_cfg["height"],
                                        render_cfg["max_distance"])
        self.preview_samples = int(render_cfg["preview_samples"])
        self.final_samples = int(render_cfg["final_samples"])
        self.density_step = float(ctrl_cfg["density_step"])
        self.color_step = float(ctrl_cfg["color_step"])
        self.frame_limit = int(self.cfg.get("frame_limit", 30))
        self.window = self._create_window(win_cfg)
        self.frame = None

    # -----------------------------------------------------------------
    def _create_window(self, win_cfg):
        from volray.window import Window
        return Window(win_cfg["width"], win_cfg["height"], win_cfg["title"])

    # -----------------------------------------------------------------
    def render(self, num_samples: int):
        self.frame = self.renderer.render(self.scene, self.camera, num_samples)

    # -----------------------------------------------------------------
    def handle_events(self):
        """Применить накопленные события ввода; вернуть нужное число выборок или None."""
        samples = None
        im = self.window.input
        for key, action, mods in im.drain_events():
            cmd = map_key_event(key, action, mods, im.is_key_pressed,
                                self.density_step, self.color_step)
            if isinstance(cmd, QuitCommand):
                logger.info("[App] Closing application...")
                self.window.close()
                return None
            if cmd is not None and cmd.apply(self.scene):
                logger.info("[App] Changes detected, rendering preview...")
                samples = self.preview_samples
            if is_refine_event(key, action):
                logger.info("[App] Performing full quality render...")
                samples = self.final_samples
        return samples

    # -----------------------------------------------------------------
    def run(self):
        logger.info("[App] Starting application...")
        self.render(self.final_samples)
        try:
            while not self.window.should_close():
                self.window.wait_events(1.0 / self.frame_limit)
                samples = self.handle_events()
                if samples is not None:
                    self.render(samples)
                self.window.present(self.frame)
        finally:
            self.window.destroy()
