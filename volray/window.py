"""
Окно + GLFW‑контекст (legacy OpenGL, вывод кадра через glDrawPixels).
"""

import glfw
import numpy as np
from OpenGL import GL

from volray.core.input import InputManager
from volray.utils.logger import logger, gl_check_error

class Window:
    """Окно + GLFW‑контекст."""
    def __init__(self, width: int = 800, height: int = 600, title: str = "VolRay"):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 2)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 1)
        glfw.window_hint(glfw.RESIZABLE, glfw.FALSE)

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.width, self.height = width, height
        self.title = title
        self.input = InputManager(self.handle)

        glfw.set_framebuffer_size_callback(self.handle, self._on_resize)
        self.set_vsync(True)
        logger.info(f"[Window] Created window with size: {width}x{height}")

    def _on_resize(self, _win, w, h):
        GL.glViewport(0, 0, w, h)

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def present(self, image: np.ndarray):
        """Загрузить RGB8‑кадр (строка 0 – верх) и показать его."""
        GL.glClearColor(0.0, 0.0, 0.0, 1.0)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)

        # glDrawPixels рисует снизу вверх
        pixels = np.ascontiguousarray(np.flipud(image))
        GL.glPixelStorei(GL.GL_UNPACK_ALIGNMENT, 1)
        GL.glRasterPos2f(-1.0, -1.0)
        GL.glDrawPixels(pixels.shape[1], pixels.shape[0],
                        GL.GL_RGB, GL.GL_UNSIGNED_BYTE, pixels)
        gl_check_error("Window.present")
        glfw.swap_buffers(self.handle)

    def wait_events(self, timeout: float):
        glfw.wait_events_timeout(timeout)

    def close(self):
        glfw.set_window_should_close(self.handle, True)

    def destroy(self):
        if self.handle:
            glfw.destroy_window(self.handle)
            self.handle = None
        glfw.terminate()
