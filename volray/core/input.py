"""
Скрывает GLFW‑callback‑механику.
"""

from collections import deque

import glfw

class InputManager:
    """Скрывает GLFW‑callback‑механику: состояние клавиш + очередь событий."""
    def __init__(self, window):
        self.window = window
        self.keys = {}
        self.events = deque()
        self._setup_callbacks()

    def _setup_callbacks(self):
        glfw.set_key_callback(self.window, self._key_cb)

    def _key_cb(self, win, key, scancode, action, mods):
        self.keys[key] = action != glfw.RELEASE
        if action in (glfw.PRESS, glfw.REPEAT, glfw.RELEASE):
            self.events.append((key, action, mods))

    def is_key_pressed(self, key) -> bool:
        return self.keys.get(key, False)

    def drain_events(self):
        """Забрать накопленные (key, action, mods) в порядке поступления."""
        while self.events:
            yield self.events.popleft()
