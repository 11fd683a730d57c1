# volray/core/controls.py
"""
Клавиши → команды изменения сцены.

    1 / 2 / 3          – плотность объекта 0 / 1 / 2 (+шаг, с Shift – −шаг)
    R / G / B + цифра  – красный / зелёный / синий канал объекта (±шаг)
    Escape             – выход

Команды только описывают изменение; применяются они между кадрами
(Command.apply), так что рендер и изменение сцены никогда не пересекаются.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import glfw

from volray.math.vec3 import Vec3

OBJECT_KEYS = {glfw.KEY_1: 0, glfw.KEY_2: 1, glfw.KEY_3: 2}
COLOR_KEYS = {
    glfw.KEY_R: Vec3(1.0, 0.0, 0.0),
    glfw.KEY_G: Vec3(0.0, 1.0, 0.0),
    glfw.KEY_B: Vec3(0.0, 0.0, 1.0),
}
# Отпускание этих клавиш запускает рендер в полном качестве
REFINE_KEYS = frozenset(OBJECT_KEYS) | frozenset(COLOR_KEYS)


class Command(ABC):
    """Базовая команда; apply возвращает True, если сцена изменилась."""
    @abstractmethod
    def apply(self, scene) -> bool:
        pass


class DensityCommand(Command):
    def __init__(self, index: int, delta: float):
        self.index = index
        self.delta = delta

    def apply(self, scene) -> bool:
        return scene.adjust_density(self.index, self.delta)

    def __eq__(self, other):
        return (isinstance(other, DensityCommand)
                and (self.index, self.delta) == (other.index, other.delta))

    def __repr__(self):
        return f"DensityCommand(index={self.index}, delta={self.delta:+.3f})"


class ColorCommand(Command):
    def __init__(self, index: int, delta: Vec3):
        self.index = index
        self.delta = delta

    def apply(self, scene) -> bool:
        return scene.adjust_color(self.index, self.delta)

    def __eq__(self, other):
        return (isinstance(other, ColorCommand)
                and self.index == other.index and self.delta == other.delta)

    def __repr__(self):
        return f"ColorCommand(index={self.index}, delta={self.delta!r})"


class QuitCommand(Command):
    def apply(self, scene) -> bool:
        return False

    def __eq__(self, other):
        return isinstance(other, QuitCommand)

    def __repr__(self):
        return "QuitCommand()"


def map_key_event(key: int,
                  action: int,
                  mods: int,
                  is_key_pressed: Callable[[int], bool],
                  density_step: float = 0.05,
                  color_step: float = 0.1) -> Optional[Command]:
    """Перевести одно нажатие клавиши в команду (или None)."""
    # удержание клавиши (REPEAT) повторяет команду, как повторное нажатие
    if action not in (glfw.PRESS, glfw.REPEAT):
        return None

    if key == glfw.KEY_ESCAPE:
        return QuitCommand()

    sign = -1.0 if mods & glfw.MOD_SHIFT else 1.0

    if key in OBJECT_KEYS:
        return DensityCommand(OBJECT_KEYS[key], sign * density_step)

    if key in COLOR_KEYS:
        # цвет меняется только пока зажата цифра объекта
        for digit, index in OBJECT_KEYS.items():
            if is_key_pressed(digit):
                return ColorCommand(index, COLOR_KEYS[key] * (sign * color_step))

    return None


def is_refine_event(key: int, action: int) -> bool:
    return action == glfw.RELEASE and key in REFINE_KEYS
