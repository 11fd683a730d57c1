# volray/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * gl_check_error – вспомогательная функция, проверяющая GL‑ошибки
    * Config, Profiler, save_image
"""

from .logger import logger, gl_check_error
from .config import Config
from .profiler import Profiler
from .image_io import save_image, load_image

__all__ = ["logger", "gl_check_error", "Config", "Profiler",
           "save_image", "load_image"]
