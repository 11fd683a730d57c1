"""
Контекст‑менеджер профайлинга – измеряет время выполнения блока кода.
"""

import logging
import time
from volray.utils.logger import logger

class Profiler:
    """Контекст‑менеджер для измерения времени выполнения."""
    def __init__(self, name: str, level: int = logging.INFO):
        self.name = name
        self.level = level
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        logger.log(self.level, f"[Profiler] {self.name}: {self.elapsed_ms:.2f} ms")
