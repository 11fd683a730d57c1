"""
Сохранение готового кадра (H×W×3 uint8) в PNG/JPG через Pillow.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from volray.utils.logger import logger


def save_image(image: np.ndarray, path) -> Path:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) image, got shape {image.shape}")

    p = Path(path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(p)
    logger.info(f"[ImageIO] Saved {image.shape[1]}x{image.shape[0]} frame to {p}")
    return p


def load_image(path) -> np.ndarray:
    """Обратная операция – удобно для сравнения кадров в тестах."""
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Image not found: {p}")
    return np.array(Image.open(p).convert("RGB"), dtype=np.uint8)
