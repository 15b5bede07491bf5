"""
Загрузка и сохранение изображений.
"""
import logging
import os
from pathlib import Path
from typing import Union

import cv2 as cv
import numpy as np

logger = logging.getLogger(__name__)


def imread(path: Union[str, Path]) -> np.ndarray:
    """
    Загружает одноканальное (ч/б) изображение.

    Исключения
    ----------
    FileNotFoundError
        Файл не существует.
    ValueError
        OpenCV не смог декодировать файл.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image not found: {path}")
    image = cv.imread(str(path), cv.IMREAD_GRAYSCALE)
    if image is None or image.size == 0:
        raise ValueError(f"Failed to load image: {path}")
    logger.info("Loaded %s (%dx%d)", path, image.shape[1], image.shape[0])
    return image


def imwrite(path: Union[str, Path], image: np.ndarray) -> None:
    """Сохраняет изображение, перезаписывая существующий файл."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    if not cv.imwrite(str(path), image):
        raise ValueError(f"Failed to save image: {path}")
    logger.debug("Saved %s", path)
