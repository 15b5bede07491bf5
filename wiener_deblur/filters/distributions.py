"""
Генерация PSF в форме диска на всю площадь изображения.
"""

import logging
from typing import Tuple

import cv2 as cv
import numpy as np

logger = logging.getLogger(__name__)


def disk_psf(size: Tuple[int, int], radius: int) -> np.ndarray:
    """
    Строит нормированную PSF расфокусировки (заполненный диск).

    Диск рисуется в центре сетки (width // 2, height // 2), после чего
    сетка делится на сумму своих элементов.

    Параметры
    ---------
    size : Tuple[int, int]
        Размер сетки (width, height), совпадает с размером изображения.
    radius : int
        Радиус диска в пикселях.

    Возвращает
    ----------
    np.ndarray
        Массив float32 формы (height, width) с суммой 1.
    """
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"PSF size must be positive, got {size}")
    if radius < 0:
        raise ValueError(f"PSF radius must be non-negative, got {radius}")

    center = (width // 2, height // 2)
    psf = np.zeros((height, width), dtype=np.float32)
    cv.circle(psf, center, int(radius), 255, -1, cv.LINE_AA)

    total = psf.sum()
    if total <= 0:
        # вырожденный диск: единичный импульс даёт тождественный фильтр
        logger.warning("Degenerate PSF for radius %d, using unit impulse", radius)
        psf[center[1], center[0]] = 1.0
        return psf
    return psf / total
