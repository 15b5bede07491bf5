import cv2 as cv
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Optional


def PSNR(original: np.ndarray,
         restored: np.ndarray,
         data_range: Optional[float] = 255) -> float:
    """
    Вычисляет отношение пикового сигнала к шуму (PSNR) между изображениями.

    Аргументы:
        original (ndarray): Исходное изображение
        restored (ndarray): Восстановленное изображение
        data_range (Optional[float]): Диапазон значений (255 для 8-бит)

    Возвращает:
        Значение PSNR в децибелах (dB)
    """

    return peak_signal_noise_ratio(original, restored, data_range=data_range)


def SSIM(original: np.ndarray,
         restored: np.ndarray,
         data_range: Optional[float] = 255) -> float:
    """
    Вычисляет индекс структурного сходства (SSIM) между изображениями.

    Аргументы:
        original: Исходное изображение
        restored: Восстановленное изображение
        data_range (Optional[float]): Верхний предел значений

    Возвращает:
        Значение SSIM в диапазоне от -1 до 1
    """

    return structural_similarity(original, restored, data_range=data_range)


def Sharpness(image: np.ndarray) -> float:
    """
    Подсчет резкости через дисперсию Лапласа.
    Более высокое значение указывает на большую резкость.
    """

    return float(cv.Laplacian(image.astype(np.float32), cv.CV_32F).var())
