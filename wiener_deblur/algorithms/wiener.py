"""
Неслепая деконволюция фильтром Винера с PSF в форме диска.

Фильтр строится в частотной области:

    W = H_re / (|H_re|^2 + 1/snr),

где H_re: вещественная плоскость ДПФ центрированной PSF.
"""

import logging
from time import time
from typing import Any, Dict, List, Tuple

import numpy as np

from wiener_deblur import spectrum
from wiener_deblur.algorithms.base import DeconvolutionAlgorithm
from wiener_deblur.filters.distributions import disk_psf

logger = logging.getLogger(__name__)

# верхняя граница слагаемого 1/snr при snr = 0
MAX_NOISE_TERM = 1e6


def noise_term(snr: float) -> float:
    """Слагаемое 1/snr знаменателя; при snr <= 0 ограничено MAX_NOISE_TERM."""
    if snr <= 0:
        logger.warning("SNR %s is not positive, capping 1/snr at %g", snr, MAX_NOISE_TERM)
        return MAX_NOISE_TERM
    return min(1.0 / float(snr), MAX_NOISE_TERM)


def wiener_filter(size: Tuple[int, int], radius: int, snr: float) -> np.ndarray:
    """
    Строит фильтр Винера для PSF-диска.

    Параметры
    ---------
    size : Tuple[int, int]
        Размер области (width, height).
    radius : int
        Радиус диска PSF.
    snr : float
        Отношение сигнал/шум, используется как 1/snr.

    Возвращает
    ----------
    np.ndarray
        Вещественная сетка формы (height, width).

    Notes
    -----
    В знаменателе используется только вещественная плоскость спектра PSF;
    для симметричного диска мнимая плоскость близка к нулю.
    """
    psf = spectrum.quadrant_swap(disk_psf(size, radius))
    transfer = spectrum.forward_transform(psf, norm="backward")
    h_re = transfer.real

    denominator = np.abs(h_re) ** 2 + noise_term(snr)
    return h_re / denominator


def apply_filter(image: np.ndarray, filter_grid: np.ndarray) -> np.ndarray:
    """
    Применяет частотный фильтр к изображению.

    Фильтр уже задан в частотной области и дополняется нулевой мнимой
    плоскостью, после чего умножается на спектр изображения.

    Возвращает:
        Вещественное изображение того же размера (float)
    """
    if image.shape != filter_grid.shape:
        raise ValueError(f"Image shape {image.shape} does not match filter shape {filter_grid.shape}")
    image_spectrum = spectrum.forward_transform(image.astype(np.float32))
    product = spectrum.multiply_spectrums(image_spectrum, spectrum.as_spectrum(filter_grid))
    return spectrum.inverse_transform(product)


class WienerDeconvolution(DeconvolutionAlgorithm):
    """
    Деконволюция фильтром Винера с известной PSF-диском.

    Параметры
    ----------
    radius : int
        Радиус диска PSF в пикселях.
    snr : float
        Отношение сигнал/шум.
    """

    def __init__(self, radius: int = 64, snr: float = 1200) -> None:
        super().__init__('Wiener')
        self.radius = radius
        self.snr = snr
        self.filter = None

    def change_param(self, param: Dict[str, Any]) -> None:
        if 'radius' in param:
            self.radius = int(param['radius'])
        if 'snr' in param:
            self.snr = param['snr']

    def get_param(self) -> List[Tuple[str, Any]]:
        return [('radius', self.radius), ('snr', self.snr)]

    def process(self, image: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Основной метод восстановления изображения."""
        if image.ndim != 2:
            raise ValueError("Currently supports only grayscale images")
        timer1 = time()
        height, width = image.shape
        self.filter = wiener_filter((width, height), self.radius, self.snr)
        restored = apply_filter(image, self.filter)
        self.timer = time() - timer1
        return restored, disk_psf((width, height), self.radius)
