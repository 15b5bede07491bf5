"""
Модуль вывода результата на экран и в файл.

Возможности:
    - Перевод восстановленного изображения в 8 бит.
    - Уменьшение для отображения.
    - Окно OpenCV с ползунками радиуса и SNR.
    - Сохранение сравнительного рисунка matplotlib.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Optional, Union

import cv2 as cv
import matplotlib.pyplot as plt
import numpy as np

from wiener_deblur.processing.reader import imwrite
from wiener_deblur.spectrum import quadrant_swap

logger = logging.getLogger(__name__)

RADIUS_TRACKBAR = "Radius"
SNR_TRACKBAR = "SNR"


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Перевод в uint8 с округлением и насыщением в [0, 255]."""
    return np.clip(np.rint(image), 0, 255).astype(np.uint8)


def downscale(image: np.ndarray, scale: float) -> np.ndarray:
    """Уменьшение изображения в scale раз по обеим осям."""
    if scale == 1.0:
        return image.copy()
    height, width = image.shape[:2]
    size = (max(1, round(width * scale)), max(1, round(height * scale)))
    return cv.resize(image, size, interpolation=cv.INTER_LINEAR)


class DisplaySink:
    """
    Приёмник результата: 8 бит, уменьшение, окно, файл.

    Атрибуты
    --------
    output_path : Path
        Файл, перезаписываемый при каждом пересчёте.
    scale : float
        Коэффициент уменьшения.
    window_name : Optional[str]
        Окно для вывода (None, если окно не нужно).
    """

    def __init__(self,
                 output_path: Union[str, Path],
                 scale: float = 0.3,
                 window_name: Optional[str] = None) -> None:
        self.output_path = Path(output_path)
        self.scale = scale
        self.window_name = window_name

    def prepare(self, restored: np.ndarray) -> np.ndarray:
        """8-битное уменьшенное изображение для вывода."""
        return downscale(to_uint8(restored), self.scale)

    def show(self, restored: np.ndarray) -> np.ndarray:
        """Выводит и сохраняет результат, возвращает выведенное изображение."""
        display_image = self.prepare(restored)
        if self.window_name is not None:
            cv.imshow(self.window_name, display_image)
        imwrite(self.output_path, display_image)
        logger.info("Saved %s", self.output_path)
        return display_image


class TrackbarWindow:
    """
    Окно OpenCV с ползунками "Radius" и "SNR".

    Каждое изменение ползунка считывает оба значения и передаёт их в
    on_change; цикл событий блокируется до нажатия любой клавиши.
    """

    def __init__(self,
                 window_name: str,
                 on_change: Callable[[int, int], Any],
                 radius: int,
                 snr: int,
                 max_radius: int = 130,
                 max_snr: int = 2000) -> None:
        self.window_name = window_name
        self.on_change = on_change
        self.radius = radius
        self.snr = snr
        self.max_radius = max_radius
        self.max_snr = max_snr

    def open(self) -> None:
        cv.namedWindow(self.window_name)
        cv.createTrackbar(RADIUS_TRACKBAR, self.window_name, self.radius,
                          self.max_radius, self._on_radius)
        cv.createTrackbar(SNR_TRACKBAR, self.window_name, self.snr,
                          self.max_snr, self._on_snr)

    def _on_radius(self, value: int) -> None:
        self.radius = value
        self.on_change(self.radius, self.snr)

    def _on_snr(self, value: int) -> None:
        self.snr = value
        self.on_change(self.radius, self.snr)

    def run(self) -> int:
        """Открывает окно, выполняет первый пересчёт и ждёт нажатия клавиши."""
        self.open()
        self.on_change(self.radius, self.snr)
        key = cv.waitKey(0)
        cv.destroyWindow(self.window_name)
        return key


def plot_comparison(path: Union[str, Path],
                    blurred: np.ndarray,
                    restored: np.ndarray,
                    psf: np.ndarray,
                    filter_grid: np.ndarray,
                    title: str = "") -> None:
    """Сохраняет рисунок: входное, восстановленное, PSF и фильтр."""
    fig, axes = plt.subplots(1, 4, figsize=(20, 5))

    axes[0].imshow(blurred, cmap="gray")
    axes[0].set_title("Blurred", fontsize=12)
    axes[1].imshow(to_uint8(restored), cmap="gray")
    axes[1].set_title("Restored", fontsize=12)
    axes[2].imshow(psf, cmap="gray")
    axes[2].set_title("PSF", fontsize=12)
    axes[3].imshow(quadrant_swap(filter_grid), cmap="viridis")
    axes[3].set_title("Wiener filter", fontsize=12)
    for ax in axes:
        ax.axis('off')

    plt.suptitle(title, fontsize=14)
    plt.tight_layout()
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(path))
    plt.close(fig)
