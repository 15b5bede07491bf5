"""
Основной модуль: контроллер пересчёта фильтра Винера.

Контроллер хранит исходное изображение и текущие параметры и при каждом
изменении радиуса или SNR полностью пересчитывает конвейер:
PSF -> фильтр -> свёртка -> вывод.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

import wiener_deblur.metrics as metrics
from wiener_deblur.algorithms.wiener import WienerDeconvolution
from wiener_deblur.config import DeblurConfig, MAX_RADIUS, MAX_SNR
from wiener_deblur.processing.display import DisplaySink, to_uint8

logger = logging.getLogger(__name__)


@dataclass
class DeblurContext:
    """
    Состояние между пересчётами.

    Атрибуты
    --------
    image : np.ndarray
        Исходное ч/б изображение (только чтение).
    radius : int
        Текущий радиус PSF.
    snr : int
        Текущее отношение сигнал/шум.
    reference : Optional[np.ndarray]
        Резкое изображение для PSNR/SSIM.
    """
    image: np.ndarray
    radius: int
    snr: int
    reference: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        if self.image.ndim != 2:
            raise ValueError(f"Expected a grayscale image, got shape {self.image.shape}")
        if self.reference is not None and self.reference.shape != self.image.shape:
            raise ValueError(f"Reference shape {self.reference.shape} does not match image shape {self.image.shape}")
        self.image = self.image.copy()
        self.image.setflags(write=False)


@dataclass
class RecomputeResult:
    """Результат одного пересчёта."""
    restored: np.ndarray
    filter: np.ndarray
    psf: np.ndarray
    radius: int
    snr: int
    elapsed: float
    sharpness: float
    display: Optional[np.ndarray] = None
    psnr: Optional[float] = None
    ssim: Optional[float] = None


class DeblurController:
    """
    Контроллер интерактивной деконволюции.

    Параметры
    ---------
    context : DeblurContext
        Исходное изображение и начальные параметры.
    sink : Optional[DisplaySink]
        Приёмник результата (None, если только вычисления).
    max_radius, max_snr : int
        Допустимые верхние пределы параметров.
    """

    def __init__(self,
                 context: DeblurContext,
                 sink: Optional[DisplaySink] = None,
                 max_radius: int = MAX_RADIUS,
                 max_snr: int = MAX_SNR) -> None:
        self.context = context
        self.sink = sink
        self.max_radius = max_radius
        self.max_snr = max_snr
        self.algorithm = WienerDeconvolution(context.radius, context.snr)
        self.last_result: Optional[RecomputeResult] = None

    @classmethod
    def from_config(cls,
                    config: DeblurConfig,
                    image: np.ndarray,
                    reference: Optional[np.ndarray] = None,
                    window: bool = False) -> "DeblurController":
        """Создание контроллера по конфигурации."""
        sink = DisplaySink(config.output_path,
                           config.display_scale,
                           config.window_name if window else None)
        context = DeblurContext(image, config.radius, config.snr, reference)
        return cls(context, sink, config.max_radius, config.max_snr)

    def _check(self, radius: int, snr: int) -> None:
        if not 0 <= radius <= self.max_radius:
            raise ValueError(f"radius must be in [0, {self.max_radius}], got {radius}")
        if not 0 <= snr <= self.max_snr:
            raise ValueError(f"snr must be in [0, {self.max_snr}], got {snr}")

    def update_parameters(self,
                          radius: Optional[int] = None,
                          snr: Optional[int] = None) -> RecomputeResult:
        """
        Обновляет параметры и пересчитывает результат.

        Не переданный параметр сохраняет текущее значение.

        Возвращает
        ----------
        RecomputeResult
            Восстановленное изображение, фильтр и метрики.
        """
        radius = self.context.radius if radius is None else int(radius)
        snr = self.context.snr if snr is None else int(snr)
        self._check(radius, snr)
        self.context.radius = radius
        self.context.snr = snr
        return self.recompute()

    def recompute(self) -> RecomputeResult:
        """Полный пересчёт по исходному изображению и текущим параметрам."""
        self.algorithm.change_param({'radius': self.context.radius, 'snr': self.context.snr})
        restored, psf = self.algorithm.process(self.context.image)

        result = RecomputeResult(
            restored=restored,
            filter=self.algorithm.filter,
            psf=psf,
            radius=self.context.radius,
            snr=self.context.snr,
            elapsed=self.algorithm.get_timer(),
            sharpness=metrics.Sharpness(restored),
        )
        if self.context.reference is not None:
            restored8 = to_uint8(restored)
            result.psnr = metrics.PSNR(self.context.reference, restored8)
            result.ssim = metrics.SSIM(self.context.reference, restored8)

        logger.info("%s: %.3f s, sharpness %.2f",
                    self.algorithm.describe(), result.elapsed, result.sharpness)
        if result.psnr is not None:
            logger.info("PSNR: %.2f dB, SSIM: %.4f", result.psnr, result.ssim)

        if self.sink is not None:
            result.display = self.sink.show(restored)
        self.last_result = result
        return result
