"""
Конвейер интерактивной деконволюции.

Модули:
    core: Контроллер пересчёта (DeblurController)
    display: Вывод в окно и файл
    reader: Загрузка и сохранение изображений
"""

from wiener_deblur.processing.core import DeblurContext, DeblurController, RecomputeResult
from wiener_deblur.processing.display import DisplaySink, TrackbarWindow, downscale, plot_comparison, to_uint8
from wiener_deblur.processing.reader import imread, imwrite

__all__ = [
    'DeblurContext',
    'DeblurController',
    'RecomputeResult',
    'DisplaySink',
    'TrackbarWindow',
    'downscale',
    'plot_comparison',
    'to_uint8',
    'imread',
    'imwrite',
]
