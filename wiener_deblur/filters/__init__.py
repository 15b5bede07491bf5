"""
Пакет фильтров для генерации искажений изображений.

Модули:
    base: Базовый класс FilterBase
    blur: Размытие диском (DiskBlur)
    distributions: Построение PSF
"""

from wiener_deblur.filters.base import FilterBase
from wiener_deblur.filters.blur import DiskBlur
from wiener_deblur.filters.distributions import disk_psf

__all__ = [
    'FilterBase',
    'DiskBlur',
    'disk_psf',
]
