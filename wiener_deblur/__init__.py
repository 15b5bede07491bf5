"""
Деконволюция изображений фильтром Винера с настраиваемыми радиусом PSF и SNR.

Пакеты:
    filters: PSF-диск и фильтр размытия
    algorithms: Фильтр Винера
    processing: Контроллер, вывод, загрузка
"""

__version__ = '1.0.0'
