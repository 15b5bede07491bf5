"""
Базовый класс для фильтров, искажающих изображение.
"""

import abc
from typing import Any

import numpy as np


class FilterBase(abc.ABC):
    """
    Фильтр искажения изображения (например, размытие).

    Атрибуты:
        param (Any): Параметр фильтра
        type (str): Тип фильтра ('blur', ...)
    """

    def __init__(self, param: Any, type: str) -> None:
        super().__init__()
        self.param = param
        self.type = type

    def get_type(self) -> str:
        return self.type

    @abc.abstractmethod
    def discription(self) -> str:
        """Зашифрованное название фильтра и его параметры, например |defocus_disk_5"""

    @abc.abstractmethod
    def filter(self, image: np.ndarray) -> np.ndarray:
        """Применение фильтра к одноканальному изображению."""
