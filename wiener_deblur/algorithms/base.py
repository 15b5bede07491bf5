"""
Базовый класс для алгоритмов неслепой деконволюции.
"""

import abc
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import numpy as np


class DeconvolutionAlgorithm(abc.ABC):
    """
    Алгоритм восстановления изображения по известной PSF.

    Attributes
    ----------
    name : str
        Название алгоритма.
    timer : float
        Время выполнения последнего вызова process() в секундах
        (-1 если не запускался).
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name
        self.timer = -1

    @abc.abstractmethod
    def change_param(self, param: Dict[str, Any]) -> None:
        """Изменение параметров; отсутствующие ключи не меняются."""

    @abc.abstractmethod
    def get_param(self) -> List[Tuple[str, Any]]:
        """Список кортежей (название_параметра, значение)."""

    @abc.abstractmethod
    def process(self, image: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Восстановление изображения.

        Returns
        -------
        restored : np.ndarray
            Восстановленное изображение (float).
        kernel : np.ndarray
            PSF, по которой выполнено восстановление.
        """

    def get_name(self) -> str:
        return self.name

    def get_timer(self) -> float:
        return self.timer

    def describe(self) -> str:
        """Название и параметры одной строкой, например Wiener(radius=64, snr=1200)."""
        params = ", ".join(f"{key}={value}" for key, value in self.get_param())
        return f"{self.name}({params})"

    def import_param_from_file(self, file: Union[str, Path]) -> None:
        """Загрузка параметров из JSON-файла."""
        with open(file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        self.change_param(data)
