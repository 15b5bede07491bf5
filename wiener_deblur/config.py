"""
Конфигурация запуска: пути, параметры фильтра и окна.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

DEFAULT_RADIUS = 64
DEFAULT_SNR = 1200
MAX_RADIUS = 130
MAX_SNR = 2000
DISPLAY_SCALE = 0.3
WINDOW_NAME = "Wiener Filter"


_TYPES = {
    "int": (int,),
    "float": (int, float),
    "str": (str,),
    "bool": (bool,),
    "Optional[str]": (str, type(None)),
}


def _matches_type(value: Any, annotation: str) -> bool:
    """bool не принимается там, где ожидается число."""
    if isinstance(value, bool) and annotation != "bool":
        return False
    return isinstance(value, _TYPES[annotation])


@dataclass
class DeblurConfig:
    """
    Параметры запуска.

    Атрибуты
    --------
    input_path : Optional[str]
        Путь к входному ч/б изображению.
    output_path : str
        Файл, перезаписываемый при каждом пересчёте.
    radius : int
        Начальный радиус PSF.
    snr : int
        Начальное отношение сигнал/шум.
    display_scale : float
        Коэффициент уменьшения для вывода и сохранения.
    window_name : str
        Заголовок окна с ползунками.
    max_radius, max_snr : int
        Верхние пределы ползунков.
    headless : bool
        Один пересчёт без окна.
    """
    input_path: Optional[str] = None
    output_path: str = "filtered.jpg"
    radius: int = DEFAULT_RADIUS
    snr: int = DEFAULT_SNR
    display_scale: float = DISPLAY_SCALE
    window_name: str = WINDOW_NAME
    max_radius: int = MAX_RADIUS
    max_snr: int = MAX_SNR
    headless: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeblurConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, file: Union[str, Path]) -> "DeblurConfig":
        """Загрузка конфигурации из JSON-файла."""
        with open(file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {file} must be a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> "DeblurConfig":
        """Проверка типов и корректности значений."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not _matches_type(value, f.type):
                raise ValueError(f"{f.name} must be of type {f.type}, got {value!r}")
        if self.max_radius < 0 or self.max_snr < 0:
            raise ValueError("Slider limits must be non-negative")
        if not 0 <= self.radius <= self.max_radius:
            raise ValueError(f"radius must be in [0, {self.max_radius}], got {self.radius}")
        if not 0 <= self.snr <= self.max_snr:
            raise ValueError(f"snr must be in [0, {self.max_snr}], got {self.snr}")
        if self.display_scale <= 0:
            raise ValueError(f"display_scale must be positive, got {self.display_scale}")
        if not self.output_path:
            raise ValueError("output_path must not be empty")
        return self
