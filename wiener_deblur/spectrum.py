"""
Преобразования между пространственной и частотной областью.

Возможности:
    - Прямое и обратное двумерное ДПФ.
    - Перестановка диагональных квадрантов (центрирование нулевой частоты).
    - Поэлементное перемножение спектров.
"""

import numpy as np
from scipy.fft import fft2, ifft2


def forward_transform(grid: np.ndarray, norm: str = "ortho") -> np.ndarray:
    """
    Прямое двумерное ДПФ вещественной сетки.

    Параметры
    ---------
    grid : np.ndarray
        Вещественный двумерный массив.
    norm : str
        Нормировка scipy.fft: "ortho" (по умолчанию) для пар
        прямое/обратное без отдельного масштабирования, "backward" для
        передаточной функции ядра (нулевая частота равна сумме ядра).

    Возвращает
    ----------
    np.ndarray
        Комплексный спектр той же формы.
    """
    if grid.ndim != 2:
        raise ValueError(f"Expected a 2D grid, got shape {grid.shape}")
    return fft2(np.asarray(grid, dtype=np.float64), norm=norm)


def inverse_transform(spectrum: np.ndarray, norm: str = "ortho") -> np.ndarray:
    """Обратное ДПФ; мнимая часть отбрасывается."""
    if spectrum.ndim != 2:
        raise ValueError(f"Expected a 2D spectrum, got shape {spectrum.shape}")
    return np.real(ifft2(spectrum, norm=norm))


def quadrant_swap(grid: np.ndarray) -> np.ndarray:
    """
    Меняет местами диагональные квадранты: q0 <-> q3, q1 <-> q2.

    Квадранты имеют размер (rows // 2, cols // 2); при нечётном размере
    последняя строка и столбец остаются на месте. Для чётных размеров
    результат совпадает с fftshift.
    """
    swapped = grid.copy()
    cy = grid.shape[0] // 2
    cx = grid.shape[1] // 2

    swapped[:cy, :cx] = grid[cy:2 * cy, cx:2 * cx]
    swapped[cy:2 * cy, cx:2 * cx] = grid[:cy, :cx]
    swapped[:cy, cx:2 * cx] = grid[cy:2 * cy, :cx]
    swapped[cy:2 * cy, :cx] = grid[:cy, cx:2 * cx]
    return swapped


def as_spectrum(grid: np.ndarray) -> np.ndarray:
    """Вещественная сетка как комплексная с нулевой мнимой плоскостью."""
    return np.asarray(grid, dtype=np.float64) + 0j


def multiply_spectrums(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Поэлементное комплексное произведение спектров без сопряжения."""
    if first.shape != second.shape:
        raise ValueError(f"Spectrum shapes differ: {first.shape} vs {second.shape}")
    return first * second
