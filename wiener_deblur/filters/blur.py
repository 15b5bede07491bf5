import numpy as np

from .base import FilterBase
from .distributions import disk_psf
from wiener_deblur import spectrum


class DiskBlur(FilterBase):
    """
    Фильтр размытия вне фокуса с PSF в форме диска.

    Ядро строится на всю площадь изображения, свёртка циклическая и
    выполняется в частотной области, поэтому размытие точно обращается
    фильтром Винера с тем же радиусом.

    Атрибуты:
        param (int): Радиус диска в пикселях
    """

    def __init__(self, radius: int = 10) -> None:
        """
        Аргументы:
            radius: Радиус диска в пикселях
        """
        super().__init__(radius, 'blur')

    def discription(self) -> str:
        return f"|defocus_disk_{self.param}"

    def generate_kernel(self, shape) -> np.ndarray:
        """Генерация PSF под размер изображения (height, width)."""
        height, width = shape[:2]
        return disk_psf((width, height), self.param)

    def filter(self, image: np.ndarray) -> np.ndarray:
        """
        Применение размытия к одноканальному изображению.

        Возвращает:
            Размытое изображение (float32)
        """
        if image.ndim != 2:
            raise ValueError("Currently supports only grayscale images")
        kernel = spectrum.quadrant_swap(self.generate_kernel(image.shape))
        image_spectrum = spectrum.forward_transform(image.astype(np.float32))
        kernel_spectrum = spectrum.forward_transform(kernel, norm="backward")
        blurred = spectrum.inverse_transform(
            spectrum.multiply_spectrums(image_spectrum, kernel_spectrum))
        return blurred.astype(np.float32)
