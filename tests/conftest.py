import cv2 as cv
import numpy as np
import pytest


@pytest.fixture
def point_source():
    image = np.zeros((256, 256), dtype=np.float32)
    image[128, 128] = 255.0
    return image


@pytest.fixture
def scene():
    """Синтетическая сцена: прямоугольник, круг и плавный фон."""
    y, x = np.mgrid[0:128, 0:160]
    image = (40 + 0.5 * x + 0.3 * y).astype(np.float32)
    image[30:70, 20:60] = 220
    cv.circle(image, (110, 80), 25, 10, -1)
    return np.clip(image, 0, 255).astype(np.uint8)


@pytest.fixture
def scene_file(tmp_path, scene):
    path = tmp_path / "original.png"
    cv.imwrite(str(path), scene)
    return path
