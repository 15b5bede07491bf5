import json

import numpy as np
import pytest

from wiener_deblur import spectrum
from wiener_deblur.algorithms import (
    MAX_NOISE_TERM,
    WienerDeconvolution,
    apply_filter,
    noise_term,
    wiener_filter,
)
from wiener_deblur.filters import DiskBlur, disk_psf


def _transfer_real(size, radius):
    psf = spectrum.quadrant_swap(disk_psf(size, radius))
    return spectrum.forward_transform(psf, norm="backward").real


def test_filter_shape_and_dtype():
    grid = wiener_filter((96, 64), 10, 1200)
    assert grid.shape == (64, 96)
    assert np.isrealobj(grid)
    assert np.all(np.isfinite(grid))


def test_filter_matches_formula():
    h_re = _transfer_real((64, 64), 6)
    expected = h_re / (h_re ** 2 + 1.0 / 500)
    assert np.allclose(wiener_filter((64, 64), 6, 500), expected)


def test_filter_dc_term():
    grid = wiener_filter((64, 64), 6, 1000)
    assert grid[0, 0] == pytest.approx(1.0 / (1.0 + 1.0 / 1000), rel=1e-5)


def test_filter_is_symmetric():
    grid = wiener_filter((96, 64), 12, 1500)
    negated = np.roll(grid[::-1, ::-1], 1, axis=(0, 1))
    assert np.allclose(grid, negated, atol=1e-6)

    centered = spectrum.quadrant_swap(grid)[1:, 1:]
    assert np.allclose(centered, centered[::-1, ::-1], atol=1e-6)


def test_higher_snr_approaches_inverse_filter():
    size, radius = (128, 128), 8
    h_re = _transfer_real(size, radius)
    mask = np.abs(h_re) > 0.05
    inverse = 1.0 / h_re[mask]

    low = np.abs(wiener_filter(size, radius, 100)[mask] - inverse)
    high = np.abs(wiener_filter(size, radius, 2000)[mask] - inverse)
    assert np.all(high <= low + 1e-9)
    assert high.mean() < low.mean()


def test_zero_snr_is_capped():
    assert noise_term(0) == MAX_NOISE_TERM
    grid = wiener_filter((64, 64), 5, 0)
    assert np.all(np.isfinite(grid))
    assert np.abs(grid).max() <= 1.0 / MAX_NOISE_TERM + 1e-12


def test_noise_term():
    assert noise_term(1200) == pytest.approx(1.0 / 1200)


def test_zero_radius_is_identity(scene):
    height, width = scene.shape
    restored = apply_filter(scene, wiener_filter((width, height), 0, 2000))
    assert np.allclose(restored, scene, rtol=1e-3, atol=0.5)


def test_apply_filter_preserves_dimensions(scene):
    height, width = scene.shape
    restored = apply_filter(scene, wiener_filter((width, height), 20, 1200))
    assert restored.shape == scene.shape


def test_apply_filter_shape_mismatch(scene):
    with pytest.raises(ValueError):
        apply_filter(scene, np.ones((10, 10)))


def test_point_source_is_sharpened(point_source):
    blurred = DiskBlur(10).filter(point_source)
    restored = apply_filter(blurred, wiener_filter((256, 256), 10, 2000))

    center = slice(123, 133)
    assert blurred[center, center].sum() < 0.5 * 255
    assert restored[center, center].sum() > 0.8 * 255
    assert restored[128, 128] > 5 * blurred[128, 128]


def test_deconvolution_improves_scene(scene):
    blurred = DiskBlur(4).filter(scene)
    restored, _ = WienerDeconvolution(4, 2000).process(blurred)
    error_blurred = np.abs(blurred - scene).mean()
    error_restored = np.abs(restored - scene).mean()
    assert error_restored < error_blurred


def test_algorithm_process(scene):
    algorithm = WienerDeconvolution(radius=12, snr=800)
    restored, kernel = algorithm.process(scene)
    assert restored.shape == scene.shape
    assert kernel.shape == scene.shape
    assert kernel.sum() == pytest.approx(1.0, abs=1e-5)
    assert algorithm.filter.shape == scene.shape
    assert algorithm.get_timer() >= 0
    assert algorithm.get_name() == 'Wiener'


def test_algorithm_params(tmp_path):
    algorithm = WienerDeconvolution()
    assert algorithm.get_param() == [('radius', 64), ('snr', 1200)]
    assert algorithm.get_timer() == -1

    algorithm.change_param({'radius': 5})
    assert algorithm.get_param() == [('radius', 5), ('snr', 1200)]

    path = tmp_path / "param.json"
    path.write_text(json.dumps({'radius': 9, 'snr': 300}), encoding='utf-8')
    algorithm.import_param_from_file(str(path))
    assert algorithm.get_param() == [('radius', 9), ('snr', 300)]


def test_algorithm_rejects_color(scene):
    with pytest.raises(ValueError):
        WienerDeconvolution().process(np.dstack([scene] * 3))


def test_algorithm_describe():
    assert WienerDeconvolution(radius=3, snr=40).describe() == "Wiener(radius=3, snr=40)"
