import numpy as np
import pytest

from wiener_deblur.config import DeblurConfig
from wiener_deblur.filters import DiskBlur
from wiener_deblur.processing import DeblurContext, DeblurController, DisplaySink, to_uint8


def test_update_parameters_recomputes(scene):
    controller = DeblurController(DeblurContext(scene, radius=64, snr=1200))
    result = controller.update_parameters(radius=10)

    assert result.radius == 10
    assert result.snr == 1200
    assert result.restored.shape == scene.shape
    assert result.filter.shape == scene.shape
    assert result.display is None
    assert result.psnr is None
    assert controller.last_result is result


def test_parameters_are_independent(scene):
    controller = DeblurController(DeblurContext(scene, radius=5, snr=100))
    controller.update_parameters(snr=900)
    result = controller.update_parameters(radius=7)
    assert (result.radius, result.snr) == (7, 900)
    assert (controller.context.radius, controller.context.snr) == (7, 900)


def test_recompute_is_deterministic(scene):
    controller = DeblurController(DeblurContext(scene, radius=5, snr=100))
    first = controller.update_parameters(radius=8, snr=500)
    controller.update_parameters(radius=30, snr=10)
    second = controller.update_parameters(radius=8, snr=500)
    assert np.array_equal(first.restored, second.restored)


@pytest.mark.parametrize("radius, snr", [(-1, 100), (131, 100), (10, -5), (10, 2001)])
def test_out_of_range_parameters(scene, radius, snr):
    controller = DeblurController(DeblurContext(scene, radius=5, snr=100))
    with pytest.raises(ValueError):
        controller.update_parameters(radius, snr)
    assert (controller.context.radius, controller.context.snr) == (5, 100)


def test_original_image_is_not_mutated(scene):
    original = scene.copy()
    context = DeblurContext(scene, radius=5, snr=100)
    DeblurController(context).update_parameters(radius=9)
    assert np.array_equal(context.image, original)
    assert not context.image.flags.writeable
    assert scene.flags.writeable


def test_context_rejects_color_image(scene):
    with pytest.raises(ValueError):
        DeblurContext(np.dstack([scene] * 3), radius=5, snr=100)


def test_reference_metrics(scene):
    blurred = to_uint8(DiskBlur(3).filter(scene))
    controller = DeblurController(DeblurContext(blurred, radius=3, snr=2000, reference=scene))
    result = controller.recompute()
    assert result.psnr is not None and result.psnr > 0
    assert -1.0 <= result.ssim <= 1.0
    assert result.sharpness > 0


def test_sink_writes_output(tmp_path, scene):
    output = tmp_path / "filtered.jpg"
    sink = DisplaySink(output, scale=0.5)
    controller = DeblurController(DeblurContext(scene, radius=4, snr=1000), sink)

    result = controller.recompute()
    assert output.exists()
    assert result.display.dtype == np.uint8
    assert result.display.shape == (64, 80)


def test_from_config(tmp_path, scene):
    config = DeblurConfig(input_path="unused.png",
                          output_path=str(tmp_path / "out.png"),
                          radius=6, snr=300, display_scale=1.0)
    controller = DeblurController.from_config(config, scene)
    assert controller.sink.window_name is None
    result = controller.recompute()
    assert (result.radius, result.snr) == (6, 300)
    assert result.display.shape == scene.shape
