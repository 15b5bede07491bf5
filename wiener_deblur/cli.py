"""
Интерактивная деконволюция фильтром Винера из командной строки.

Пример:
    python -m wiener_deblur original.jpg -o filtered.jpg --radius 64 --snr 1200
"""

import argparse
import logging
import sys
from typing import List, Optional

from wiener_deblur.config import DeblurConfig
from wiener_deblur.filters.blur import DiskBlur
from wiener_deblur.processing.core import DeblurController
from wiener_deblur.processing.display import TrackbarWindow, plot_comparison, to_uint8
from wiener_deblur.processing.reader import imread

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wiener-deblur",
        description="Deblur a grayscale image with a tunable Wiener filter")
    p.add_argument("input", nargs="?", default=None, help="grayscale input image")
    p.add_argument("-o", "--output", default=None, help="output file, overwritten on every change")
    p.add_argument("--radius", type=int, default=None, help="initial PSF disk radius (0-130)")
    p.add_argument("--snr", type=int, default=None, help="initial signal-to-noise ratio (0-2000)")
    p.add_argument("--scale", type=float, default=None, help="display/output downscale factor")
    p.add_argument("--config", default=None, help="JSON configuration file")
    p.add_argument("--headless", action="store_true", help="filter once and save, no window")
    p.add_argument("--reference", default=None, help="sharp image for PSNR/SSIM")
    p.add_argument("--simulate-blur", type=int, default=None, metavar="RADIUS",
                   help="blur the input with a disk of RADIUS first and use it as reference")
    p.add_argument("--plot", default=None, help="save a comparison figure to this path")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_config(args: argparse.Namespace) -> DeblurConfig:
    """Конфигурация из файла, поверх неё флаги командной строки."""
    config = DeblurConfig.from_json(args.config) if args.config else DeblurConfig()
    overrides = {
        'input_path': args.input,
        'output_path': args.output,
        'radius': args.radius,
        'snr': args.snr,
        'display_scale': args.scale,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    if args.headless:
        config.headless = True
    if not config.input_path:
        raise ValueError("No input image given")
    return config.validate()


def run(config: DeblurConfig,
        reference_path: Optional[str] = None,
        simulate_blur: Optional[int] = None,
        plot_path: Optional[str] = None) -> DeblurController:
    image = imread(config.input_path)
    reference = imread(reference_path) if reference_path else None

    if simulate_blur is not None:
        blur = DiskBlur(simulate_blur)
        logger.info("Simulating blur %s", blur.discription())
        reference = image
        image = to_uint8(blur.filter(image))

    controller = DeblurController.from_config(config, image, reference,
                                              window=not config.headless)
    if config.headless:
        controller.recompute()
    else:
        window = TrackbarWindow(config.window_name,
                                lambda radius, snr: controller.update_parameters(radius, snr),
                                config.radius, config.snr,
                                config.max_radius, config.max_snr)
        window.run()

    if plot_path and controller.last_result is not None:
        result = controller.last_result
        plot_comparison(plot_path, image, result.restored, result.psf, result.filter,
                        title=f"radius={result.radius}, snr={result.snr}")
        logger.info("Comparison figure saved to %s", plot_path)
    return controller


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        config = load_config(args)
        run(config, args.reference, args.simulate_blur, args.plot)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
