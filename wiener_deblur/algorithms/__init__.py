from wiener_deblur.algorithms.base import DeconvolutionAlgorithm
from wiener_deblur.algorithms.wiener import (
    MAX_NOISE_TERM,
    WienerDeconvolution,
    apply_filter,
    noise_term,
    wiener_filter,
)

__all__ = [
    'DeconvolutionAlgorithm',
    'WienerDeconvolution',
    'MAX_NOISE_TERM',
    'apply_filter',
    'noise_term',
    'wiener_filter',
]
