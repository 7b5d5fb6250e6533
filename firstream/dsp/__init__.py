"""Windowed-sinc FIR design and streaming convolution.

This package provides:
- Truncated-sinc coefficient generation for low-pass and high-pass filters
- One-sided window functions (rectangular, Bartlett, Hanning, Hamming,
  Blackman) and Kaiser windows driven by a ripple specification
- A truncated power-series modified Bessel function I0
- A circular-buffer streaming engine exploiting linear-phase symmetry

Coefficient sets are one-sided NumPy arrays (center tap first).
"""

from .bessel import bessel_i0
from .buffer import CircularBuffer
from .fir import (
    FilterKind,
    FilterSpec,
    create_sinc,
    dc_gain,
    design_filter,
    design_kaiser_filter,
    ideal_coefficients,
)
from .kaiser import (
    KaiserParameters,
    estimate_kaiser_parameters,
    kaiser_window,
    round_up_to_odd,
)
from .stream import FilterBank, StreamingFIR
from .utils import (
    check_1d_array,
    freqz,
    half_length,
    is_power_of_two,
    mirror_coefficients,
    next_pow2,
)
from .windows import (
    WindowShape,
    bartlett,
    blackman,
    create_window,
    hamming,
    hanning,
    rectangular,
)

__all__ = [
    # Utils
    "check_1d_array",
    "is_power_of_two",
    "next_pow2",
    "half_length",
    "mirror_coefficients",
    "freqz",
    # Bessel
    "bessel_i0",
    # Windows
    "WindowShape",
    "create_window",
    "rectangular",
    "bartlett",
    "hanning",
    "hamming",
    "blackman",
    # Kaiser
    "KaiserParameters",
    "estimate_kaiser_parameters",
    "round_up_to_odd",
    "kaiser_window",
    # FIR design
    "FilterKind",
    "FilterSpec",
    "ideal_coefficients",
    "create_sinc",
    "dc_gain",
    "design_filter",
    "design_kaiser_filter",
    # Streaming
    "CircularBuffer",
    "StreamingFIR",
    "FilterBank",
]
