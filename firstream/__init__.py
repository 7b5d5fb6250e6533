"""firstream - windowed-sinc FIR design and real-time streaming convolution."""

__version__ = "0.1.0"

from .config import BESSEL_SERIES_TERMS, DEFAULT_BUFFER_CAPACITY, DEFAULT_WINDOW

# Diagnostics
from .diagnostics import (
    assert_finite,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)

# Filter design and streaming
from .dsp import (
    CircularBuffer,
    FilterBank,
    FilterKind,
    FilterSpec,
    KaiserParameters,
    StreamingFIR,
    WindowShape,
    bessel_i0,
    create_sinc,
    create_window,
    design_filter,
    design_kaiser_filter,
    estimate_kaiser_parameters,
    ideal_coefficients,
    kaiser_window,
    mirror_coefficients,
    round_up_to_odd,
)
from .errors import (
    AllocationError,
    BufferMisconfigurationError,
    FIRError,
    InvalidLengthError,
    InvalidTypeError,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Config
    "DEFAULT_BUFFER_CAPACITY",
    "BESSEL_SERIES_TERMS",
    "DEFAULT_WINDOW",
    # Errors
    "FIRError",
    "InvalidLengthError",
    "InvalidTypeError",
    "AllocationError",
    "BufferMisconfigurationError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Diagnostics
    "assert_finite",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Design
    "FilterKind",
    "FilterSpec",
    "ideal_coefficients",
    "create_sinc",
    "design_filter",
    "design_kaiser_filter",
    "WindowShape",
    "create_window",
    "bessel_i0",
    "KaiserParameters",
    "estimate_kaiser_parameters",
    "round_up_to_odd",
    "kaiser_window",
    "mirror_coefficients",
    # Streaming
    "CircularBuffer",
    "StreamingFIR",
    "FilterBank",
]
