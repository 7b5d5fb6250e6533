"""FIR filter design using the windowed-sinc method.

Coefficient sets are one-sided: for an odd filter length L the design
stores the (L + 1) / 2 taps c[0] (center) .. c[M] (outermost lag), and the
full linear-phase kernel is ``[c[M], ..., c[1], c[0], c[1], ..., c[M]]``.

With ratio = 2 * ft / fs (cutoff as a fraction of Nyquist):

    low-pass:   c[0] = ratio,       c[k] =  sin(πk*c[0]) / (πk)
    high-pass:  c[0] = 1 - ratio,   c[k] = -sin(πk*c[0]) / (πk)

A high-pass set is the low-pass set for ratio ``1 - ratio`` with every
k >= 1 tap sign-flipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from ..config import DEFAULT_WINDOW
from ..diagnostics import assert_finite, is_debug_enabled
from ..errors import InvalidTypeError
from ..logging import get_logger
from .kaiser import KaiserParameters, estimate_kaiser_parameters
from .utils import allocate, half_length
from .windows import WindowShape, create_window

logger = get_logger(__name__)


class FilterKind(Enum):
    """Single-transition filter kinds this package can design."""

    LOW_PASS = "lowpass"
    HIGH_PASS = "highpass"

    @classmethod
    def parse(cls, kind: Union["FilterKind", str]) -> "FilterKind":
        """Coerce a kind name or member to a FilterKind.

        Band-pass and band-stop names are recognized and rejected.

        Raises:
            InvalidTypeError: If the kind is unsupported.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            name = kind.strip().lower().replace("_", "").replace("-", "")
            for member in cls:
                if member.value == name:
                    return member
            if name in _BAND_KINDS:
                raise InvalidTypeError(
                    f"{kind!r} filters are not supported; only lowpass and "
                    "highpass can be designed"
                )
        raise InvalidTypeError(f"Unknown filter kind: {kind!r}")


_BAND_KINDS = ("bandpass", "bandstop")


@dataclass
class FilterSpec:
    """Single-transition filter specification.

    Attributes:
        kind: Low-pass or high-pass (a FilterKind or its name).
        length: Odd number of taps in the full kernel.
        transition_frequency: Cutoff frequency in Hz.
        sampling_frequency: Sampling frequency in Hz.
    """

    kind: FilterKind
    length: int
    transition_frequency: float
    sampling_frequency: float

    def __post_init__(self) -> None:
        """Validate the specification."""
        self.kind = FilterKind.parse(self.kind)
        half_length(self.length)

        if self.sampling_frequency <= 0:
            raise ValueError(
                f"sampling_frequency must be positive, got {self.sampling_frequency}"
            )
        nyquist = self.sampling_frequency / 2.0
        if not 0.0 < self.transition_frequency < nyquist:
            raise ValueError(
                f"transition_frequency must be in (0, {nyquist}), "
                f"got {self.transition_frequency}"
            )

    @property
    def half_length(self) -> int:
        """Number of one-sided coefficients."""
        return (self.length + 1) // 2

    @property
    def ratio(self) -> float:
        """Cutoff as a fraction of the Nyquist frequency."""
        return 2.0 * self.transition_frequency / self.sampling_frequency


def ideal_coefficients(spec: FilterSpec) -> np.ndarray:
    """Generate truncated-sinc coefficients for a single-transition filter.

    Args:
        spec: Filter specification.

    Returns:
        One-sided coefficient set of ``spec.half_length`` values.

    Raises:
        InvalidTypeError: If the kind is not LOW_PASS or HIGH_PASS.
        AllocationError: If storage cannot be obtained.
    """
    kind = FilterKind.parse(spec.kind)
    size = spec.half_length
    ratio = spec.ratio

    c = allocate(size)
    k = np.arange(1, size, dtype=float)

    c[0] = ratio if kind is FilterKind.LOW_PASS else 1.0 - ratio
    c[1:] = np.sin(np.pi * k * c[0]) / (np.pi * k)
    if kind is FilterKind.HIGH_PASS:
        c[1:] = -c[1:]

    logger.debug(
        "Ideal %s coefficients: length=%d ratio=%.6f",
        kind.value,
        spec.length,
        ratio,
    )
    if is_debug_enabled():
        assert_finite(c, name="ideal coefficients")
    return c


def create_sinc(
    length: int,
    transition_frequency: float,
    sampling_frequency: float,
    kind: Union[FilterKind, str] = FilterKind.LOW_PASS,
) -> np.ndarray:
    """Shorthand for ``ideal_coefficients(FilterSpec(...))``."""
    spec = FilterSpec(
        kind=kind,
        length=length,
        transition_frequency=transition_frequency,
        sampling_frequency=sampling_frequency,
    )
    return ideal_coefficients(spec)


def dc_gain(coefficients: np.ndarray) -> float:
    """Sum of the full mirrored kernel: ``c[0] + 2 * sum(c[1:])``."""
    c = np.asarray(coefficients, dtype=float)
    return float(c[0] + 2.0 * np.sum(c[1:]))


def design_filter(
    spec: FilterSpec,
    window: Union[WindowShape, str] = DEFAULT_WINDOW,
    beta: Optional[float] = None,
    normalize: bool = False,
) -> np.ndarray:
    """Design a windowed-sinc FIR filter.

    Args:
        spec: Filter specification.
        window: Window shape or name (default: "hamming").
        beta: Kaiser shape parameter, required when window is KAISER.
        normalize: If True, rescale a low-pass design to unity DC gain.

    Returns:
        One-sided shaped coefficient set.

    Raises:
        InvalidTypeError: If the window or kind is unsupported.
        ValueError: If KAISER is requested without beta.
    """
    c = ideal_coefficients(spec)
    # Shape in place; the ideal set is owned here.
    create_window(spec.length, window, coefficients=c, out=c, beta=beta)

    if normalize and spec.kind is FilterKind.LOW_PASS:
        gain = dc_gain(c)
        if abs(gain) > 1e-10:
            c /= gain

    logger.debug(
        "Designed %s filter with %s window: length=%d",
        spec.kind.value,
        WindowShape.parse(window).value,
        spec.length,
    )
    if is_debug_enabled():
        assert_finite(c, name="designed coefficients")
    return c


def design_kaiser_filter(
    kind: Union[FilterKind, str],
    transition_frequency: float,
    sampling_frequency: float,
    ripple: float,
    transition_width: float,
    normalize: bool = False,
) -> Tuple[np.ndarray, KaiserParameters]:
    """Design a Kaiser-windowed FIR filter meeting a ripple specification.

    The filter length is the Kaiser order estimate rounded up to odd. The
    transition width is normalized against the sampling frequency.

    Args:
        kind: Low-pass or high-pass.
        transition_frequency: Cutoff frequency in Hz.
        sampling_frequency: Sampling frequency in Hz.
        ripple: Linear ripple amplitude, 0 < ripple < 1.
        transition_width: Transition band width in Hz.
        normalize: If True, rescale a low-pass design to unity DC gain.

    Returns:
        Tuple (coefficients, params) with the one-sided design and the
        Kaiser parameters it was built from.
    """
    params = estimate_kaiser_parameters(
        ripple, transition_width, reference_frequency=sampling_frequency
    )
    spec = FilterSpec(
        kind=kind,
        length=params.length,
        transition_frequency=transition_frequency,
        sampling_frequency=sampling_frequency,
    )
    c = design_filter(spec, WindowShape.KAISER, beta=params.beta, normalize=normalize)
    return c, params
