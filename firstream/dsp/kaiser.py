"""Kaiser window design.

Kaiser's empirical rule maps a ripple specification to a filter order and
shape parameter beta:

    A  = -20*log10(ripple)                       (attenuation, dB)
    tw = 2π * transition_width / reference_frequency

    A <= 21:        order = ceil(5.79 / tw),                 beta = 0
    21 < A <= 50:   order = ceil((A - 7.95) / (2.285*tw)),   beta = 0.5842*(A-21)^0.4 + 0.07886*(A-21)
    A > 50:         order = ceil((A - 7.95) / (2.285*tw)),   beta = 0.1102*(A - 8.7)

The raw order can be even, and every design in this package needs an odd
length, so :attr:`KaiserParameters.length` rounds it up.

References:
    - Kaiser, "Nonrecursive digital filter design using the I0-sinh window
      function", Proc. IEEE ISCAS (1974)
    - Oppenheim & Schafer, *Discrete-Time Signal Processing*, 3rd ed., §7.6
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import BESSEL_SERIES_TERMS
from ..logging import get_logger
from .bessel import bessel_i0
from .utils import half_length
from .windows import shape_into

logger = get_logger(__name__)


def round_up_to_odd(n: int) -> int:
    """Return ``n`` if odd, else ``n + 1``.

    Raises:
        ValueError: If n < 1.
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return n if n % 2 == 1 else n + 1


@dataclass(frozen=True)
class KaiserParameters:
    """Result of Kaiser order estimation.

    Attributes:
        attenuation: Required stopband attenuation in dB.
        order: Raw order estimate (may be even).
        beta: Kaiser shape parameter.
    """

    attenuation: float
    order: int
    beta: float

    @property
    def length(self) -> int:
        """Odd filter length to design with (``order`` rounded up to odd)."""
        return round_up_to_odd(self.order)


def estimate_kaiser_parameters(
    ripple: float, transition_width: float, reference_frequency: float
) -> KaiserParameters:
    """Estimate Kaiser filter order and beta from a ripple specification.

    Args:
        ripple: Linear ripple amplitude, 0 < ripple < 1 (e.g. 0.01 for 40 dB).
        transition_width: Width of the transition band in Hz.
        reference_frequency: Frequency the width is normalized against in Hz
            (normally the sampling frequency).

    Returns:
        KaiserParameters with attenuation, raw order and beta.

    Raises:
        ValueError: If ripple is outside (0, 1) or a width/frequency is not
            positive.
    """
    if not 0.0 < ripple < 1.0:
        raise ValueError(f"ripple must be in (0, 1), got {ripple}")
    if transition_width <= 0:
        raise ValueError(f"transition_width must be positive, got {transition_width}")
    if reference_frequency <= 0:
        raise ValueError(
            f"reference_frequency must be positive, got {reference_frequency}"
        )

    attenuation = -20.0 * math.log10(ripple)
    tw = 2.0 * math.pi * transition_width / reference_frequency

    if attenuation <= 21.0:
        order = math.ceil(5.79 / tw)
        beta = 0.0
    elif attenuation <= 50.0:
        order = math.ceil((attenuation - 7.95) / (2.285 * tw))
        beta = 0.5842 * (attenuation - 21.0) ** 0.4 + 0.07886 * (attenuation - 21.0)
    else:
        order = math.ceil((attenuation - 7.95) / (2.285 * tw))
        beta = 0.1102 * (attenuation - 8.7)

    params = KaiserParameters(attenuation=attenuation, order=int(order), beta=beta)
    logger.debug(
        "Kaiser estimate: A=%.2f dB, order=%d, length=%d, beta=%.4f",
        attenuation,
        params.order,
        params.length,
        beta,
    )
    return params


def kaiser_window(
    length: int,
    beta: float,
    coefficients: Optional[np.ndarray] = None,
    out: Optional[np.ndarray] = None,
    terms: int = BESSEL_SERIES_TERMS,
) -> np.ndarray:
    """Generate a one-sided Kaiser window.

    w[k] = I0(beta * sqrt(1 - (2k/M)^2)) / I0(beta), k = 0..(length-1)/2,
    M = length - 1. The edge tap (k = M/2) evaluates to 1 / I0(beta).

    The window deliberately has ``(length + 1) // 2`` values, the same size
    as the ideal set and every other window, so the outermost lag is shaped
    too. A ``(length - 1) // 2`` Kaiser window would be one short and leave
    that tap unwindowed.

    Args:
        length: Odd full filter length.
        beta: Shape parameter (0 gives a rectangular window).
        coefficients: Optional one-sided set to shape elementwise.
        out: Optional destination, overwritten and returned; may alias
            ``coefficients``.
        terms: Bessel series terms.

    Returns:
        One-sided window (or shaped coefficients) of ``(length + 1) // 2``
        values.

    Raises:
        InvalidLengthError: If length is not a positive odd integer.
        AllocationError: If storage cannot be obtained.
    """
    size = half_length(length)
    if length == 1:
        values = np.ones(1, dtype=float)
    else:
        k = np.arange(size, dtype=float)
        ratio = 2.0 * k / (length - 1)
        arg = beta * np.sqrt(np.clip(1.0 - ratio * ratio, 0.0, None))
        values = bessel_i0(arg, terms=terms) / bessel_i0(beta, terms=terms)
    return shape_into(values, coefficients=coefficients, out=out)
