"""One-sided window functions for windowed-sinc FIR design.

Windows are evaluated on the lag axis k = 0..(length-1)/2 with M = length - 1,
so index 0 is the window center. Mirroring a one-sided window with
:func:`~firstream.dsp.utils.mirror_coefficients` gives the usual symmetric
window of odd length.

    Rectangular: w[k] = 1
    Bartlett:    w[k] = 1 - 2k/M
    Hanning:     w[k] = 0.5 + 0.5*cos(2πk/M)
    Hamming:     w[k] = 0.54 + 0.46*cos(2πk/M)
    Blackman:    w[k] = 0.42 + 0.5*cos(2πk/M) + 0.08*cos(4πk/M)
"""

from enum import Enum
from typing import Optional, Union

import numpy as np

from ..errors import InvalidLengthError, InvalidTypeError
from .utils import allocate, half_length


class WindowShape(Enum):
    """Supported window shapes."""

    RECTANGULAR = "rectangular"
    BARTLETT = "bartlett"
    HANNING = "hanning"
    HAMMING = "hamming"
    BLACKMAN = "blackman"
    KAISER = "kaiser"

    @classmethod
    def parse(cls, shape: Union["WindowShape", str]) -> "WindowShape":
        """Coerce a shape name (case-insensitive) or member to a WindowShape.

        Raises:
            InvalidTypeError: If the shape is not recognized.
        """
        if isinstance(shape, cls):
            return shape
        if isinstance(shape, str):
            name = shape.strip().lower()
            name = _ALIASES.get(name, name)
            for member in cls:
                if member.value == name:
                    return member
        raise InvalidTypeError(f"Unknown window: {shape!r}")


_ALIASES = {
    "hann": "hanning",
    "boxcar": "rectangular",
    "triangular": "bartlett",
}


def _lags(length: int) -> np.ndarray:
    return np.arange(half_length(length), dtype=float)


def rectangular(length: int) -> np.ndarray:
    """One-sided rectangular (boxcar) window, all ones."""
    return np.ones(half_length(length), dtype=float)


def bartlett(length: int) -> np.ndarray:
    """One-sided Bartlett (triangular) window: w[k] = 1 - 2k/M."""
    k = _lags(length)
    if length == 1:
        return np.ones(1, dtype=float)
    return 1.0 - 2.0 * k / (length - 1)


def hanning(length: int) -> np.ndarray:
    """One-sided Hanning window: w[k] = 0.5 + 0.5*cos(2πk/M)."""
    k = _lags(length)
    if length == 1:
        return np.ones(1, dtype=float)
    return 0.5 + 0.5 * np.cos(2.0 * np.pi * k / (length - 1))


def hamming(length: int) -> np.ndarray:
    """One-sided Hamming window: w[k] = 0.54 + 0.46*cos(2πk/M)."""
    k = _lags(length)
    if length == 1:
        return np.ones(1, dtype=float)
    return 0.54 + 0.46 * np.cos(2.0 * np.pi * k / (length - 1))


def blackman(length: int) -> np.ndarray:
    """One-sided Blackman window."""
    k = _lags(length)
    if length == 1:
        return np.ones(1, dtype=float)
    M = length - 1
    return (
        0.42
        + 0.5 * np.cos(2.0 * np.pi * k / M)
        + 0.08 * np.cos(4.0 * np.pi * k / M)
    )


_WINDOW_FUNCS = {
    WindowShape.RECTANGULAR: rectangular,
    WindowShape.BARTLETT: bartlett,
    WindowShape.HANNING: hanning,
    WindowShape.HAMMING: hamming,
    WindowShape.BLACKMAN: blackman,
}


def shape_into(
    values: np.ndarray,
    coefficients: Optional[np.ndarray] = None,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Multiply window values by an optional coefficient set and store them.

    Args:
        values: One-sided window values.
        coefficients: Optional one-sided set to shape; must match ``values``
            in size.
        out: Optional destination. If None a new array is allocated and
            returned; otherwise ``out`` is overwritten and returned. ``out``
            may be the same array as ``coefficients``.

    Returns:
        The shaped coefficient set.

    Raises:
        InvalidLengthError: If sizes do not agree.
    """
    size = values.size
    if coefficients is not None:
        coefficients = np.asarray(coefficients, dtype=float)
        if coefficients.shape != (size,):
            raise InvalidLengthError(
                f"coefficients must have {size} values, got shape {coefficients.shape}"
            )
    if out is None:
        out = allocate(size)
    elif out.shape != (size,):
        raise InvalidLengthError(
            f"out must have {size} values, got shape {out.shape}"
        )

    if coefficients is None:
        out[:] = values
    else:
        np.multiply(values, coefficients, out=out)
    return out


def create_window(
    length: int,
    shape: Union[WindowShape, str],
    coefficients: Optional[np.ndarray] = None,
    out: Optional[np.ndarray] = None,
    beta: Optional[float] = None,
) -> np.ndarray:
    """Generate a one-sided window, optionally shaping a coefficient set.

    With ``coefficients`` given, the result is ``window[k] * coefficients[k]``;
    this is how ideal sinc coefficients are tapered.

    Args:
        length: Odd full filter length.
        shape: Window shape or its name.
        coefficients: Optional one-sided set of ``(length + 1) // 2`` values.
        out: Optional destination array, overwritten in place and returned.
            May alias ``coefficients``.
        beta: Kaiser shape parameter (required for KAISER, ignored otherwise).

    Returns:
        One-sided window (or shaped coefficients) of ``(length + 1) // 2``
        values.

    Raises:
        InvalidLengthError: If length is even or non-positive, or array sizes
            disagree.
        InvalidTypeError: If the shape is not recognized.
        ValueError: If KAISER is requested without beta.
    """
    half_length(length)
    shape = WindowShape.parse(shape)

    if shape is WindowShape.KAISER:
        if beta is None:
            raise ValueError("Kaiser window requires beta")
        from .kaiser import kaiser_window

        return kaiser_window(length, beta, coefficients=coefficients, out=out)

    values = _WINDOW_FUNCS[shape](length)
    return shape_into(values, coefficients=coefficients, out=out)
