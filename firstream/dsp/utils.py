"""Utility functions for filter design and streaming.

Provides helper routines for input validation, one-sided coefficient
bookkeeping, and frequency analysis.
"""

from typing import Tuple

import numpy as np

from ..errors import AllocationError, InvalidLengthError


def check_1d_array(x, allow_nonfinite: bool = False) -> np.ndarray:
    """Validate and cast input to 1D float64 array.

    Args:
        x: Input array-like object.
        allow_nonfinite: If True, skip the NaN/Inf checks and only
            validate the shape.

    Returns:
        1D float64 numpy array.

    Raises:
        ValueError: If input is not 1D, or (unless ``allow_nonfinite``)
            contains NaN or Inf.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if allow_nonfinite:
        return arr
    if np.any(np.isnan(arr)):
        raise ValueError("Input contains NaN values")
    if np.any(np.isinf(arr)):
        raise ValueError("Input contains Inf values")
    return arr


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def next_pow2(n: int) -> int:
    """Return the next power-of-two >= n.

    Args:
        n: Positive integer.

    Returns:
        Smallest power-of-two >= n. Returns 1 if n <= 0.
    """
    if n <= 0:
        return 1
    if is_power_of_two(n):
        return n
    return 1 << (n - 1).bit_length()


def half_length(length: int) -> int:
    """Return the one-sided size ``(length + 1) // 2`` of an odd-length filter.

    Raises:
        InvalidLengthError: If length is not a positive odd integer.
    """
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise InvalidLengthError(f"length must be an integer, got {length!r}")
    if length <= 0:
        raise InvalidLengthError(f"length must be positive, got {length}")
    if length % 2 == 0:
        raise InvalidLengthError(f"length must be odd, got {length}")
    return (int(length) + 1) // 2


def allocate(size: int) -> np.ndarray:
    """Allocate a zeroed float64 coefficient array.

    Raises:
        AllocationError: If the storage cannot be obtained.
    """
    try:
        return np.zeros(size, dtype=float)
    except MemoryError as exc:
        raise AllocationError(
            f"Cannot allocate storage for {size} coefficients"
        ) from exc


def mirror_coefficients(coefficients: np.ndarray) -> np.ndarray:
    """Rebuild a full symmetric kernel from a one-sided coefficient set.

    A one-sided set ``[c0, c1, ..., cM]`` becomes
    ``[cM, ..., c1, c0, c1, ..., cM]`` of length ``2M + 1``.

    Args:
        coefficients: One-sided coefficients (center tap first).

    Returns:
        Full kernel of odd length.
    """
    c = check_1d_array(coefficients)
    return np.concatenate([c[:0:-1], c])


def freqz(
    coefficients: np.ndarray, worN: int = 512, fs: float = 1.0
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the frequency response of a one-sided FIR design.

    The one-sided set is mirrored to its full kernel and the response is
    sampled with an FFT. The linear-phase term is left in place, so
    ``np.abs(h)`` is the magnitude response.

    Args:
        coefficients: One-sided coefficients.
        worN: Number of FFT points (default: 512).
        fs: Sampling frequency in Hz (default: 1.0).

    Returns:
        Tuple (w, h) where:
        - w: Frequency array in Hz (0 to fs/2).
        - h: Complex frequency response H(e^(jw)).
    """
    kernel = mirror_coefficients(coefficients)
    n_fft = max(worN, next_pow2(kernel.size))
    h = np.fft.rfft(kernel, n=n_fft)
    w = np.fft.rfftfreq(n_fft, 1.0 / fs)
    return w, h
