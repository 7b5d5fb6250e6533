"""Diagnostic checks for coefficient sets and kernels."""

from __future__ import annotations

import numpy as np


def assert_finite(coefficients: np.ndarray, name: str = "coefficients") -> None:
    """
    Assert that every value in a coefficient array is finite.

    Parameters
    ----------
    coefficients:
        Array to check.
    name:
        Label used in the error message.

    Raises
    ------
    ValueError
        If any value is NaN or infinite.
    """
    arr = np.asarray(coefficients, dtype=float)
    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr))
        raise ValueError(
            f"{name} contains non-finite values at indices {bad.tolist()}"
        )


def is_symmetric(kernel: np.ndarray, atol: float = 1e-12) -> bool:
    """
    Check whether a full kernel is even-symmetric about its center.

    Parameters
    ----------
    kernel:
        1D array of filter taps.
    atol:
        Absolute tolerance for comparing mirrored taps.

    Returns
    -------
    bool
        True if ``kernel[i] == kernel[-1 - i]`` within the tolerance.
    """
    arr = np.asarray(kernel, dtype=float)
    return bool(np.allclose(arr, arr[::-1], atol=atol, rtol=0.0))


def assert_symmetric(kernel: np.ndarray, atol: float = 1e-12) -> None:
    """
    Assert that a full kernel has linear phase (even symmetry, odd length).

    Raises
    ------
    ValueError
        If the kernel has even length or is not symmetric.
    """
    arr = np.asarray(kernel, dtype=float)
    if arr.size % 2 == 0:
        raise ValueError(f"Linear-phase kernel must have odd length, got {arr.size}")
    if not is_symmetric(arr, atol=atol):
        raise ValueError("Kernel is not even-symmetric about its center tap")
