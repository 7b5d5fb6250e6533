"""Zeroth-order modified Bessel function of the first kind.

Evaluated with a fixed-length power series:

    I0(x) = sum_{i=0}^{terms-1} (x/2)^(2i) / (i!)^2

No convergence check is made. Each term is built from the previous one
(``term *= (x/2)^2 / i^2``) so no factorial is ever formed explicitly.
"""

from typing import Union

import numpy as np

from ..config import BESSEL_SERIES_TERMS


def bessel_i0(
    x: Union[float, np.ndarray], terms: int = BESSEL_SERIES_TERMS
) -> Union[float, np.ndarray]:
    """Evaluate I0(x) with a truncated power series.

    Args:
        x: Argument (scalar or array).
        terms: Number of series terms, including the leading 1
            (default: ``BESSEL_SERIES_TERMS``).

    Returns:
        I0(x) with the same shape as ``x``; a Python float for scalar input.

    Raises:
        ValueError: If terms < 1.
    """
    if terms < 1:
        raise ValueError(f"terms must be >= 1, got {terms}")

    arr = np.asarray(x, dtype=float)
    quarter_sq = (arr / 2.0) ** 2

    term = np.ones_like(arr)
    result = np.ones_like(arr)
    for i in range(1, terms):
        term = term * quarter_sq / (i * i)
        result = result + term

    if result.ndim == 0:
        return float(result)
    return result
