"""Package-wide defaults.

``DEFAULT_BUFFER_CAPACITY`` must stay a power of two: the streaming engine
wraps its cursor with ``capacity - 1`` as a bitmask.

``BESSEL_SERIES_TERMS`` trades accuracy for speed in the I0 power series.
Twenty terms keep the relative error below 1e-9 for ``x <= 10``, which
covers the beta range Kaiser windows use in practice (attenuation up to
roughly 100 dB).

``DEBUG_ENV_VAR`` names the environment variable that switches on the
design-time finiteness checks at import.
"""

DEFAULT_BUFFER_CAPACITY: int = 1024
BESSEL_SERIES_TERMS: int = 20
DEFAULT_WINDOW: str = "hamming"
DEBUG_ENV_VAR: str = "FIRSTREAM_DEBUG"

__all__ = [
    "DEFAULT_BUFFER_CAPACITY",
    "BESSEL_SERIES_TERMS",
    "DEFAULT_WINDOW",
    "DEBUG_ENV_VAR",
]
