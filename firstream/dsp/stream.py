"""Real-time symmetric FIR convolution over a circular buffer.

For a one-sided set c[0..M] (full length 2M + 1) and input x, each call
produces

    y[n] = c[0]*x[n-M] + sum_{k=1}^{M} c[k] * (x[n-M-k] + x[n-M+k])

which is the causal linear-phase convolution with the mirrored kernel.
Pairing the mirrored taps needs M + 1 multiplies instead of 2M + 1. The
output lags the input by M samples (the group delay).

Only the last 2M + 1 samples are read, so the buffer capacity must be at
least the filter length. Capacity is checked once at construction and
the per-sample path carries no configuration branches.

Sample values are not validated on either path: `process` and
`process_block` both accept NaN and Inf, which propagate into every output
whose window covers them until they leave the buffer. Only the shape of a
block is checked.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..config import DEFAULT_BUFFER_CAPACITY
from ..diagnostics import assert_symmetric
from ..errors import InvalidLengthError
from ..logging import get_logger
from .buffer import CircularBuffer
from .utils import check_1d_array, mirror_coefficients

logger = get_logger(__name__)


class _SymmetricTaps:
    """Precomputed taps and slot offsets for one one-sided coefficient set."""

    __slots__ = ("coefficients", "center", "side", "delay", "older", "newer")

    def __init__(self, coefficients: np.ndarray) -> None:
        c = check_1d_array(coefficients).copy()
        if c.size == 0:
            raise InvalidLengthError("coefficient set must not be empty")

        M = c.size - 1
        lags = np.arange(1, M + 1)

        self.coefficients = c
        self.center = float(c[0])
        self.side = c[1:]
        self.delay = M
        # Offsets from the newest slot; negative values wrap through the mask.
        self.older = -M - lags
        self.newer = -M + lags

    @property
    def length(self) -> int:
        return 2 * self.delay + 1

    def evaluate(self, data: np.ndarray, slot: int, mask: int) -> float:
        pairs = data[(slot + self.older) & mask] + data[(slot + self.newer) & mask]
        return self.center * data[(slot - self.delay) & mask] + float(self.side @ pairs)


class StreamingFIR:
    """Sample-by-sample linear-phase FIR filter.

    Args:
        coefficients: One-sided coefficient set (center tap first).
        capacity: Circular buffer capacity; power of two, at least the
            filter length (default: ``DEFAULT_BUFFER_CAPACITY``).

    Raises:
        InvalidLengthError: If the coefficient set is empty.
        BufferMisconfigurationError: If capacity is not a power of two or is
            smaller than the filter length.

    Example:
        >>> spec = FilterSpec("lowpass", 21, 100.0, 8000.0)
        >>> fir = StreamingFIR(design_filter(spec))
        >>> y = fir.process(0.5)
    """

    def __init__(
        self, coefficients: np.ndarray, capacity: int = DEFAULT_BUFFER_CAPACITY
    ) -> None:
        self._taps = _SymmetricTaps(coefficients)
        self._buffer = CircularBuffer(capacity, min_capacity=self._taps.length)
        logger.debug(
            "StreamingFIR: length=%d delay=%d capacity=%d",
            self._taps.length,
            self._taps.delay,
            capacity,
        )

    @classmethod
    def from_kernel(
        cls, kernel: np.ndarray, capacity: int = DEFAULT_BUFFER_CAPACITY
    ) -> "StreamingFIR":
        """Build a filter from a full symmetric kernel.

        Raises:
            ValueError: If the kernel has even length or is not symmetric.
        """
        kernel = check_1d_array(kernel)
        assert_symmetric(kernel)
        return cls(kernel[kernel.size // 2 :], capacity=capacity)

    @property
    def coefficients(self) -> np.ndarray:
        """Copy of the one-sided coefficient set."""
        return self._taps.coefficients.copy()

    @property
    def kernel(self) -> np.ndarray:
        """Full mirrored kernel."""
        return mirror_coefficients(self._taps.coefficients)

    @property
    def length(self) -> int:
        return self._taps.length

    @property
    def delay(self) -> int:
        """Group delay in samples between an input and its filtered output."""
        return self._taps.delay

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    @property
    def buffer(self) -> CircularBuffer:
        return self._buffer

    def process(self, sample: float) -> float:
        """Push one sample and return the filtered output delayed by ``delay``."""
        buf = self._buffer
        slot = buf.write(sample)
        return self._taps.evaluate(buf.data, slot, buf.mask)

    def process_block(self, samples: Sequence[float]) -> np.ndarray:
        """Stream a block of samples, returning one output per input.

        State carries across calls, so splitting a signal into blocks gives
        the same result as processing it in one go. Non-finite samples are
        accepted, as in `process`.

        Raises:
            ValueError: If ``samples`` is not one-dimensional.
        """
        x = check_1d_array(samples, allow_nonfinite=True)
        y = np.empty_like(x)
        for i, sample in enumerate(x):
            y[i] = self.process(sample)
        return y

    def reset(self) -> None:
        """Clear the sample history."""
        self._buffer.clear()

    def __repr__(self) -> str:
        return (
            f"StreamingFIR(length={self.length}, delay={self.delay}, "
            f"capacity={self.capacity})"
        )


class FilterBank:
    """Several FIR filters reading one shared sample history.

    Each incoming sample is written once and every filter evaluates against
    the same circular buffer.

    Args:
        coefficient_sets: One-sided coefficient sets, one per filter.
        capacity: Shared buffer capacity; power of two, at least the longest
            filter length.
    """

    def __init__(
        self,
        coefficient_sets: Sequence[np.ndarray],
        capacity: int = DEFAULT_BUFFER_CAPACITY,
    ) -> None:
        if len(coefficient_sets) == 0:
            raise ValueError("FilterBank needs at least one coefficient set")
        self._taps = [_SymmetricTaps(c) for c in coefficient_sets]
        longest = max(t.length for t in self._taps)
        self._buffer = CircularBuffer(capacity, min_capacity=longest)
        logger.debug(
            "FilterBank: %d filters, longest=%d capacity=%d",
            len(self._taps),
            longest,
            capacity,
        )

    @property
    def delays(self) -> list[int]:
        """Group delay of each filter in samples."""
        return [t.delay for t in self._taps]

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def __len__(self) -> int:
        return len(self._taps)

    def process(self, sample: float) -> np.ndarray:
        """Push one sample and return one output per filter."""
        buf = self._buffer
        slot = buf.write(sample)
        data, mask = buf.data, buf.mask
        return np.array([t.evaluate(data, slot, mask) for t in self._taps])

    def process_block(self, samples: Sequence[float]) -> np.ndarray:
        """Stream a block; returns an array of shape (n_samples, n_filters).

        Like `process`, non-finite samples pass through unchecked.
        """
        x = check_1d_array(samples, allow_nonfinite=True)
        y = np.empty((x.size, len(self._taps)), dtype=float)
        for i, sample in enumerate(x):
            y[i] = self.process(sample)
        return y

    def reset(self) -> None:
        """Clear the shared sample history."""
        self._buffer.clear()
