"""Exception hierarchy for filter design and streaming setup.

Every error derives from the builtin the rest of the package would
otherwise raise (``ValueError`` or ``MemoryError``), so callers that
catch those keep working.
"""

from __future__ import annotations


class FIRError(Exception):
    """Base class for all firstream errors."""


class InvalidLengthError(FIRError, ValueError):
    """Filter or window length is not a positive odd integer, or sizes disagree."""


class InvalidTypeError(FIRError, ValueError):
    """Unsupported filter kind or window shape."""


class AllocationError(FIRError, MemoryError):
    """Coefficient storage could not be obtained."""


class BufferMisconfigurationError(FIRError, ValueError):
    """Circular buffer capacity is not a power of two or is too small."""


__all__ = [
    "FIRError",
    "InvalidLengthError",
    "InvalidTypeError",
    "AllocationError",
    "BufferMisconfigurationError",
]
