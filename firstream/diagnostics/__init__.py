"""Diagnostics and debugging utilities for firstream."""

from .core import assert_finite, assert_symmetric, is_symmetric
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
