"""Debug switch for design-time coefficient checks.

While enabled, ``ideal_coefficients`` and ``design_filter`` verify that the
sets they return are finite. The streaming path never consults the switch.
The initial state comes from the ``FIRSTREAM_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from ..config import DEBUG_ENV_VAR
from ..logging import get_logger

logger = get_logger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def flag_from_env(value: Optional[str]) -> bool:
    """Interpret an environment value as an on/off flag (unset means off)."""
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = flag_from_env(os.getenv(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """Turn design checks on or off and return the previous setting."""
    global _debug_enabled
    previous, _debug_enabled = _debug_enabled, bool(enabled)
    if previous != _debug_enabled:
        logger.debug("Design checks %s", "enabled" if _debug_enabled else "disabled")
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """Run a block with design checks forced on (or off), then restore."""
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
