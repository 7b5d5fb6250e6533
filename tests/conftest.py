"""Pytest configuration and shared fixtures for firstream tests.

This module provides:
- A deterministic numpy RNG fixture
- Global seeding so tests are reproducible
"""

import os

import numpy as np
import pytest

from firstream.diagnostics import is_debug_enabled, set_debug_enabled
from firstream.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy's global RNG for code that uses np.random directly."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture(scope="function", autouse=True)
def restore_global_state():
    """Undo debug-mode and logging changes a test makes."""
    debug = is_debug_enabled()
    yield
    set_debug_enabled(debug)
    configure_logging(level="WARNING")
