"""Tests for debug mode and coefficient diagnostics."""

import numpy as np
import pytest

from firstream.diagnostics import (
    assert_finite,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)
from firstream.diagnostics.debug_mode import flag_from_env
from firstream.dsp.fir import FilterSpec, design_filter
from firstream.dsp.stream import StreamingFIR


def test_debug_mode_toggle_and_context() -> None:
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    assert not is_debug_enabled()

    set_debug_enabled(True)
    with debug_context(False):
        assert not is_debug_enabled()
    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    set_debug_enabled(False)

    with debug_context(True):
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


def test_set_debug_enabled_returns_previous() -> None:
    set_debug_enabled(False)
    assert set_debug_enabled(True) is False
    assert set_debug_enabled(True) is True
    assert set_debug_enabled(False) is True


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("TRUE", True), (" on ", True), ("yes", True),
     ("0", False), ("off", False), ("", False), (None, False)],
)
def test_flag_from_env(value, expected) -> None:
    assert flag_from_env(value) is expected


def test_assert_finite() -> None:
    assert_finite(np.array([0.0, 1.0, -2.5]))
    with pytest.raises(ValueError, match="indices \\[1\\]"):
        assert_finite(np.array([0.0, np.nan, 1.0]))
    with pytest.raises(ValueError):
        assert_finite(np.array([np.inf]))


def test_symmetry_checks() -> None:
    assert is_symmetric(np.array([1.0, 2.0, 3.0, 2.0, 1.0]))
    assert not is_symmetric(np.array([1.0, 2.0, 3.0, 2.5, 1.0]))

    assert_symmetric(np.array([0.5, 1.0, 0.5]))
    with pytest.raises(ValueError, match="odd length"):
        assert_symmetric(np.array([1.0, 1.0]))
    with pytest.raises(ValueError, match="not even-symmetric"):
        assert_symmetric(np.array([0.5, 1.0, 0.4]))


def test_streaming_rejects_asymmetric_kernel() -> None:
    StreamingFIR.from_kernel(np.array([0.25, 0.5, 0.25]))
    with pytest.raises(ValueError):
        StreamingFIR.from_kernel(np.array([0.25, 0.5, 0.3]))


def test_design_under_debug_mode() -> None:
    spec = FilterSpec("highpass", 31, 500.0, 8000.0)
    with debug_context(True):
        c = design_filter(spec, window="blackman")
    assert c.shape == (16,)
    assert np.all(np.isfinite(c))
