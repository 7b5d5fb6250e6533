"""Tests for the top-level package surface and error taxonomy."""

import numpy as np
import pytest

import firstream as fs
from firstream.errors import (
    AllocationError,
    BufferMisconfigurationError,
    FIRError,
    InvalidLengthError,
    InvalidTypeError,
)


def test_public_names_resolve():
    for name in fs.__all__:
        assert hasattr(fs, name), name


def test_error_hierarchy():
    for cls in (InvalidLengthError, InvalidTypeError, BufferMisconfigurationError):
        assert issubclass(cls, FIRError)
        assert issubclass(cls, ValueError)
    assert issubclass(AllocationError, FIRError)
    assert issubclass(AllocationError, MemoryError)


def test_allocation_failure_is_reported(monkeypatch):
    def _fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr("firstream.dsp.utils.np.zeros", _fail)
    with pytest.raises(AllocationError):
        fs.create_sinc(21, 100.0, 8000.0)


def test_end_to_end_pipeline():
    """Design, shape and stream with the top-level API."""
    spec = fs.FilterSpec(fs.FilterKind.LOW_PASS, 21, 100.0, 8000.0)
    ideal = fs.ideal_coefficients(spec)
    shaped = fs.create_window(spec.length, fs.WindowShape.HAMMING, coefficients=ideal)

    bank = fs.FilterBank([ideal, shaped])
    x = np.zeros(40)
    x[0] = 1.0
    y = bank.process_block(x)

    np.testing.assert_allclose(y[10], [ideal[0], shaped[0]])
