"""Tests for dsp.bessel module."""

import numpy as np
import pytest

from firstream.config import BESSEL_SERIES_TERMS
from firstream.dsp.bessel import bessel_i0


def test_i0_at_zero():
    assert bessel_i0(0.0) == 1.0
    assert isinstance(bessel_i0(0.0), float)


def test_i0_known_value():
    # I0(2) = 2.27958530...
    assert abs(bessel_i0(2.0) - 2.2796) < 1e-3
    assert abs(bessel_i0(2.0) - 2.2795853023360673) < 1e-12


def test_i0_strictly_increasing():
    x = np.linspace(0.01, 12.0, 400)
    y = bessel_i0(x)
    assert np.all(np.diff(y) > 0)


def test_i0_even_function():
    x = np.array([0.3, 1.7, 4.2])
    np.testing.assert_allclose(bessel_i0(-x), bessel_i0(x))


def test_i0_matches_numpy():
    """Twenty terms are accurate over the Kaiser beta range."""
    x = np.array([0.5, 1.0, 3.0, 5.0, 8.0, 10.0])
    np.testing.assert_allclose(bessel_i0(x), np.i0(x), rtol=1e-9)


def test_i0_array_shape_preserved():
    x = np.zeros((2, 3))
    y = bessel_i0(x)
    assert y.shape == (2, 3)
    assert np.all(y == 1.0)


def test_i0_terms_knob():
    # A single term is the constant 1.
    assert bessel_i0(5.0, terms=1) == 1.0
    # Two terms: 1 + (x/2)^2
    assert bessel_i0(4.0, terms=2) == pytest.approx(5.0)
    # Truncation error shrinks with more terms for large arguments.
    exact = float(np.i0(25.0))
    err_default = abs(bessel_i0(25.0) - exact)
    err_more = abs(bessel_i0(25.0, terms=60) - exact)
    assert err_more < err_default
    assert BESSEL_SERIES_TERMS == 20


def test_i0_invalid_terms():
    with pytest.raises(ValueError):
        bessel_i0(1.0, terms=0)
