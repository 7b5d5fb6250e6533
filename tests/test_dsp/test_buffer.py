"""Tests for dsp.buffer module."""

import numpy as np
import pytest

from firstream.dsp.buffer import CircularBuffer
from firstream.errors import BufferMisconfigurationError


def test_defaults():
    buf = CircularBuffer()
    assert buf.capacity == 1024
    assert buf.mask == 1023
    assert buf.cursor == 0
    assert len(buf) == 1024
    assert np.all(buf.data == 0.0)


def test_write_advances_and_wraps():
    buf = CircularBuffer(4)
    slots = [buf.write(float(v)) for v in range(6)]
    assert slots == [0, 1, 2, 3, 0, 1]
    assert buf.cursor == 2
    np.testing.assert_array_equal(buf.data, [4.0, 5.0, 2.0, 3.0])


def test_recent_is_time_ordered():
    buf = CircularBuffer(8)
    for v in range(11):
        buf.write(float(v))
    np.testing.assert_array_equal(buf.recent(3), [8.0, 9.0, 10.0])
    np.testing.assert_array_equal(buf.recent(), np.arange(3.0, 11.0))
    assert buf.recent(0).size == 0
    with pytest.raises(ValueError):
        buf.recent(9)


def test_clear():
    buf = CircularBuffer(4)
    buf.write(1.0)
    buf.write(2.0)
    buf.clear()
    assert buf.cursor == 0
    assert np.all(buf.data == 0.0)


@pytest.mark.parametrize("capacity", [0, -4, 3, 1000, 2.0, True, "64"])
def test_invalid_capacity(capacity):
    with pytest.raises(BufferMisconfigurationError):
        CircularBuffer(capacity)


def test_min_capacity():
    CircularBuffer(32, min_capacity=32)
    with pytest.raises(BufferMisconfigurationError):
        CircularBuffer(32, min_capacity=33)


def test_numpy_integer_capacity():
    buf = CircularBuffer(np.int64(16))
    assert buf.capacity == 16
    assert isinstance(buf.capacity, int)


def test_repr():
    assert repr(CircularBuffer(8)) == "CircularBuffer(capacity=8, cursor=0)"
