"""Tests for logging utilities."""

import logging
from io import StringIO

from firstream.dsp.fir import FilterSpec, design_filter
from firstream.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "firstream.test_module"


def test_get_logger_keeps_package_names():
    """Module names already under the package are not prefixed twice."""
    logger = get_logger("firstream.dsp.fir")
    assert logger.name == "firstream.dsp.fir"


def test_get_logger_default_name():
    assert get_logger().name == "firstream"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    assert all(h.level == logging.INFO for h in logger.handlers)

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("ERROR")
    assert logger.level == logging.ERROR


def test_configure_logging():
    """Test configure_logging redirects output."""
    stream = StringIO()
    logger = get_logger("test_module")
    configure_logging(level=logging.DEBUG, stream=stream)

    logger.debug("Debug message")

    output = stream.getvalue()
    assert "Debug message" in output
    assert "[DEBUG] firstream.test_module" in output


def test_design_logs_at_debug():
    """Filter design reports its parameters at DEBUG level."""
    stream = StringIO()
    get_logger("firstream.dsp.fir")
    configure_logging(level="DEBUG", stream=stream)

    design_filter(FilterSpec("lowpass", 21, 100.0, 8000.0), window="hamming")

    output = stream.getvalue()
    assert "lowpass" in output
    assert "hamming" in output


def test_logger_does_not_propagate():
    logger = get_logger("test_module")
    assert logger.propagate is False
