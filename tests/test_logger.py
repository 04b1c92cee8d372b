"""Tests for CLI logging setup."""

import io
import logging
import sys

import pytest

from css_var_fallback.core import logger as logger_module
from css_var_fallback.core.logger import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    if logger_module._cli_handler is not None:
        package_logger.removeHandler(logger_module._cli_handler)
        logger_module._cli_handler = None
    package_logger.setLevel(level)


def _stream_handlers():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    return [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]


def test_reconfigure_after_stderr_was_closed(monkeypatch):
    first = io.StringIO()
    monkeypatch.setattr(sys, "stderr", first)
    configure_logging()
    first.close()

    second = io.StringIO()
    monkeypatch.setattr(sys, "stderr", second)
    configure_logging()

    get_logger("css_var_fallback.test").info("rebuilt")

    assert "INFO css_var_fallback.test: rebuilt" in second.getvalue()


def test_single_handler_after_repeated_calls(monkeypatch):
    monkeypatch.setattr(sys, "stderr", io.StringIO())
    configure_logging()
    configure_logging(verbose=True)

    assert len(_stream_handlers()) == 1
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
