from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "css_var_fallback"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_cli_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """
    Attach a stderr handler to the package logger (used by the CLI).

    A handler installed by an earlier call is swapped for one bound to the
    current ``sys.stderr``; the old stream is never flushed since it may
    already be closed.
    """
    global _cli_handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    _cli_handler = handler
