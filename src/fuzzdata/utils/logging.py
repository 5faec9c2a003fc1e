"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``fuzzdata`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Logging configuration is idempotent; repeated calls only adjust the level.
    - The library itself never configures handlers on import beyond a
      ``NullHandler``.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

ROOT_LOGGER = "fuzzdata"
_HANDLER_NAME = "fuzzdata-stderr"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single handler for the current ``sys.stderr`` to the package logger.

    A handler left by an earlier call is replaced, since ``sys.stderr`` may have
    been swapped (e.g. by a test runner) in the meantime.
    """

    root = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    handler.setLevel(level)
    root.setLevel(level)
    return root
