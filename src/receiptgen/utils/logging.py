"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``receiptgen`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - :func:`configure_logging` is idempotent; repeated calls only adjust the
      level of the single handler it installs.
    - The handler resolves ``sys.stderr`` on every write, so streams swapped
      in and closed by an embedding caller are never held on to.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "receiptgen"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level."""

    logger = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = next((h for h in logger.handlers if isinstance(h, StderrHandler)), None)
    if handler is None:
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER", "StderrHandler", "configure_logging", "get_logger"]
