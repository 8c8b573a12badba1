"""Logging utilities for scaffold commands."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOGGER_NAME = "scaffold"
_FORMAT = "[scaffold] %(levelname)s %(message)s"
_VERBOSE_FORMAT = "[scaffold] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below ``scaffold``, e.g. ``scaffold.analyzers.props``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Route scaffold records to ``stream`` (stderr by default).

    Generated module text goes to stdout on ``--dry-run``, so log records are
    kept off it. Verbose runs log at DEBUG and name the emitting module.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT if verbose else _FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
