"""Project logging: four named verbosity levels on the ``srs_engine`` logger.

    =========  =======================
    Name       Numeric level
    =========  =======================
    QUIET      WARNING (30)
    NORMAL     INFO (20), the default
    VERBOSE    15, solver iteration counts
    DEBUG      DEBUG (10), coefficient matrices
    =========  =======================

Modules log through ``logging.getLogger(__name__)``; everything under
``srs_engine`` inherits the level set by :func:`configure_logging`.  The
level is taken from the explicit argument, then the ``SRS_ENGINE_LOG_LEVEL``
environment variable, then ``NORMAL``.

Usage::

    >>> from srs_engine.utils.logger import configure_logging, get_logger
    >>> configure_logging("verbose")
    15
    >>> get_logger("schedule").info("league has %d teams", 32)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

VERBOSE: int = 15
logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
NORMAL: int = logging.INFO
DEBUG: int = logging.DEBUG

_LEVELS: dict[str, int] = {"QUIET": QUIET, "NORMAL": NORMAL, "VERBOSE": VERBOSE, "DEBUG": DEBUG}

LEVEL_NAMES: tuple[str, ...] = tuple(_LEVELS)
"""Accepted level names, in decreasing severity."""

ROOT_LOGGER: str = "srs_engine"
ENV_VAR: str = "SRS_ENGINE_LOG_LEVEL"

_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Map a level name (or the environment default) to its numeric value.

    Raises:
        ValueError: The name is not one of :data:`LEVEL_NAMES`.
    """
    name = level if level is not None else os.environ.get(ENV_VAR, "NORMAL")
    try:
        return _LEVELS[name.upper()]
    except KeyError:
        msg = f"Unknown log level {name!r}. Valid levels: {', '.join(LEVEL_NAMES)}"
        raise ValueError(msg) from None


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> int:
    """Point the ``srs_engine`` logger at a single stream handler.

    Safe to call repeatedly: earlier handlers are dropped, and records never
    reach the Python root logger.

    Args:
        level: ``QUIET``, ``NORMAL``, ``VERBOSE`` or ``DEBUG`` (any case).
        stream: Destination, ``sys.stderr`` when omitted.

    Returns:
        The numeric level applied.

    Raises:
        ValueError: Unknown level name.
    """
    numeric = resolve_level(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)
    root.propagate = False
    return numeric


def get_logger(name: str) -> logging.Logger:
    """Return ``srs_engine.<name>``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
