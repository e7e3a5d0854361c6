"""Logging setup shared by the library, the CLI, and the server."""

from __future__ import annotations

import logging
import sys

from dumbdown.config import DUMBDOWN_LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_ROOT_LOGGER_NAME = "dumbdown"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level.

    Called by the entry points (CLI, server); library code only asks for loggers.
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    effective_level = getattr(logging, (level or DUMBDOWN_LOG_LEVEL).upper(), logging.INFO)
    root.setLevel(effective_level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``dumbdown`` hierarchy.

    Modules outside the package (e.g. ``server.*``) get a child of the
    package logger so one handler serves every entry point.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
