"""Logging setup for numkit.

This module contains:
- ``get_logger`` for module-level loggers under the ``numkit`` namespace
- ``configure_logging`` to attach a stream handler to that namespace

The library never touches the root logger. Until an application configures
logging, records are swallowed by a ``NullHandler``.
"""

from __future__ import annotations

import logging
from typing import IO

__all__ = [
    "ROOT_LOGGER_NAME",
    "DEFAULT_FORMAT",
    "LOG_LEVELS",
    "get_logger",
    "configure_logging",
]

ROOT_LOGGER_NAME = "numkit"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_HANDLER_NAME = "numkit-stream"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``numkit`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            ``numkit`` namespace are nested under it.

    Returns:
        The logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str | int = "WARNING",
    *,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a stream handler to the ``numkit`` logger and set its level.

    Repeated calls reuse the same handler, so records are never duplicated.

    Args:
        level: Level name (case-insensitive) or numeric level.
        fmt: Format string for the handler.
        stream: Output stream. Defaults to ``sys.stderr``.

    Returns:
        The configured ``numkit`` logger.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    if isinstance(level, str):
        name = level.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        level = getattr(logging, name)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(stream)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    elif stream is not None and isinstance(handler, logging.StreamHandler):
        handler.setStream(stream)
    handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(level)
    return logger
