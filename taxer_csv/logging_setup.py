"""Logging for the ``taxer_csv`` package.

The package logger carries a NullHandler, so nothing is emitted until the
host application calls ``configure_logging`` or configures logging itself.
Library modules only call ``get_logger(__name__)`` and log at DEBUG.
"""

import logging
from typing import IO, Optional, Union

PACKAGE_LOGGER = "taxer_csv"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: Optional[logging.Handler] = None

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    fmt: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Send package log records to a stream.

    Calling it again replaces the handler installed by the previous call, so
    the package never emits a record twice.

    Args:
        level: Level as int or name (e.g. "DEBUG")
        fmt: Format string, defaults to DEFAULT_FORMAT
        stream: Output stream, defaults to sys.stderr

    Returns:
        The installed handler

    Raises:
        ValueError: If level is an unknown level name
    """
    global _handler
    numeric_level = _resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    _handler = handler
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
