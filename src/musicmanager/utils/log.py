"""Logging configuration."""

import logging
from typing import Optional

PACKAGE_LOGGER = "musicmanager"

_configured = False


def _configure_package_logger() -> None:
    """Attach the single stream handler to the package logger."""
    global _configured
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(logging.WARNING)  # Only show warnings and errors
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a musicmanager module.

    Module loggers carry no handler of their own; records reach the
    package logger's handler through propagation.
    """
    if not _configured:
        _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: int, name: Optional[str] = None) -> None:
    """
    Change the level of musicmanager logging.

    Args:
        level: A ``logging`` level such as ``logging.DEBUG``.
        name: Only adjust this logger. Default: the package logger, which
            every module logger inherits its level from.
    """
    get_logger(name or PACKAGE_LOGGER).setLevel(level)
