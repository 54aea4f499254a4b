"""Logging for the ``pantryscan`` logger namespace.

All package loggers hang off one ``pantryscan`` logger that writes to stderr,
so receipt JSON printed on stdout stays clean. Debug output adds the source
line to each record.

Environment variables:
    PANTRYSCAN_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR. Default: INFO
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

ROOT_LOGGER_NAME = "pantryscan"

LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def level_from_env() -> int:
    """Read PANTRYSCAN_LOG_LEVEL; unknown or missing values give DEFAULT_LOG_LEVEL."""
    return LEVEL_NAMES.get(os.environ.get("PANTRYSCAN_LOG_LEVEL", "").strip().upper(), DEFAULT_LOG_LEVEL)


def _formatter(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level <= logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach the stderr handler to the package logger, once.

    Later calls return the already configured logger unchanged; use
    set_log_level() to change the level afterwards.

    Args:
        level: Log level to use. If None, PANTRYSCAN_LOG_LEVEL decides.

    Returns:
        The ``pantryscan`` logger
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if package_logger.handlers:
        return package_logger

    if level is None:
        level = level_from_env()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(level))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Module names already under the package (``pantryscan.receipt.parser``)
    are used as-is; anything else is nested under ``pantryscan.``.
    """
    configure_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int) -> None:
    """Change the package log level and switch the record format to match."""
    package_logger = configure_logging(level)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setFormatter(_formatter(level))
