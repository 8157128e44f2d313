"""Logging configuration."""

import logging
import sys
from typing import Optional, TextIO

from .settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure logging for an application embedding quantgreeks.

    The library itself only attaches a NullHandler; applications call this
    once at startup to get formatted output.

    Args:
        level: Log level name, defaults to Settings.LOG_LEVEL
        stream: Output stream, defaults to stdout

    Returns:
        The package logger
    """
    log_level = (level or get_settings().LOG_LEVEL).upper()

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=stream or sys.stdout,
        force=True,
    )

    logger = logging.getLogger("quantgreeks")
    logger.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the quantgreeks namespace."""
    return logging.getLogger(f"quantgreeks.{name}")
