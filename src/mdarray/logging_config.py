"""
Logging Configuration
=====================
Opt-in log output for programs that use mdarray.

The library only attaches a ``NullHandler`` on import, so array operations
stay silent until an application calls :func:`setup_logging`. At DEBUG level
the package reports every array it builds and every shape it validates; at
ERROR level it reports index sequences that are deeper than the array they
address.
"""
import logging
import sys
from typing import Optional

from mdarray.config import PACKAGE_LOGGER

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route records of ``mdarray`` and its modules to stdout, and optionally
    to a file.

    Safe to call repeatedly, e.g. once per notebook cell: the package logger
    is reset each time, so records are never printed twice.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: Path of a log file, overwritten on every call.

    Returns:
        The ``mdarray`` package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    # Replaces the NullHandler and anything left by an earlier call
    package_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return package_logger
