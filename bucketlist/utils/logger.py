"""
Logging configuration for the bucketlist package.

Every module logs through ``logging.getLogger(__name__)``; this module
attaches handlers to the package root logger so the whole hierarchy
shares one console (and optionally file) output.
"""

import logging
from pathlib import Path
from typing import Optional

from bucketlist.core.config import settings

LOGGER_NAME = "bucketlist"

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger with a console handler and an optional file handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...). Defaults to settings.LOG_LEVEL
        log_file: Path to a log file. Defaults to settings.LOG_FILE; no file output when unset

    Returns:
        The configured ``bucketlist`` logger
    """
    level = level or settings.LOG_LEVEL
    log_file = log_file or settings.LOG_FILE

    logger = logging.getLogger(LOGGER_NAME)
    # getLevelName maps unknown names to "Level <name>" strings
    level_number = logging.getLevelName(level.upper())
    logger.setLevel(level_number if isinstance(level_number, int) else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False

    logger.debug("Logging configured for %s version v%s", settings.PROJECT_NAME, settings.VERSION)

    return logger
