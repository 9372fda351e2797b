"""
Unified logging module
======================

Single place that configures logging for the roster_merge package.

Usage:
    from roster_merge.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Scanning sheet: %s", sheet_name)
    logger.debug("Header row %d classified as %s", row, groups)
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = "INFO"

PROJECT_LOGGER = "roster_merge"

_root_configured = False


def _configure_root_logger() -> None:
    """
    Attach a console handler to the project root logger.

    Runs once; the CLI prints its summary on stdout, so log records go to stderr.
    """
    global _root_configured
    if _root_configured:
        return

    console_handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger(PROJECT_LOGGER)
    root_logger.setLevel(_settings_level())
    root_logger.addHandler(console_handler)
    root_logger.propagate = False

    _root_configured = True


def _settings_level() -> str:
    """Starting level, taken from Settings.LOG_LEVEL like every other setting."""
    from pydantic import ValidationError

    from roster_merge.config import get_settings

    try:
        return get_settings().LOG_LEVEL
    except ValidationError:
        # callers hit the same ValidationError when they load Settings
        return DEFAULT_LEVEL


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return a logger for *name*, usually the caller's ``__name__``.

    Example:
        logger = get_logger(__name__)
        logger.info("Merged %d tables", count)
    """
    _configure_root_logger()

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_level(level: Union[int, str], logger_name: Optional[str] = None) -> None:
    """
    Set the level of one logger, or of the project root logger when
    *logger_name* is ``None``.

    Example:
        set_level(logging.DEBUG)                              # whole package
        set_level(logging.DEBUG, "roster_merge.tables.detector")  # detector only
    """
    _configure_root_logger()
    if isinstance(level, str):
        level = level.strip().upper()
    logging.getLogger(logger_name or PROJECT_LOGGER).setLevel(level)
