"""Logging utilities for the importer.

Every module logs through a named logger obtained from get_logger();
only the CLI configures handlers, via setup_logging().
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Configure the root logger.

    Safe to call more than once; previous handlers are replaced.

    Args:
        verbose: If True, log at DEBUG, otherwise INFO
        level: Optional explicit log level (overrides verbose)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if level is not None:
        log_level = level
    else:
        log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
