"""Logging configuration and utilities."""

import logging
import sys
from typing import Optional, TextIO


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_log_level(level: str) -> int:
    """
    Translate a level name into its numeric logging value.

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    return numeric_level


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the entire application.

    Log records go to stderr by default so that decoded output written
    to stdout stays machine-readable.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               Default: INFO
        stream: Destination stream for log records (default: sys.stderr)
    """
    logging.basicConfig(
        level=parse_log_level(level),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(stream if stream is not None else sys.stderr)
        ],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance for the module
    """
    return logging.getLogger(name)
