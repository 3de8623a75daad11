"""Utility modules for logging and exception handling."""

from utils.logging import setup_logging, get_logger, parse_log_level
from utils.exceptions import (
    DecodeError,
    OutOfBoundsError,
    VarintTooLongError,
    VarintOverflowError,
    TrailingZeroVarintError,
    InvalidWireTypeError,
    Uint32OverflowError,
    InvalidUtf8Error,
    ConfigurationError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'parse_log_level',
    'DecodeError',
    'OutOfBoundsError',
    'VarintTooLongError',
    'VarintOverflowError',
    'TrailingZeroVarintError',
    'InvalidWireTypeError',
    'Uint32OverflowError',
    'InvalidUtf8Error',
    'ConfigurationError',
]
