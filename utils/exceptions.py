"""Custom exception classes for the wire decoder."""

from typing import Optional


class DecodeError(Exception):
    """Base exception class for all wire-format decoding errors."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class OutOfBoundsError(DecodeError):
    """Exception raised when a read would go past the end of the buffer."""
    pass


class VarintTooLongError(DecodeError):
    """Exception raised when a varint has no terminal byte within 10 bytes."""
    pass


class VarintOverflowError(DecodeError):
    """Exception raised when a 10-byte varint does not fit in 64 bits."""
    pass


class TrailingZeroVarintError(DecodeError):
    """Exception raised when a varint ends with a zero-valued padding group."""
    pass


class InvalidWireTypeError(DecodeError):
    """Exception raised when a field key carries a group or undefined wire type."""
    pass


class Uint32OverflowError(DecodeError):
    """Exception raised when a varint read as uint32 has upper bits set."""
    pass


class InvalidUtf8Error(DecodeError):
    """Exception raised when a string field is not well-formed UTF-8."""
    pass


class ConfigurationError(Exception):
    """Exception raised when configuration is invalid or missing."""
    pass
