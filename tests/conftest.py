"""
Shared fixtures for the decoder tests.
"""

import logging

import pytest


def _encode_varint(n: int) -> bytes:
    result = []
    while True:
        byte = n & 0x7F
        n >>= 7
        if n > 0:
            byte |= 0x80
        result.append(byte)
        if n == 0:
            break
    return bytes(result)


@pytest.fixture
def varint():
    """Canonical varint encoder for building test input."""
    return _encode_varint


@pytest.fixture
def key():
    """Field key encoder: field_number << 3 | wire_type."""
    def encode(field_number: int, wire_type: int) -> bytes:
        return _encode_varint((field_number << 3) | wire_type)
    return encode


@pytest.fixture
def reset_logging():
    """Drop root handlers installed by setup_logging once the test ends."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
