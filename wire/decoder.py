"""
Protobuf wire-format decoding functions.

Every function takes a start position and a buffer and returns a tuple
whose first element is the position immediately after the consumed bytes.
Nothing is kept between calls; the caller threads the position through
successive calls and decides, from its own schema, which function to call
for each field.

The buffer may be any bytes-like object (bytes, bytearray, memoryview).
It is never modified, and byte values are returned as independent copies.
"""

import struct
from typing import NoReturn, Tuple, Type

from wire.constants import (
    MAX_VARINT_BYTES,
    VARINT_PAYLOAD_BITS,
    VARINT_PAYLOAD_MASK,
    VARINT_CONTINUATION,
    VARINT_LAST_GROUP_MAX,
    FIXED32_FORMAT,
    FIXED32_SIZE,
    FIXED64_FORMAT,
    FIXED64_SIZE,
    UINT32_MAX,
)
from wire.types import FieldKey, WireType
from utils.logging import get_logger
from utils.exceptions import (
    DecodeError,
    OutOfBoundsError,
    VarintTooLongError,
    VarintOverflowError,
    TrailingZeroVarintError,
    InvalidWireTypeError,
    Uint32OverflowError,
    InvalidUtf8Error,
)

logger = get_logger(__name__)

_DEFINED_WIRE_TYPES = frozenset(int(t) for t in WireType)


def _reject(error_cls: Type[DecodeError], message: str, position: int) -> NoReturn:
    logger.debug(f"Rejecting input at position {position}: {message}")
    raise error_cls(message, position=position)


def _require(p: int, size: int, buf, origin: int) -> None:
    """Ensure that `size` bytes starting at `p` lie inside the buffer.

    Failures are reported at `origin`, the start of the value being decoded.
    """
    if p < 0 or p + size > len(buf):
        _reject(
            OutOfBoundsError,
            f"Need {size} byte(s) at position {p}, buffer holds {len(buf)}",
            origin,
        )


def decode_varint(p: int, buf) -> Tuple[int, int]:
    """
    Decode a canonical base-128 varint into an unsigned 64-bit value.

    Groups of 7 bits are accumulated least significant first. Decoding
    stops at the first byte without the continuation bit.

    Returns:
        (new_position, value)

    Raises:
        OutOfBoundsError: If the buffer ends before the terminal byte
        TrailingZeroVarintError: If a terminal byte after the first is zero
        VarintOverflowError: If a 10th byte carries more than one bit
        VarintTooLongError: If no terminal byte appears within 10 bytes
    """
    value = 0
    for i in range(MAX_VARINT_BYTES):
        _require(p + i, 1, buf, p)
        byte = buf[p + i]
        value |= (byte & VARINT_PAYLOAD_MASK) << (VARINT_PAYLOAD_BITS * i)
        if byte & VARINT_CONTINUATION:
            continue

        if byte == 0 and i > 0:
            _reject(
                TrailingZeroVarintError,
                f"Varint padded with a zero group at byte {i + 1}",
                p,
            )
        if i == MAX_VARINT_BYTES - 1 and byte > VARINT_LAST_GROUP_MAX:
            _reject(
                VarintOverflowError,
                f"Varint final group 0x{byte:02x} does not fit in 64 bits",
                p,
            )
        return p + i + 1, value

    _reject(
        VarintTooLongError,
        f"Varint has no terminal byte within {MAX_VARINT_BYTES} bytes",
        p,
    )


def decode_key(p: int, buf) -> Tuple[int, int, WireType]:
    """
    Decode a field key into its field number and wire type.

    Returns:
        (new_position, field_number, wire_type)

    Raises:
        InvalidWireTypeError: For group wire types and the undefined values 6 and 7
    """
    new_p, raw_key = decode_varint(p, buf)
    key = FieldKey.from_varint(raw_key)
    if key.wire_type not in _DEFINED_WIRE_TYPES:
        _reject(
            InvalidWireTypeError,
            f"Undefined wire type {key.wire_type} for field {key.field_number}",
            p,
        )
    wire_type = WireType(key.wire_type)
    if wire_type.is_group:
        _reject(
            InvalidWireTypeError,
            f"Group wire type {wire_type.name} for field {key.field_number} is not supported",
            p,
        )
    return new_p, key.field_number, wire_type


def decode_uint64(p: int, buf) -> Tuple[int, int]:
    return decode_varint(p, buf)


def decode_uint32(p: int, buf) -> Tuple[int, int]:
    """Decode a varint that must fit in 32 bits."""
    new_p, value = decode_varint(p, buf)
    if value > UINT32_MAX:
        _reject(
            Uint32OverflowError,
            f"Varint value 0x{value:x} does not fit in uint32",
            p,
        )
    return new_p, value


def decode_bool(p: int, buf) -> Tuple[int, bool]:
    """Decode a varint as a boolean; only the value 1 is true."""
    new_p, value = decode_varint(p, buf)
    return new_p, value == 1


# Enum ordinals are returned raw; range checks belong to the caller's schema
decode_enum = decode_uint64


def decode_bits64(p: int, buf) -> Tuple[int, int]:
    """Read 8 bytes as a little-endian unsigned 64-bit value."""
    _require(p, FIXED64_SIZE, buf, p)
    (value,) = struct.unpack_from(FIXED64_FORMAT, buf, p)
    return p + FIXED64_SIZE, value


def decode_bits32(p: int, buf) -> Tuple[int, int]:
    """Read 4 bytes as a little-endian unsigned 32-bit value."""
    _require(p, FIXED32_SIZE, buf, p)
    (value,) = struct.unpack_from(FIXED32_FORMAT, buf, p)
    return p + FIXED32_SIZE, value


decode_fixed64 = decode_bits64
decode_fixed32 = decode_bits32


def decode_length_delimited(p: int, buf) -> Tuple[int, bytes]:
    """
    Decode a varint length prefix followed by exactly that many bytes.

    Returns:
        (new_position, payload) where payload is a copy of the framed bytes

    Raises:
        OutOfBoundsError: If the declared length runs past the buffer end
    """
    start, size = decode_varint(p, buf)
    _require(start, size, buf, p)
    end = start + size
    return end, bytes(buf[start:end])


def decode_string(p: int, buf, validate_utf8: bool = True) -> Tuple[int, str]:
    """
    Decode a length-delimited value as UTF-8 text.

    Args:
        p: Start position
        buf: Buffer to decode from
        validate_utf8: Reject malformed UTF-8 when True, otherwise
                       replace malformed sequences with U+FFFD

    Raises:
        InvalidUtf8Error: If validate_utf8 is set and the payload is not UTF-8
    """
    new_p, data = decode_length_delimited(p, buf)
    if not validate_utf8:
        return new_p, data.decode('utf-8', errors='replace')
    try:
        return new_p, data.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug(f"Rejecting input at position {p}: {e.reason}")
        raise InvalidUtf8Error(
            f"String payload is not valid UTF-8 at byte {e.start}",
            position=p,
        ) from e


# Embedded messages come back as raw bytes for the caller to decode with its own schema
decode_bytes = decode_length_delimited
decode_embedded_message = decode_length_delimited
