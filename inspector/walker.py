"""Schema-less field iteration over a serialized message."""

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from wire.decoder import (
    decode_key,
    decode_uint64,
    decode_fixed64,
    decode_fixed32,
    decode_length_delimited,
)
from wire.types import WireType
from utils.exceptions import InvalidWireTypeError

_VALUE_DECODERS = {
    WireType.VARINT: decode_uint64,
    WireType.BITS64: decode_fixed64,
    WireType.LENGTH_DELIMITED: decode_length_delimited,
    WireType.BITS32: decode_fixed32,
}


@dataclass(frozen=True)
class Field:
    """One decoded field with its key, start offsets and raw value."""

    number: int
    wire_type: WireType
    offset: int
    value_offset: int
    value: Union[int, bytes]


def read_value(p: int, buf, wire_type: WireType) -> Tuple[int, Union[int, bytes]]:
    """Decode the value that follows a key of the given wire type."""
    decoder = _VALUE_DECODERS.get(wire_type)
    if decoder is None:
        raise InvalidWireTypeError(f"No decoder for wire type {wire_type}", position=p)
    return decoder(p, buf)


def skip_field(p: int, buf, wire_type: WireType) -> int:
    """Advance past one field value without keeping it."""
    new_p, _ = read_value(p, buf, wire_type)
    return new_p


def iter_fields(buf) -> Iterator[Field]:
    """
    Yield every top-level field of a message, in wire order.

    Iteration ends when the position reaches the end of the buffer. Any
    DecodeError is propagated to the caller as soon as it is hit; fields
    already yielded stay valid.
    """
    p = 0
    while p < len(buf):
        start = p
        p, number, wire_type = decode_key(p, buf)
        value_start = p
        p, value = read_value(p, buf, wire_type)
        yield Field(
            number=number,
            wire_type=wire_type,
            offset=start,
            value_offset=value_start,
            value=value,
        )


def parse_fields(buf) -> List[Field]:
    """Decode a whole message into a list of fields, failing on any error."""
    return list(iter_fields(buf))
