"""Wire module for decoding the protobuf binary encoding."""

from wire.constants import MAX_VARINT_BYTES, FIXED32_SIZE, FIXED64_SIZE
from wire.types import WireType, FieldKey
from wire.decoder import (
    decode_key,
    decode_varint,
    decode_uint32,
    decode_uint64,
    decode_bool,
    decode_enum,
    decode_bits64,
    decode_fixed64,
    decode_bits32,
    decode_fixed32,
    decode_length_delimited,
    decode_string,
    decode_bytes,
    decode_embedded_message,
)

__all__ = [
    'MAX_VARINT_BYTES',
    'FIXED32_SIZE',
    'FIXED64_SIZE',
    'WireType',
    'FieldKey',
    'decode_key',
    'decode_varint',
    'decode_uint32',
    'decode_uint64',
    'decode_bool',
    'decode_enum',
    'decode_bits64',
    'decode_fixed64',
    'decode_bits32',
    'decode_fixed32',
    'decode_length_delimited',
    'decode_string',
    'decode_bytes',
    'decode_embedded_message',
]
