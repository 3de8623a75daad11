"""Wire-format constants.

These follow the standard protobuf binary encoding and must not be
changed without breaking interoperability with other implementations.
"""

import struct

# A 64-bit value needs at most ceil(64 / 7) varint groups
MAX_VARINT_BYTES = 10

# Payload bits carried by each varint byte, and the continuation flag
VARINT_PAYLOAD_BITS = 7
VARINT_PAYLOAD_MASK = 0x7F
VARINT_CONTINUATION = 0x80

# After 9 full groups (63 bits) the 10th group may only hold one more bit
VARINT_LAST_GROUP_MAX = 0x01

# Field key layout: field_number << 3 | wire_type
FIELD_NUMBER_SHIFT = 3
WIRE_TYPE_MASK = 0x07

# Fixed-width scalars: '<' = little-endian, 'I' = uint32, 'Q' = uint64
FIXED32_FORMAT = '<I'
FIXED64_FORMAT = '<Q'

FIXED32_SIZE = struct.calcsize(FIXED32_FORMAT)
FIXED64_SIZE = struct.calcsize(FIXED64_FORMAT)

UINT32_MAX = 0xFFFFFFFF
