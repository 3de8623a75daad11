"""Wire type and field key definitions."""

from dataclasses import dataclass
from enum import IntEnum

from wire.constants import FIELD_NUMBER_SHIFT, WIRE_TYPE_MASK


class WireType(IntEnum):
    """Enumeration of protobuf wire types carried in the low 3 bits of a key."""

    VARINT = 0              # int32, int64, uint32, uint64, bool, enum
    BITS64 = 1              # fixed64, sfixed64, double
    LENGTH_DELIMITED = 2    # string, bytes, embedded messages
    START_GROUP = 3         # deprecated, rejected
    END_GROUP = 4           # deprecated, rejected
    BITS32 = 5              # fixed32, sfixed32, float

    @property
    def is_group(self) -> bool:
        return self in (WireType.START_GROUP, WireType.END_GROUP)


@dataclass(frozen=True)
class FieldKey:
    """Field number and wire type recovered from a field key varint."""

    field_number: int
    wire_type: int

    @classmethod
    def from_varint(cls, key: int) -> 'FieldKey':
        """
        Split a decoded key varint into its field number and wire type.

        The wire type is returned as a raw int; callers convert it to
        WireType once it has been checked.
        """
        return cls(
            field_number=key >> FIELD_NUMBER_SHIFT,
            wire_type=key & WIRE_TYPE_MASK,
        )
