"""
Tests for schema-less field walking and rendering.
"""

import pytest

from config.settings import DecoderConfig, DumpConfig
from inspector.walker import Field, iter_fields, parse_fields, read_value, skip_field
from inspector.formatter import format_fields
from wire.types import WireType
from utils.exceptions import InvalidWireTypeError, OutOfBoundsError, TrailingZeroVarintError


MESSAGE = (
    b'\x08\x96\x01'                   # 1: varint 150
    b'\x12\x02hi'                     # 2: "hi"
    b'\x1d\xe8\x03\x00\x00'           # 3: fixed32 1000
    b'\x21\x01\x00\x00\x00\x00\x00\x00\x00'  # 4: fixed64 1
)


class TestWalker:
    """Tests for iter_fields and friends."""

    def test_iter_fields(self):
        """Test walking every field of a flat message."""
        fields = list(iter_fields(MESSAGE))
        assert fields == [
            Field(number=1, wire_type=WireType.VARINT, offset=0, value_offset=1, value=150),
            Field(number=2, wire_type=WireType.LENGTH_DELIMITED, offset=3, value_offset=4, value=b'hi'),
            Field(number=3, wire_type=WireType.BITS32, offset=7, value_offset=8, value=1000),
            Field(number=4, wire_type=WireType.BITS64, offset=12, value_offset=13, value=1),
        ]

    def test_parse_fields_returns_fields(self):
        """Test that parse_fields returns Field records in wire order."""
        fields = parse_fields(MESSAGE)
        assert isinstance(fields, list)
        assert all(isinstance(field, Field) for field in fields)
        assert [field.number for field in fields] == [1, 2, 3, 4]

    def test_empty_message(self):
        """Test that an empty buffer has no fields."""
        assert parse_fields(b'') == []

    def test_truncated_field(self):
        """Test that a field running past the end fails."""
        with pytest.raises(OutOfBoundsError):
            parse_fields(b'\x08\x96\x01\x12\x05hi')

    def test_yields_fields_before_error(self):
        """Test that fields before a malformed one are still produced."""
        fields = iter_fields(b'\x08\x01\x10\x80\x00')
        assert next(fields).value == 1
        with pytest.raises(TrailingZeroVarintError):
            next(fields)

    def test_group_field_rejected(self):
        """Test that a group key stops the walk."""
        with pytest.raises(InvalidWireTypeError):
            parse_fields(b'\x08\x01\x0b')

    def test_read_value_rejects_group(self):
        """Test that no decoder exists for group wire types."""
        with pytest.raises(InvalidWireTypeError):
            read_value(0, b'\x00', WireType.START_GROUP)

    @pytest.mark.parametrize("p, wire_type, expected", [
        (1, WireType.VARINT, 3),
        (4, WireType.LENGTH_DELIMITED, 7),
        (8, WireType.BITS32, 12),
        (13, WireType.BITS64, 21),
    ])
    def test_skip_field(self, p, wire_type, expected):
        """Test skipping each kind of value."""
        assert skip_field(p, MESSAGE, wire_type) == expected


class TestFormatter:
    """Tests for format_fields."""

    def test_scalars(self):
        """Test rendering of varint and fixed-width fields."""
        lines = format_fields(MESSAGE)
        assert lines == [
            "1 [VARINT] @0: 150",
            "2 [LENGTH_DELIMITED] @3: 'hi'",
            "3 [BITS32] @7: 0x000003e8 (1000)",
            "4 [BITS64] @12: 0x0000000000000001 (1)",
        ]

    def test_nested_message(self):
        """Test that an embedded message is expanded."""
        lines = format_fields(b'\x1a\x02\x08\x01')
        assert lines == [
            "3 [LENGTH_DELIMITED] @0: message (2 bytes)",
            "  1 [VARINT] @0: 1",
        ]

    def test_nested_string(self):
        """Test that text inside an embedded message is rendered."""
        lines = format_fields(b'\x0a\x04\x12\x02ok')
        assert lines == [
            "1 [LENGTH_DELIMITED] @0: message (4 bytes)",
            "  2 [LENGTH_DELIMITED] @0: 'ok'",
        ]

    def test_max_depth_stops_expansion(self):
        """Test that payloads past the depth limit are shown as hex."""
        lines = format_fields(b'\x1a\x02\x08\x01', DumpConfig(max_depth=0))
        assert lines == ["3 [LENGTH_DELIMITED] @0: bytes 0801"]

    def test_binary_payload_as_hex(self):
        """Test that undecodable payloads fall back to hex."""
        lines = format_fields(b'\x0a\x02\xff\xff')
        assert lines == ["1 [LENGTH_DELIMITED] @0: bytes ffff"]

    def test_hex_preview_truncated(self):
        """Test that long hex previews are cut."""
        lines = format_fields(b'\x0a\x02\xff\xff', DumpConfig(max_preview=1))
        assert lines == ["1 [LENGTH_DELIMITED] @0: bytes ff..."]

    def test_hex_hidden(self):
        """Test that only the size is shown when hex is turned off."""
        lines = format_fields(b'\x0a\x02\xff\xff', DumpConfig(show_hex=False))
        assert lines == ["1 [LENGTH_DELIMITED] @0: <2 bytes>"]

    def test_lossy_text(self):
        """Test lossy rendering when UTF-8 validation is turned off."""
        lines = format_fields(b'\x0a\x02\xff\xff', decoder_config=DecoderConfig(validate_utf8=False))
        assert len(lines) == 1
        assert lines[0].endswith("(lossy)")
        assert '\ufffd' in lines[0]

    def test_text_preferred_over_message(self):
        """Test that a payload valid as both text and a message renders as text."""
        assert parse_fields(b'hi') == [
            Field(number=13, wire_type=WireType.VARINT, offset=0, value_offset=1, value=105),
        ]
        assert format_fields(b'\x0a\x02hi') == ["1 [LENGTH_DELIMITED] @0: 'hi'"]

    def test_empty_payload(self):
        """Test that an empty payload renders as an empty string."""
        assert format_fields(b'\x0a\x00') == ["1 [LENGTH_DELIMITED] @0: ''"]

    def test_malformed_top_level(self):
        """Test that a malformed top-level message raises."""
        with pytest.raises(OutOfBoundsError):
            format_fields(b'\x0a\x05ab')
