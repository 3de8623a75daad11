"""Inspector module for walking and rendering messages without a schema."""

from inspector.walker import Field, iter_fields, parse_fields, read_value, skip_field
from inspector.formatter import format_fields

__all__ = [
    'Field',
    'iter_fields',
    'parse_fields',
    'read_value',
    'skip_field',
    'format_fields',
]
