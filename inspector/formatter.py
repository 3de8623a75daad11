"""Rendering of decoded fields as an indented, human-readable tree."""

from typing import List, Optional

from config.settings import DecoderConfig, DumpConfig
from inspector.walker import Field, parse_fields
from wire.decoder import decode_string
from wire.types import WireType
from utils.exceptions import DecodeError, InvalidUtf8Error
from utils.logging import get_logger

logger = get_logger(__name__)

INDENT = '  '


def _as_text(field: Field, buf) -> Optional[str]:
    """Return the field's payload as text if it is printable UTF-8, else None."""
    try:
        _, text = decode_string(field.value_offset, buf)
    except InvalidUtf8Error:
        return None
    if all(ch.isprintable() or ch in '\t\r\n' for ch in text):
        return text
    return None


def _as_message(payload: bytes) -> Optional[List[Field]]:
    """Return the payload's fields if it decodes completely as a message."""
    if not payload:
        return None
    try:
        fields = parse_fields(payload)
    except DecodeError as e:
        logger.debug(f"Payload of {len(payload)} bytes is not a message: {e}")
        return None
    if any(field.number == 0 for field in fields):
        return None
    return fields


def _preview(payload: bytes, config: DumpConfig) -> str:
    shown = payload[:config.max_preview].hex()
    if len(payload) > config.max_preview:
        shown += '...'
    return shown


def _format_field(
    field: Field,
    buf,
    depth: int,
    dump_config: DumpConfig,
    decoder_config: DecoderConfig,
) -> List[str]:
    head = f"{INDENT * depth}{field.number} [{field.wire_type.name}] @{field.offset}"

    if field.wire_type is WireType.VARINT:
        return [f"{head}: {field.value}"]
    if field.wire_type is WireType.BITS64:
        return [f"{head}: 0x{field.value:016x} ({field.value})"]
    if field.wire_type is WireType.BITS32:
        return [f"{head}: 0x{field.value:08x} ({field.value})"]

    payload = field.value
    text = _as_text(field, buf)
    if text is not None:
        return [f"{head}: {text!r}"]

    if depth < dump_config.max_depth:
        nested = _as_message(payload)
        if nested is not None:
            lines = [f"{head}: message ({len(payload)} bytes)"]
            for child in nested:
                lines.extend(
                    _format_field(child, payload, depth + 1, dump_config, decoder_config)
                )
            return lines

    if not decoder_config.validate_utf8:
        _, lossy = decode_string(field.value_offset, buf, validate_utf8=False)
        return [f"{head}: {lossy!r} (lossy)"]
    if dump_config.show_hex:
        return [f"{head}: bytes {_preview(payload, dump_config)}"]
    return [f"{head}: <{len(payload)} bytes>"]


def format_fields(
    buf,
    dump_config: Optional[DumpConfig] = None,
    decoder_config: Optional[DecoderConfig] = None,
) -> List[str]:
    """
    Render every field of a message as lines of an indented tree.

    Length-delimited payloads are shown as text when they are printable
    UTF-8, expanded as embedded messages when they decode completely as
    one (up to the configured depth), and otherwise shown as hex, or as
    lossy text when UTF-8 validation is turned off.

    Raises:
        DecodeError: If the top-level message itself is malformed
    """
    dump_config = dump_config or DumpConfig()
    decoder_config = decoder_config or DecoderConfig()
    lines: List[str] = []
    for field in parse_fields(buf):
        lines.extend(_format_field(field, buf, 0, dump_config, decoder_config))
    return lines
