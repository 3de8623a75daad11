"""Configuration management for the decoder and dump tool."""

from dataclasses import dataclass
from typing import Optional
import os
from pathlib import Path

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError


# Load .env file from project root
# This is called at module import time to ensure env vars are available
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path, override=False)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got: {raw}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a valid integer, got: {raw}")


@dataclass
class DecoderConfig:
    """Configuration for string handling in the wire decoder."""

    validate_utf8: bool = True

    def validate(self) -> None:
        """Validate decoder configuration parameters."""
        if not isinstance(self.validate_utf8, bool):
            raise ConfigurationError("validate_utf8 must be a boolean")


@dataclass
class DumpConfig:
    """Configuration for rendering decoded field trees."""

    max_depth: int = 8
    show_hex: bool = True
    max_preview: int = 64

    def validate(self) -> None:
        """Validate dump configuration parameters."""
        if not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ConfigurationError("Dump max depth must be a non-negative integer")
        if not isinstance(self.max_preview, int) or self.max_preview < 1:
            raise ConfigurationError("Dump preview length must be at least 1")


class Config:
    """Main configuration loader and manager."""

    def __init__(self):
        """Initialize configuration manager."""
        self.decoder: Optional[DecoderConfig] = None
        self.dump: Optional[DumpConfig] = None

    def load_decoder_config(self) -> DecoderConfig:
        """
        Load decoder configuration from environment variables.

        Environment variables:
            DECODER_VALIDATE_UTF8: Reject malformed UTF-8 strings (default: true)

        Returns:
            Validated DecoderConfig instance

        Raises:
            ConfigurationError: If a value cannot be parsed
        """
        config = DecoderConfig(
            validate_utf8=_env_bool('DECODER_VALIDATE_UTF8', True),
        )
        config.validate()
        self.decoder = config
        return config

    def load_dump_config(self) -> DumpConfig:
        """
        Load dump tool configuration from environment variables.

        Environment variables:
            DUMP_MAX_DEPTH: Deepest embedded message level to expand (default: 8)
            DUMP_SHOW_HEX: Show hex for payloads that are not text (default: true)
            DUMP_MAX_PREVIEW: Bytes shown per payload before truncation (default: 64)

        Returns:
            Validated DumpConfig instance

        Raises:
            ConfigurationError: If a value is malformed or out of range
        """
        config = DumpConfig(
            max_depth=_env_int('DUMP_MAX_DEPTH', 8),
            show_hex=_env_bool('DUMP_SHOW_HEX', True),
            max_preview=_env_int('DUMP_MAX_PREVIEW', 64),
        )
        config.validate()
        self.dump = config
        return config
