"""Configuration module for managing decoder and dump settings."""

from config.settings import (
    DecoderConfig,
    DumpConfig,
    Config,
)

__all__ = [
    'DecoderConfig',
    'DumpConfig',
    'Config',
]
