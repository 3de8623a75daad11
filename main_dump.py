#!/usr/bin/env python3
"""
Main entry point for the message dump tool.

This script reads a serialized protobuf message from a file, decodes it
without a schema, and prints the resulting field tree to stdout.
Configuration is loaded from environment variables.
"""

import argparse
import os
import sys
from typing import List, Optional

from config.settings import Config
from inspector.formatter import format_fields
from utils.logging import setup_logging, get_logger
from utils.exceptions import ConfigurationError, DecodeError

logger = get_logger(__name__)


class DumpApplication:
    """Main application class for the dump tool."""

    def __init__(self, path: str, hex_input: bool = False):
        """
        Initialize application.

        Args:
            path: File holding the serialized message ('-' for stdin)
            hex_input: Treat the file contents as hex text instead of raw bytes
        """
        self.config = Config()
        self.path = path
        self.hex_input = hex_input

    def read_input(self) -> bytes:
        """Read the message bytes from the configured source."""
        if self.path == '-':
            data = sys.stdin.buffer.read()
        else:
            with open(self.path, 'rb') as f:
                data = f.read()

        if self.hex_input:
            try:
                return bytes.fromhex(data.decode('ascii'))
            except (UnicodeDecodeError, ValueError) as e:
                raise ValueError(f"Input is not valid hex text: {e}") from e
        return data

    def run(self) -> int:
        """
        Run the dump tool.

        Loads configuration, reads the message, and prints its field tree.

        Returns:
            Process exit code
        """
        try:
            logger.info("Loading configuration...")
            decoder_config = self.config.load_decoder_config()
            dump_config = self.config.load_dump_config()

            logger.info(
                f"Configuration loaded: "
                f"validate_utf8={decoder_config.validate_utf8}, "
                f"max_depth={dump_config.max_depth}"
            )

            data = self.read_input()
            logger.info(f"Decoding {len(data)} bytes from {self.path}")

            for line in format_fields(data, dump_config, decoder_config):
                print(line)
            return 0

        except ConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            return 1
        except DecodeError as e:
            logger.error(f"Malformed message at position {e.position}: {e}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid input: {e}")
            return 1
        except OSError as e:
            logger.error(f"Cannot read {self.path}: {e}")
            return 1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Decode a protobuf message without a schema and print its fields"
    )
    parser.add_argument('path', help="file holding the serialized message, or '-' for stdin")
    parser.add_argument(
        '--hex',
        action='store_true',
        help="treat the input as hex text rather than raw bytes",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Get log level from environment
    log_level = os.getenv('LOG_LEVEL', 'WARNING')
    try:
        setup_logging(log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    app = DumpApplication(args.path, hex_input=args.hex)
    return app.run()


if __name__ == '__main__':
    sys.exit(main())
