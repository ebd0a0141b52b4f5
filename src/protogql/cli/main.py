"""Main CLI entry point for protogql."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from .dump import dump_descriptor_set


def main() -> int:
    """Main entry point for the protogql CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="protogql: Protocol Buffer descriptors as GraphQL types",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  protogql descriptor_set.desc                      Print every type as SDL
  protogql descriptor_set.desc --type shop.Order    Print one message and its references
  protogql --version                                Show version

Descriptor sets are written by:
  protoc --include_imports --include_source_info --descriptor_set_out=FILE ...
        """,
    )

    parser.add_argument(
        "descriptor_set",
        metavar="DESCRIPTOR_SET",
        nargs="?",
        help="Serialized FileDescriptorSet to convert",
    )

    parser.add_argument(
        "--type",
        metavar="FULL_NAME",
        action="append",
        dest="types",
        help="Fully-qualified message or enum to convert (repeatable)",
    )

    parser.add_argument(
        "--input",
        action="store_true",
        help="Also print input object types for messages",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log conversion details to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"protogql {__version__}",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # If no descriptor set given, show help
    if not args.descriptor_set:
        parser.print_help()
        return 0

    file_path = Path(args.descriptor_set)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        print(dump_descriptor_set(file_path, args.types, inputs=args.input))
        return 0
    except Exception as e:
        print(f"Error converting descriptor set: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
