"""Main CLI entry point for iso8583-decoder."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..batch.processor import parse_file
from ..cli.describe import describe_registry
from ..config import BATCH_POLICIES, DecoderConfig
from ..exceptions import BatchAborted, SchemaFormatError
from ..schema.registry import FieldDefinitionRegistry
from ..utils.tracing import setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the iso8583-decoder CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="iso8583-decoder",
        description="iso8583-decoder: ISO 8583 Message Decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  iso8583-decoder --schema fields.csv --parse messages.txt    Decode a message file
  iso8583-decoder --schema fields.csv --parse msgs.txt --fail-fast
  iso8583-decoder --describe fields.csv                       Show schema fields
  iso8583-decoder --version                                   Show version
        """,
    )

    parser.add_argument(
        "--schema",
        metavar="FILE",
        type=str,
        help="Field definition schema (id,name,regex,len,variable,numeric[,label])",
    )
    parser.add_argument(
        "--parse",
        metavar="FILE",
        type=str,
        help="Message file to decode, one message per line (requires --schema)",
    )
    parser.add_argument(
        "--describe",
        metavar="FILE",
        type=str,
        help="Describe the fields of a schema file",
    )
    parser.add_argument(
        "--policy",
        choices=BATCH_POLICIES,
        default="collect-errors",
        help="What to do when a line fails (default: collect-errors)",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_const",
        const="fail-fast",
        dest="policy",
        help="Shortcut for --policy fail-fast",
    )
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Fail if the schema defines a field number twice",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation for --parse output (default: 2)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log decode steps to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"iso8583-decoder {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging("DEBUG")

    on_duplicate = "error" if args.reject_duplicates else "replace"

    # Handle --describe
    if args.describe:
        registry = _load_registry(args.describe, on_duplicate)
        if registry is None:
            return 1
        describe_registry(registry)
        return 0

    # Handle --parse
    if args.parse:
        if not args.schema:
            print("Error: --parse requires --schema", file=sys.stderr)
            return 1

        registry = _load_registry(args.schema, on_duplicate)
        if registry is None:
            return 1

        messages_path = Path(args.parse)
        if not messages_path.exists():
            print(f"Error: File not found: {messages_path}", file=sys.stderr)
            return 1

        config = DecoderConfig(batch_policy=args.policy)
        try:
            result = parse_file(messages_path, registry, config)
        except BatchAborted as e:
            print(json.dumps({"error": e.error.to_dict()}, indent=args.indent))
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

        print(json.dumps(result.to_dict(), indent=args.indent))
        return 0 if result.ok else 1

    # If no command specified, show help
    parser.print_help()
    return 0


def _load_registry(path: str, on_duplicate: str) -> Optional[FieldDefinitionRegistry]:
    """Load a schema file, reporting problems on stderr."""
    schema_path = Path(path)
    if not schema_path.exists():
        print(f"Error: File not found: {schema_path}", file=sys.stderr)
        return None

    try:
        return FieldDefinitionRegistry.from_file(schema_path, on_duplicate=on_duplicate)  # type: ignore[arg-type]
    except SchemaFormatError as e:
        location = f" (line {e.line_number})" if e.line_number else ""
        print(f"Error loading schema{location}: {e.message}", file=sys.stderr)
        return None


if __name__ == "__main__":
    sys.exit(main())
