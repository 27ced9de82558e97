#!/usr/bin/env python3
"""Batch decoding example for iso8583_decoder.

This example demonstrates:
1. Loading a field definition schema
2. Decoding a single message line
3. Decoding a message file with the collect-errors policy
4. Attaching a trace hook to watch decode steps
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from iso8583_decoder import DecoderConfig, FieldDefinitionRegistry, parse_file, parse_line

DATA_DIR = Path(__file__).parent / "data"


def print_trace(event: str, data: dict[str, Any]) -> None:
    """Print every decode step."""
    print(f"   [{event}] {data}")


def main() -> None:
    """Run the batch decoding example."""
    print("=" * 60)
    print("iso8583-decoder Batch Example")
    print("=" * 60)
    print()

    # Load the schema once, share it for every line
    print("1. Loading field definitions...")
    registry = FieldDefinitionRegistry.from_file(DATA_DIR / "fields.csv")
    print(f"   {len(registry)} fields defined: {list(registry)}")
    print()

    print("2. Decoding one line with tracing...")
    lines = (DATA_DIR / "messages.txt").read_text(encoding="utf-8").splitlines()
    message = parse_line(lines[0], registry, trace=print_trace)
    print(f"   Message type: {message.header.message_type}")
    for field in message.fields:
        print(f"   {field.field_number:>3} {field.label:<30} [{field.length:>2}] {field.value!r}")
    print()

    print("3. Decoding the whole file (collect-errors)...")
    result = parse_file(DATA_DIR / "messages.txt", registry, DecoderConfig())
    for line_result in result.results:
        if line_result.message is not None:
            print(f"   line {line_result.line_number}: {len(line_result.message.fields)} fields")
        elif line_result.error is not None:
            print(f"   line {line_result.line_number}: {line_result.error.kind}: "
                  f"{line_result.error.message}")
    print()

    print("=" * 60)
    print(f"Decoded {len(result.messages)} of {len(result.results)} lines")
    print("=" * 60)


if __name__ == "__main__":
    main()
