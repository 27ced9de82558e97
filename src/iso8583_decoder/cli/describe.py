"""Schema description CLI command."""

from __future__ import annotations

from typing import Mapping

from ..schema.definition import FieldDefinition


def describe_registry(registry: Mapping[int, FieldDefinition]) -> None:
    """Print a field-by-field breakdown of a loaded schema.

    Args:
        registry: Field definitions keyed by field number
    """
    print("|" * 7, "iso8583-decoder: ISO 8583 Message Decoder", "|" * 7)
    count = len(registry)
    print(f"{count} field definition{'s' if count != 1 else ''} loaded.")
    print("Lengths are in characters; variable fields show their maximum.")
    print()

    print(f"{'-' * 27} Fields {'-' * 27}")
    for field_number in sorted(registry):
        print(describe_field(registry[field_number]))
    print()

    variable = sum(1 for d in registry.values() if d.is_variable_length)
    secondary = sum(1 for n in registry if n > 64)

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Fixed-length fields: {count - variable}")
    print(f"Variable-length fields: {variable}")
    print(f"Fields needing a secondary bitmap: {secondary}")
    print()


def describe_field(definition: FieldDefinition) -> str:
    """Format one definition as an aligned report line."""
    field_desc = f"{definition.id:>3}. {definition.label}"

    info_parts = []
    if definition.is_variable_length:
        info_parts.append(f"var<={definition.fixed_length} (prefix {definition.length_digit_count})")
    else:
        info_parts.append(f"fixed {definition.fixed_length}")
    if definition.is_numeric:
        info_parts.append("numeric")
    if definition.validation_pattern is not None:
        info_parts.append(f"/{definition.validation_pattern.pattern}/")

    field_info = " ".join(info_parts)
    dots = "." * max(1, 40 - len(field_desc))
    return f"        {field_desc}{dots}{field_info}"
