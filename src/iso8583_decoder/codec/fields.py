"""Field extraction.

Cuts one field value out of a message line at a character offset, using
the field's definition to decide how many characters belong to it.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Tuple

from ..exceptions import (
    InvalidLengthPrefix,
    MessageTooShort,
    PatternMismatch,
    UnknownFieldDefinition,
)
from ..models.parsed import ParsedField
from ..schema.definition import FieldDefinition
from ..utils.tracing import TraceHook, emit

logger = logging.getLogger(__name__)


def extract_field(
    field_number: int,
    line: str,
    pointer: int,
    registry: Mapping[int, FieldDefinition],
    *,
    trace: Optional[TraceHook] = None,
) -> Tuple[ParsedField, int]:
    """Extract and validate one field starting at ``pointer``.

    Variable-length fields are read as a decimal length prefix of
    ``length_digit_count`` characters followed by that many characters.
    Fixed-length fields are read as ``fixed_length`` characters.

    Args:
        field_number: Field number (bitmap position) to extract
        line: Full message line
        pointer: Offset of the field's first character (or its length prefix)
        registry: Field definitions keyed by field number
        trace: Optional trace callback

    Returns:
        Tuple of (parsed field, offset just past the field)

    Raises:
        UnknownFieldDefinition: If the registry has no definition for the field
        InvalidLengthPrefix: If a length prefix is not decimal digits
        MessageTooShort: If the line ends inside the field or its prefix
        PatternMismatch: If the value does not fully match the field's pattern

    Example:
        >>> field, pointer = extract_field(2, "06123456", 0, registry)
        >>> field.value, pointer
        ('123456', 8)
    """
    definition = registry.get(field_number)
    if definition is None:
        raise UnknownFieldDefinition(field_number)

    if definition.is_variable_length:
        prefix = _read(line, pointer, definition.length_digit_count, field_number, "length prefix")
        if not (prefix.isascii() and prefix.isdigit()):
            raise InvalidLengthPrefix(field_number, prefix)
        length = int(prefix)
        pointer += definition.length_digit_count
    else:
        length = definition.fixed_length

    value = _read(line, pointer, length, field_number, "value")
    pointer += length

    if not definition.matches(value):
        raise PatternMismatch(field_number, value)

    logger.debug("Field %d (%s) length=%d value=%r", field_number, definition.label, length, value)
    emit(trace, "field", field_number=field_number, length=length, value=value, pointer=pointer)

    return ParsedField(
        field_number=field_number,
        label=definition.label,
        length=length,
        value=value,
    ), pointer


def _read(line: str, pointer: int, count: int, field_number: int, what: str) -> str:
    """Return ``count`` characters at ``pointer`` or raise MessageTooShort."""
    end = pointer + count
    if end > len(line):
        raise MessageTooShort(
            f"Message too short for field {field_number} {what}: "
            f"need {count} characters at offset {pointer}, line has {len(line)}",
            required=end,
            available=len(line),
            field_number=field_number,
        )
    return line[pointer:end]
