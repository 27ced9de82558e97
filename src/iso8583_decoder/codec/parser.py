"""Message line decoding.

This module provides parse_line(), which runs a raw line through header
validation, bitmap decoding and the field walk, and returns every present
field in ascending field-number order.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from ..models.parsed import ParsedField, ParsedMessage
from ..schema.definition import FieldDefinition
from ..utils.tracing import TraceHook, emit
from .bitmap import decode_line_bitmaps
from .fields import extract_field
from .header import validate_header

logger = logging.getLogger(__name__)


def parse_line(
    line: str,
    registry: Mapping[int, FieldDefinition],
    *,
    trace: Optional[TraceHook] = None,
) -> ParsedMessage:
    """Decode one ISO 8583 message line.

    The line is decoded all-or-nothing: the first failure raises and no
    partial result is returned.

    Args:
        line: Message line without its trailing newline
        registry: Field definitions keyed by field number, shared read-only
        trace: Optional callback receiving ``(event, data)`` for each decode step

    Returns:
        ParsedMessage with the header and the decoded fields

    Raises:
        MessageTooShort: If the line ends before the header, bitmaps or a field
        InvalidHeader: If the header or a bitmap is malformed
        UnknownFieldDefinition: If a present field has no definition
        InvalidLengthPrefix: If a variable field's length prefix is not decimal
        PatternMismatch: If a field value fails its validation pattern

    Examples:
        ```python
        from iso8583_decoder import FieldDefinitionRegistry, parse_line

        registry = FieldDefinitionRegistry.from_file("fields.csv")
        message = parse_line(raw_line, registry)
        for field in message.fields:
            print(field.field_number, field.label, field.value)
        ```
    """
    header = validate_header(line)
    emit(
        trace,
        "header",
        base_identifier=header.base_identifier,
        message_type=header.message_type,
        primary_bitmap=header.primary_bitmap,
    )

    header, positions, pointer = decode_line_bitmaps(line, header)
    emit(trace, "bitmap", secondary_bitmap=header.secondary_bitmap, positions=positions)

    fields: List[ParsedField] = []
    for field_number in positions:
        parsed, pointer = extract_field(field_number, line, pointer, registry, trace=trace)
        fields.append(parsed)

    if pointer < len(line):
        logger.debug("Ignoring %d trailing characters after last field", len(line) - pointer)

    return ParsedMessage(header=header, fields=tuple(fields))
