"""Fixed message header validation."""

from __future__ import annotations

import logging
import re

from ..exceptions import InvalidHeader, MessageTooShort
from ..models.parsed import MessageHeader

logger = logging.getLogger(__name__)

HEADER_LENGTH = 32

# "ISO" + 9-digit base header + 4-char message type + 16 hex primary bitmap
HEADER_PATTERN = re.compile(
    r"ISO(?P<base>[0-9]{9})(?P<type>.{4})(?P<bitmap>[0-9A-Fa-f]{16})", re.DOTALL
)


def validate_header(line: str) -> MessageHeader:
    """Validate and decompose the first 32 characters of a message line.

    Args:
        line: Full message line

    Returns:
        MessageHeader with base identifier, message type and primary bitmap

    Raises:
        MessageTooShort: If the line has fewer than 32 characters
        InvalidHeader: If the header does not match the expected layout

    Example:
        >>> header = validate_header("ISO0160000000200" + "7234054128C28805" + "...")
        >>> header.message_type
        '0200'
    """
    if len(line) < HEADER_LENGTH:
        raise MessageTooShort(
            f"Message too short: {len(line)} characters, header needs {HEADER_LENGTH}",
            required=HEADER_LENGTH,
            available=len(line),
        )

    header = line[:HEADER_LENGTH]
    match = HEADER_PATTERN.fullmatch(header)
    if match is None:
        raise InvalidHeader(f"Malformed header: {header!r}", header=header)

    logger.debug(
        "Header base=%s type=%s bitmap=%s",
        match.group("base"),
        match.group("type"),
        match.group("bitmap"),
    )
    return MessageHeader(
        base_identifier=match.group("base"),
        message_type=match.group("type"),
        primary_bitmap=match.group("bitmap"),
    )
