"""Bitmap decoding.

A bitmap is hexadecimal text where each character stands for four bits.
Bit *n* (1-based, most significant bit of the first character first) set
means field *n* is present. Bit 1 of the primary bitmap is a control bit
announcing a secondary bitmap and never names a data field.
"""

from __future__ import annotations

import logging
import string
from typing import List, Optional, Tuple

from ..exceptions import InvalidHeader, MessageTooShort
from ..models.parsed import MessageHeader
from .header import HEADER_LENGTH

logger = logging.getLogger(__name__)

BITMAP_HEX_LENGTH = 16
SECONDARY_BITMAP_END = HEADER_LENGTH + BITMAP_HEX_LENGTH

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bits(hex_text: str) -> str:
    """Expand hexadecimal text into a string of binary digits.

    Each character becomes exactly four zero-padded bits, in input order.

    Args:
        hex_text: Hexadecimal characters (either case)

    Returns:
        String of ``"0"``/``"1"`` characters, four per input character

    Raises:
        InvalidHeader: If ``hex_text`` contains a non-hex character

    Example:
        >>> hex_to_bits("5F")
        '01011111'
    """
    bad = [c for c in hex_text if c not in _HEX_DIGITS]
    if bad:
        raise InvalidHeader(f"Bitmap contains non-hex characters: {hex_text!r}", header=hex_text)
    return "".join(format(int(c, 16), "04b") for c in hex_text)


def has_secondary_bitmap(primary_hex: str) -> bool:
    """Return True if bit 1 of the primary bitmap is set."""
    return hex_to_bits(primary_hex[:1]).startswith("1")


def decode_bitmap(primary_hex: str, secondary_hex: Optional[str] = None) -> List[int]:
    """Return the data field numbers whose bits are set.

    Args:
        primary_hex: Sixteen hex characters of the primary bitmap
        secondary_hex: Sixteen hex characters of the secondary bitmap, or None

    Returns:
        Ascending list of set bit positions, excluding the control bit 1

    Raises:
        InvalidHeader: If a bitmap contains a non-hex character
    """
    bits = hex_to_bits(primary_hex)
    if secondary_hex is not None:
        bits += hex_to_bits(secondary_hex)

    # enumerate from 1 so indexes are field numbers; skip control bit 1
    return [position for position, bit in enumerate(bits, 1) if position >= 2 and bit == "1"]


def decode_line_bitmaps(line: str, header: MessageHeader) -> Tuple[MessageHeader, List[int], int]:
    """Decode the bitmaps of a header-validated line.

    Reads the secondary bitmap that follows the header when the primary
    bitmap announces one.

    Args:
        line: Full message line
        header: Header returned by ``validate_header`` for this line

    Returns:
        Tuple of (header including any secondary bitmap, set field numbers,
        offset of the first field character)

    Raises:
        MessageTooShort: If a secondary bitmap is announced but the line is
            shorter than 48 characters
        InvalidHeader: If the secondary bitmap contains a non-hex character
    """
    secondary_hex = None
    data_start = HEADER_LENGTH

    if has_secondary_bitmap(header.primary_bitmap):
        if len(line) < SECONDARY_BITMAP_END:
            raise MessageTooShort(
                f"Message too short for secondary bitmap: {len(line)} characters, "
                f"need {SECONDARY_BITMAP_END}",
                required=SECONDARY_BITMAP_END,
                available=len(line),
            )
        secondary_hex = line[HEADER_LENGTH:SECONDARY_BITMAP_END]
        header = header.model_copy(update={"secondary_bitmap": secondary_hex})
        data_start = SECONDARY_BITMAP_END
        logger.debug("Secondary bitmap %s", secondary_hex)

    positions = decode_bitmap(header.primary_bitmap, secondary_hex)
    logger.debug("Fields present: %s", positions)
    return header, positions, data_start
