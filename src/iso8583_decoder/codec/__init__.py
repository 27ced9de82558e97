"""ISO 8583 text message decoding.

This module provides the header validator, bitmap decoder, field walker and
the parse_line() orchestration built on them.
"""

from __future__ import annotations

from .bitmap import decode_bitmap, decode_line_bitmaps, has_secondary_bitmap, hex_to_bits
from .fields import extract_field
from .header import HEADER_LENGTH, validate_header
from .parser import parse_line

__all__ = [
    "parse_line",
    "validate_header",
    "decode_bitmap",
    "decode_line_bitmaps",
    "has_secondary_bitmap",
    "hex_to_bits",
    "extract_field",
    "HEADER_LENGTH",
]
