"""iso8583_decoder: ISO 8583 Message Decoder

A Python library for decoding BASE24-style ISO 8583 text messages: a fixed
"ISO" header, a primary (and optional secondary) hexadecimal bitmap, and
fixed- or variable-length field values described by a CSV schema.

Key Features:
- CSV schema loading into an immutable field definition registry
- Header and bitmap validation
- Bitmap-driven field walk with length prefixes and regex validation
- Batch decoding with fail-fast or collect-errors policies

Quick Start:
    >>> from iso8583_decoder import FieldDefinitionRegistry, parse_line
    >>>
    >>> registry = FieldDefinitionRegistry.load(
    ...     "2,PAN,^[0-9]{1,19}$,19,1,1,Primary Account Number\\n"
    ...     "3,PROC,^[0-9]{6}$,6,0,1,Processing Code\\n"
    ... )
    >>> message = parse_line("ISO0000000000200" "6000000000000000" "06123456" "000000", registry)
    >>> [(f.field_number, f.value) for f in message.fields]
    [(2, '123456'), (3, '000000')]
"""

from __future__ import annotations

__version__ = "0.1.0"

from .batch import BatchResult, LineResult, parse_batch, parse_file, parse_text
from .codec import decode_bitmap, extract_field, hex_to_bits, parse_line, validate_header
from .config import DecoderConfig
from .exceptions import (
    BatchAborted,
    InvalidHeader,
    InvalidLengthPrefix,
    Iso8583DecoderError,
    MessageError,
    MessageTooShort,
    PatternMismatch,
    SchemaFormatError,
    UnknownFieldDefinition,
)
from .models import MessageHeader, ParsedField, ParsedMessage
from .schema import FieldDefinition, FieldDefinitionRegistry
from .utils import TraceHook, setup_logging

__all__ = [
    # Core API
    "FieldDefinitionRegistry",
    "FieldDefinition",
    "parse_line",
    # Building blocks
    "validate_header",
    "decode_bitmap",
    "hex_to_bits",
    "extract_field",
    # Models
    "MessageHeader",
    "ParsedField",
    "ParsedMessage",
    # Batch
    "DecoderConfig",
    "BatchResult",
    "LineResult",
    "parse_batch",
    "parse_text",
    "parse_file",
    # Exceptions
    "Iso8583DecoderError",
    "SchemaFormatError",
    "MessageError",
    "MessageTooShort",
    "InvalidHeader",
    "UnknownFieldDefinition",
    "PatternMismatch",
    "InvalidLengthPrefix",
    "BatchAborted",
    # Logging
    "TraceHook",
    "setup_logging",
    # Version
    "__version__",
]
