"""Schema loading for iso8583_decoder.

This module turns a CSV-style schema into an immutable registry of field
definitions.
"""

from __future__ import annotations

from .definition import FieldDefinition
from .registry import DuplicatePolicy, FieldDefinitionRegistry

__all__ = [
    "FieldDefinition",
    "FieldDefinitionRegistry",
    "DuplicatePolicy",
]
