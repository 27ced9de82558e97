"""Output models for decoded ISO 8583 messages."""

from __future__ import annotations

from .parsed import DecodedModel, MessageHeader, ParsedField, ParsedMessage

__all__ = [
    "DecodedModel",
    "MessageHeader",
    "ParsedField",
    "ParsedMessage",
]
