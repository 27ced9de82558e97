"""Decoded message models.

These Pydantic models are the immutable output of the decoder. They are
frozen so a parsed message can be handed to callers (or across threads)
without copying.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DecodedModel(BaseModel):
    """Base class for decoder output models."""

    model_config = ConfigDict(
        # Output records never change after the parser returns them
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )


class MessageHeader(DecodedModel):
    """Decomposed fixed header of one message line.

    Attributes:
        base_identifier: Nine-digit BASE24 header (characters 3-11)
        message_type: Four-character message type (characters 12-15)
        primary_bitmap: Sixteen hex characters (characters 16-31)
        secondary_bitmap: Sixteen hex characters following the header, present
            only when bit 1 of the primary bitmap is set
    """

    base_identifier: str = Field(min_length=9, max_length=9)
    message_type: str = Field(min_length=4, max_length=4)
    primary_bitmap: str = Field(min_length=16, max_length=16)
    secondary_bitmap: Optional[str] = Field(default=None, min_length=16, max_length=16)


class ParsedField(DecodedModel):
    """One decoded field value, already pattern-validated."""

    field_number: int = Field(ge=1)
    label: str
    length: int = Field(ge=0)
    value: str


class ParsedMessage(DecodedModel):
    """All fields decoded from one message line, in ascending field order."""

    header: MessageHeader
    fields: tuple[ParsedField, ...] = ()

    def field_numbers(self) -> list[int]:
        """Return the decoded field numbers in order."""
        return [f.field_number for f in self.fields]

    def get(self, field_number: int) -> ParsedField | None:
        """Return the decoded field with the given number, or None."""
        for parsed in self.fields:
            if parsed.field_number == field_number:
                return parsed
        return None

    def to_records(self) -> list[dict[str, Any]]:
        """Return fields as plain dicts (``fieldNumber``/``label``/``length``/``value``)."""
        return [
            {
                "fieldNumber": f.field_number,
                "label": f.label,
                "length": f.length,
                "value": f.value,
            }
            for f in self.fields
        ]
