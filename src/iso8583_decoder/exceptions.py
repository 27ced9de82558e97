"""Exception hierarchy for iso8583_decoder.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Iso8583DecoderError for easy catching of any
decoder-specific error.
"""

from __future__ import annotations

from typing import Any


class Iso8583DecoderError(Exception):
    """Base exception for all iso8583_decoder errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = {k: v for k, v in context.items() if v is not None}

    @property
    def kind(self) -> str:
        """Short error kind name used in structured output."""
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly description of the error."""
        return {"kind": self.kind, "message": self.message, **self.context}


class SchemaFormatError(Iso8583DecoderError):
    """Raised when a schema source cannot be loaded.

    Examples:
        - Line does not have 6 or 7 comma-separated fields
        - Field id or length is not a positive integer
        - Validation regex does not compile
        - Duplicate field id while duplicates are rejected
    """

    def __init__(
        self, message: str, *, line_number: int | None = None, line: str | None = None
    ) -> None:
        super().__init__(message, line_number=line_number, line=line)
        self.line_number = line_number
        self.line = line


class MessageError(Iso8583DecoderError):
    """Base class for errors raised while decoding one message line.

    ``line_number`` is unknown to the core parser and is attached by the
    batch layer when the line came from a multi-line input.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.line_number: int | None = None

    def with_line_number(self, line_number: int) -> MessageError:
        """Attach the 1-based input line number and return self."""
        self.line_number = line_number
        self.context["line_number"] = line_number
        return self


class MessageTooShort(MessageError):
    """Raised when a line ends before the header, bitmap or a field does."""

    def __init__(
        self,
        message: str,
        *,
        required: int | None = None,
        available: int | None = None,
        field_number: int | None = None,
    ) -> None:
        super().__init__(
            message, required=required, available=available, field_number=field_number
        )
        self.required = required
        self.available = available
        self.field_number = field_number


class InvalidHeader(MessageError):
    """Raised when the fixed header or a bitmap is malformed."""

    def __init__(self, message: str, *, header: str | None = None) -> None:
        super().__init__(message, header=header)
        self.header = header


class UnknownFieldDefinition(MessageError):
    """Raised when a bitmap bit is set for a field the schema does not define."""

    def __init__(self, field_number: int) -> None:
        super().__init__(
            f"No definition for field {field_number}", field_number=field_number
        )
        self.field_number = field_number


class PatternMismatch(MessageError):
    """Raised when a field value does not match its validation pattern."""

    def __init__(self, field_number: int, value: str) -> None:
        super().__init__(
            f"Field {field_number} value {value!r} does not match its pattern",
            field_number=field_number,
            value=value,
        )
        self.field_number = field_number
        self.value = value


class InvalidLengthPrefix(MessageError):
    """Raised when a variable-length field's length prefix is not decimal."""

    def __init__(self, field_number: int, prefix: str) -> None:
        super().__init__(
            f"Field {field_number} has non-numeric length prefix {prefix!r}",
            field_number=field_number,
            prefix=prefix,
        )
        self.field_number = field_number
        self.prefix = prefix


class BatchAborted(Iso8583DecoderError):
    """Raised by the fail-fast batch policy on the first failing line."""

    def __init__(self, line_number: int, error: MessageError) -> None:
        super().__init__(
            f"Line {line_number}: {error.message}",
            line_number=line_number,
            error=error.kind,
        )
        self.line_number = line_number
        self.error = error
