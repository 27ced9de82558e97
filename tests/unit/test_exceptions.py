"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from iso8583_decoder import (
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


def test_exception_hierarchy() -> None:
    """Test every error derives from the package base class."""
    for error_class in (
        MessageTooShort,
        InvalidHeader,
        UnknownFieldDefinition,
        PatternMismatch,
        InvalidLengthPrefix,
    ):
        assert issubclass(error_class, MessageError)
    assert issubclass(MessageError, Iso8583DecoderError)
    assert issubclass(SchemaFormatError, Iso8583DecoderError)
    assert issubclass(BatchAborted, Iso8583DecoderError)
    assert not issubclass(SchemaFormatError, MessageError)


def test_pattern_mismatch_context() -> None:
    """Test field number and value are kept."""
    error = PatternMismatch(2, "12a456")

    assert error.field_number == 2
    assert error.value == "12a456"
    assert error.to_dict() == {
        "kind": "PatternMismatch",
        "message": "Field 2 value '12a456' does not match its pattern",
        "field_number": 2,
        "value": "12a456",
    }


def test_none_context_omitted() -> None:
    """Test unset context values are left out of to_dict()."""
    error = MessageTooShort("too short", required=32, available=10)

    assert error.to_dict() == {
        "kind": "MessageTooShort",
        "message": "too short",
        "required": 32,
        "available": 10,
    }


def test_with_line_number() -> None:
    """Test the batch layer can attach a line number."""
    error = UnknownFieldDefinition(5).with_line_number(12)

    assert error.line_number == 12
    assert error.to_dict()["line_number"] == 12
    assert str(error) == "No definition for field 5"


def test_schema_error_context() -> None:
    """Test schema errors keep the offending line."""
    error = SchemaFormatError("bad", line_number=3, line="2,PAN")

    assert error.line_number == 3
    assert error.to_dict() == {
        "kind": "SchemaFormatError",
        "message": "bad",
        "line_number": 3,
        "line": "2,PAN",
    }


def test_batch_aborted() -> None:
    """Test fail-fast errors wrap the line error."""
    cause = InvalidHeader("Malformed header", header="XXX")
    error = BatchAborted(4, cause)

    assert error.line_number == 4
    assert error.error is cause
    assert error.message == "Line 4: Malformed header"
