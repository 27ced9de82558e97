"""Unit tests for header validation."""

from __future__ import annotations

import pytest

from iso8583_decoder import InvalidHeader, MessageTooShort, validate_header

HEADER = "ISO0160000000200" + "7234054128C28805"


class TestValidateHeader:
    """Test header decomposition."""

    def test_valid_header(self) -> None:
        """Test header fields are split at the right offsets."""
        header = validate_header(HEADER + "164111111111111111")

        assert header.base_identifier == "016000000"
        assert header.message_type == "0200"
        assert header.primary_bitmap == "7234054128C28805"
        assert header.secondary_bitmap is None

    def test_exactly_header_length(self) -> None:
        """Test a 32-character line is long enough."""
        assert validate_header(HEADER).message_type == "0200"

    def test_lowercase_bitmap(self) -> None:
        """Test lowercase hex digits are accepted."""
        header = validate_header("ISO0160000000200" + "7234054128c28805")
        assert header.primary_bitmap == "7234054128c28805"

    def test_message_type_is_not_checked(self) -> None:
        """Test the message type may hold any four characters."""
        header = validate_header("ISO016000000AB-D" + "0000000000000000")
        assert header.message_type == "AB-D"

    @pytest.mark.parametrize("line", ["", "ISO", HEADER[:31]])
    def test_too_short(self, line: str) -> None:
        """Test lines under 32 characters are too short."""
        with pytest.raises(MessageTooShort) as exc_info:
            validate_header(line)

        assert exc_info.value.required == 32
        assert exc_info.value.available == len(line)

    @pytest.mark.parametrize(
        "line",
        [
            "ABC0160000000200" + "7234054128C28805",  # wrong literal
            "iso0160000000200" + "7234054128C28805",  # lowercase literal
            "ISO01600000A0200" + "7234054128C28805",  # letter in base header
            "ISO0160٣0000" + "0200" + "7234054128C28805",  # non-ASCII digit
            "ISO0160000000200" + "7234054128G28805",  # non-hex bitmap
            "ISO0160000000200" + "7234 54128C28805",  # space in bitmap
        ],
    )
    def test_invalid_header(self, line: str) -> None:
        """Test malformed headers are rejected."""
        with pytest.raises(InvalidHeader):
            validate_header(line)

    def test_invalid_header_context(self) -> None:
        """Test the error carries the rejected header text."""
        line = "XXX0160000000200" + "7234054128C28805" + "rest"

        with pytest.raises(InvalidHeader) as exc_info:
            validate_header(line)

        assert exc_info.value.header == line[:32]
