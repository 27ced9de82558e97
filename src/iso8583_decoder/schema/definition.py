"""Field definitions declared by a decoding schema.

A definition carries the rules needed to cut one field out of a message:
its length, whether that length is prefixed in the message, and an optional
regular expression the extracted value must fully match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import SchemaFormatError

TRUE_FLAG = "1"


@dataclass(frozen=True)
class FieldDefinition:
    """Decoding rules for a single field number.

    Attributes:
        id: Field number (bitmap bit position)
        name: Short identifier
        validation_pattern: Compiled pattern the value must fully match, or None
        fixed_length: Field length; for variable fields the maximum length,
            used only to size the length prefix
        is_variable_length: Whether the value is preceded by a length prefix
        is_numeric: Informational flag, not enforced while decoding
        label: Display name (defaults to ``name``)
    """

    id: int
    name: str
    validation_pattern: Optional[re.Pattern[str]]
    fixed_length: int
    is_variable_length: bool = False
    is_numeric: bool = False
    label: str = ""
    length_digit_count: int = field(init=False)

    def __post_init__(self) -> None:
        if self.id < 1:
            raise SchemaFormatError(f"Field id must be positive, got {self.id}")
        if self.fixed_length < 1:
            raise SchemaFormatError(
                f"Field {self.id}: length must be positive, got {self.fixed_length}"
            )
        if not self.label:
            object.__setattr__(self, "label", self.name)
        # ceil(log10(n + 1)) is the digit count of n for every n >= 1
        object.__setattr__(self, "length_digit_count", len(str(self.fixed_length)))

    @classmethod
    def from_schema_line(cls, line: str, line_number: int | None = None) -> FieldDefinition:
        """Build a definition from one ``id,name,regex,len,var,num[,label]`` line.

        The regex column may itself contain commas (e.g. ``{1,19}``).

        Args:
            line: Schema line (not a comment or blank line)
            line_number: 1-based line number, used in error messages

        Returns:
            Parsed FieldDefinition

        Raises:
            SchemaFormatError: If the line is malformed
        """
        parts = line.split(",")
        columns = _split_columns(parts)
        if columns is None:
            raise SchemaFormatError(
                f"Expected 6 or 7 comma-separated fields "
                f"(id,name,regex,len,variable,numeric[,label]), got {len(parts)}: {line!r}",
                line_number=line_number,
                line=line,
            )

        raw_id, name, regex, raw_len, variable, numeric, label = columns

        try:
            field_id = int(raw_id)
            fixed_length = int(raw_len)
        except ValueError as e:
            raise SchemaFormatError(
                f"Field id and length must be integers: {line!r}",
                line_number=line_number,
                line=line,
            ) from e

        pattern = None
        if regex:
            try:
                pattern = re.compile(regex)
            except re.error as e:
                raise SchemaFormatError(
                    f"Invalid validation pattern {regex!r}: {e}",
                    line_number=line_number,
                    line=line,
                ) from e

        try:
            return cls(
                id=field_id,
                name=name,
                validation_pattern=pattern,
                fixed_length=fixed_length,
                is_variable_length=variable == TRUE_FLAG,
                is_numeric=numeric == TRUE_FLAG,
                label=label,
            )
        except SchemaFormatError as e:
            raise SchemaFormatError(e.message, line_number=line_number, line=line) from e

    def matches(self, value: str) -> bool:
        """Return True if ``value`` satisfies the validation pattern (if any)."""
        if self.validation_pattern is None:
            return True
        return self.validation_pattern.fullmatch(value) is not None


def _is_int(text: str) -> bool:
    try:
        int(text)
    except ValueError:
        return False
    return True


def _is_flag(text: str) -> bool:
    return text.strip() in ("0", "1")


def _split_columns(parts: list[str]) -> tuple[str, ...] | None:
    """Resolve split schema columns, allowing commas inside the regex.

    ``id`` and ``name`` are taken from the left and ``len, variable,
    numeric[, label]`` from the right; whatever lies in between is the
    regex. Returns None if the columns cannot be resolved.
    """
    stripped = [part.strip() for part in parts]
    if len(parts) < 6:
        return None

    if len(parts) == 6:
        return (*stripped, "")
    if len(parts) == 7 and _is_int(stripped[3]):
        return tuple(stripped)

    # Regex contains commas: the trailing columns must look like len,flag,flag
    if _is_int(stripped[-4]) and _is_flag(stripped[-3]) and _is_flag(stripped[-2]):
        regex = ",".join(parts[2:-4]).strip()
        return (stripped[0], stripped[1], regex, *stripped[-4:])
    if _is_int(stripped[-3]) and _is_flag(stripped[-2]) and _is_flag(stripped[-1]):
        regex = ",".join(parts[2:-3]).strip()
        return (stripped[0], stripped[1], regex, *stripped[-3:], "")
    return None
