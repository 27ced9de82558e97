"""Batch decoding of multi-line message input.

Each non-blank line is decoded independently against one shared registry.
The batch policy decides whether a failing line stops the batch or is
recorded next to the successful lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from ..codec.parser import parse_line
from ..config import DecoderConfig
from ..exceptions import BatchAborted, MessageError
from ..models.parsed import ParsedMessage
from ..schema.definition import FieldDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """Outcome of decoding one input line: a message or an error.

    Attributes:
        line_number: 1-based line number in the input
        message: Decoded message, or None if decoding failed
        error: Decoding error, or None if decoding succeeded
    """

    line_number: int
    message: Optional[ParsedMessage] = None
    error: Optional[MessageError] = None

    def __post_init__(self) -> None:
        if (self.message is None) == (self.error is None):
            raise ValueError("LineResult needs exactly one of message or error")

    @property
    def ok(self) -> bool:
        """True if the line decoded successfully."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Return ``{line, fields}`` on success or ``{line, error}`` on failure."""
        if self.error is not None:
            return {"line": self.line_number, "error": self.error.to_dict()}
        if self.message is not None:
            return {"line": self.line_number, "fields": self.message.to_records()}
        raise ValueError("LineResult has neither message nor error")


@dataclass
class BatchResult:
    """Per-line results of a batch, in input order."""

    results: List[LineResult] = field(default_factory=list)

    @property
    def messages(self) -> List[ParsedMessage]:
        """Successfully decoded messages."""
        return [r.message for r in self.results if r.message is not None]

    @property
    def errors(self) -> List[LineResult]:
        """Results of lines that failed to decode."""
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        """True if every line decoded successfully."""
        return all(r.ok for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary of the batch."""
        return {
            "lines": len(self.results),
            "parsed": len(self.results) - len(self.errors),
            "failed": len(self.errors),
            "data": [r.to_dict() for r in self.results],
        }


def parse_batch(
    lines: Iterable[str],
    registry: Mapping[int, FieldDefinition],
    config: Optional[DecoderConfig] = None,
) -> BatchResult:
    """Decode every line of a batch.

    Args:
        lines: Input lines (trailing newlines are allowed)
        registry: Field definitions shared by every line
        config: Decoder configuration, defaults to DecoderConfig()

    Returns:
        BatchResult with one LineResult per decoded line

    Raises:
        BatchAborted: On the first failing line when the policy is "fail-fast"
    """
    config = config or DecoderConfig()
    batch = BatchResult()

    for line_number, raw in enumerate(lines, 1):
        line = raw.strip() if config.strip_lines else raw.rstrip("\r\n")
        if config.skip_blank_lines and not line.strip():
            continue

        try:
            message = parse_line(line, registry, trace=config.trace)
        except MessageError as e:
            e.with_line_number(line_number)
            if config.batch_policy == "fail-fast":
                raise BatchAborted(line_number, e) from e
            logger.info("Line %d failed: %s", line_number, e.message)
            batch.results.append(LineResult(line_number=line_number, error=e))
            continue

        batch.results.append(LineResult(line_number=line_number, message=message))

    logger.debug(
        "Batch done: %d lines, %d failed", len(batch.results), len(batch.errors)
    )
    return batch


def parse_text(
    text: str,
    registry: Mapping[int, FieldDefinition],
    config: Optional[DecoderConfig] = None,
) -> BatchResult:
    """Decode newline-separated message text. See parse_batch()."""
    return parse_batch(text.split("\n"), registry, config)


def parse_file(
    path: str | Path,
    registry: Mapping[int, FieldDefinition],
    config: Optional[DecoderConfig] = None,
) -> BatchResult:
    """Decode a UTF-8 message file. See parse_batch()."""
    with open(path, encoding="utf-8", newline="") as f:
        return parse_batch(f, registry, config)
