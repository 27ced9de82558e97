"""Configuration for batch decoding.

This module provides the configuration dataclass used by the batch layer
and the command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .utils.tracing import TraceHook

BatchPolicy = Literal["collect-errors", "fail-fast"]

BATCH_POLICIES = ("collect-errors", "fail-fast")


@dataclass
class DecoderConfig:
    """Configuration for decoding a batch of message lines.

    Attributes:
        batch_policy: What to do when a line fails (default "collect-errors").
            - "collect-errors": record the error and continue with the next line
            - "fail-fast": stop at the first failing line and raise BatchAborted

        strip_lines: Strip surrounding whitespace from each line before
            decoding (default True)

        skip_blank_lines: Ignore empty lines instead of reporting them as too
            short (default True). Skipped lines still count for line numbers.

        trace: Optional callback receiving ``(event, data)`` for every decode
            step of every line. An exception raised by the hook is not caught:
            it stops decoding and propagates out of parse_batch() unchanged,
            whatever the batch policy.

    Examples:
        ```python
        from iso8583_decoder import DecoderConfig, parse_file

        config = DecoderConfig(batch_policy="fail-fast")
        result = parse_file("messages.txt", registry, config)
        ```
    """

    batch_policy: BatchPolicy = "collect-errors"
    strip_lines: bool = True
    skip_blank_lines: bool = True
    trace: Optional[TraceHook] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.batch_policy not in BATCH_POLICIES:
            raise ValueError(
                f"batch_policy must be one of {BATCH_POLICIES}, got {self.batch_policy!r}"
            )

        if self.trace is not None and not callable(self.trace):
            raise ValueError("trace must be callable or None")
