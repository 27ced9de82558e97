"""Batch decoding for iso8583_decoder."""

from __future__ import annotations

from .processor import BatchResult, LineResult, parse_batch, parse_file, parse_text

__all__ = [
    "BatchResult",
    "LineResult",
    "parse_batch",
    "parse_file",
    "parse_text",
]
