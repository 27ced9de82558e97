"""Utility functions for iso8583_decoder.

This module provides logging setup and tracing hooks.
"""

from __future__ import annotations

from .tracing import TraceHook, emit, setup_logging

__all__ = [
    "TraceHook",
    "emit",
    "setup_logging",
]
