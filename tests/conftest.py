"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import pytest

from helpers import SCHEMA_TEXT, MessageBuilder, build_message
from iso8583_decoder import FieldDefinitionRegistry

EXAMPLES_DATA = Path(__file__).parent.parent / "examples" / "data"


@pytest.fixture
def schema_text() -> str:
    """Schema source covering fixed, variable and secondary-bitmap fields."""
    return SCHEMA_TEXT


@pytest.fixture
def registry() -> FieldDefinitionRegistry:
    """Registry built from the shared schema text."""
    return FieldDefinitionRegistry.load(SCHEMA_TEXT)


@pytest.fixture
def message_builder(registry: FieldDefinitionRegistry) -> MessageBuilder:
    """Build message lines against the shared registry."""

    def build(values: Mapping[int, str], **kwargs: str) -> str:
        return build_message(values, registry, **kwargs)

    return build


@pytest.fixture
def examples_data() -> Path:
    """Directory holding the example schema and message files."""
    return EXAMPLES_DATA
