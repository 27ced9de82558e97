"""Registry of field definitions loaded from a schema source."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Literal, Mapping

from ..exceptions import SchemaFormatError
from .definition import FieldDefinition

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["replace", "error"]


class FieldDefinitionRegistry(Mapping[int, FieldDefinition]):
    """Read-only mapping of field number to FieldDefinition.

    A registry is built once from a schema and then only read, so a single
    instance can be shared by any number of concurrent parses.

    Example:
        >>> registry = FieldDefinitionRegistry.load("2,PAN,^[0-9]{1,19}$,19,1,1")
        >>> registry[2].length_digit_count
        2
    """

    def __init__(self, definitions: Mapping[int, FieldDefinition] | None = None) -> None:
        self._definitions: Mapping[int, FieldDefinition] = MappingProxyType(
            dict(definitions or {})
        )

    @classmethod
    def load(
        cls, schema_text: str, *, on_duplicate: DuplicatePolicy = "replace"
    ) -> FieldDefinitionRegistry:
        """Parse schema text into a registry.

        Lines starting with ``#`` and blank lines are ignored.

        Args:
            schema_text: Newline-separated schema source
            on_duplicate: ``"replace"`` lets a later definition of an id win,
                ``"error"`` rejects the schema

        Returns:
            Built registry

        Raises:
            SchemaFormatError: If any line is malformed, or an id repeats and
                ``on_duplicate`` is ``"error"``
        """
        if on_duplicate not in ("replace", "error"):
            raise ValueError(f"on_duplicate must be 'replace' or 'error', got {on_duplicate!r}")

        definitions: dict[int, FieldDefinition] = {}
        for line_number, line in enumerate(schema_text.splitlines(), 1):
            if line.startswith("#") or not line.strip():
                continue

            definition = FieldDefinition.from_schema_line(line, line_number)
            if definition.id in definitions:
                if on_duplicate == "error":
                    raise SchemaFormatError(
                        f"Duplicate definition for field {definition.id}",
                        line_number=line_number,
                        line=line,
                    )
                logger.warning(
                    "Field %d redefined on schema line %d, replacing earlier definition",
                    definition.id,
                    line_number,
                )
            definitions[definition.id] = definition

        logger.debug("Loaded %d field definitions", len(definitions))
        return cls(definitions)

    @classmethod
    def from_file(
        cls, path: str | Path, *, on_duplicate: DuplicatePolicy = "replace"
    ) -> FieldDefinitionRegistry:
        """Load a registry from a UTF-8 schema file."""
        return cls.load(Path(path).read_text(encoding="utf-8"), on_duplicate=on_duplicate)

    def __getitem__(self, field_number: int) -> FieldDefinition:
        return self._definitions[field_number]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._definitions))

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={list(self)})"
