# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load descriptor tables declared in TOML or JSON documents.

A document lists options under an ``options`` array::

    [[options]]
    alias = "t"
    name = "test"
    kind = "int"

Structural problems raise :class:`~optable.errors.TableDocumentError`; semantic
problems such as duplicate aliases are left to the table's own validation.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .descriptors import NO_ALIAS, OptionDescriptor, OptionDescriptorTable
from .errors import TableDocumentError
from .kinds import ValueKind, normalize_value_kind

LOGGER = logging.getLogger(__name__)

OPTIONS_KEY: Final[str] = "options"
TOML_SUFFIXES: Final[frozenset[str]] = frozenset({".toml"})
JSON_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})


class OptionEntryModel(BaseModel):
    """Schema of one ``[[options]]`` entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    alias: str = NO_ALIAS
    name: str = ""
    kind: ValueKind = ValueKind.FLAG
    description: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> ValueKind:
        """Return ``value`` normalised to a declarable :class:`ValueKind`.

        Raises:
            ValueError: If ``value`` does not name a declarable kind.
        """

        if isinstance(value, (str, ValueKind)):
            return normalize_value_kind(value)
        raise ValueError(f"expected a kind name, got {type(value).__name__}")

    def to_descriptor(self) -> OptionDescriptor:
        """Return the descriptor declared by this entry."""

        return OptionDescriptor(alias=self.alias, name=self.name, kind=self.kind)


class TableDocumentModel(BaseModel):
    """Schema of a whole descriptor table document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    options: tuple[OptionEntryModel, ...] = Field(default_factory=tuple)

    def to_table(self) -> OptionDescriptorTable:
        """Return a validated table built from the document entries in order."""

        return OptionDescriptorTable([entry.to_descriptor() for entry in self.options])


def table_from_mapping(data: Mapping[str, Any], *, context: str = "table") -> OptionDescriptorTable:
    """Build a descriptor table from an already decoded document.

    Args:
        data: Decoded document mapping.
        context: Human-readable context used in error messages.

    Returns:
        OptionDescriptorTable: Table whose ``valid``/``error`` reflect its descriptors.

    Raises:
        TableDocumentError: If ``data`` does not match the document schema.
    """

    try:
        document = TableDocumentModel.model_validate(dict(data))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise TableDocumentError(f"{context}: {details}") from exc
    return document.to_table()


def load_table(path: Path) -> OptionDescriptorTable:
    """Read the descriptor table stored at ``path``.

    The format is chosen from the suffix: ``.toml`` or ``.json``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        TableDocumentError: If the document cannot be decoded or is malformed.
    """

    if not path.exists():
        raise FileNotFoundError(path)
    LOGGER.debug("loading descriptor table from %s", path)
    suffix = path.suffix.lower()
    if suffix in TOML_SUFFIXES:
        with path.open("rb") as handle:
            try:
                payload: Any = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                raise TableDocumentError(f"{path}: failed to parse TOML: {exc}") from exc
    elif suffix in JSON_SUFFIXES:
        with path.open("r", encoding="utf-8") as stream:
            try:
                payload = json.load(stream)
            except json.JSONDecodeError as exc:
                raise TableDocumentError(f"{path}: failed to parse JSON: {exc}") from exc
    else:
        raise TableDocumentError(f"{path}: unsupported table format '{path.suffix}'")

    if not isinstance(payload, Mapping):
        raise TableDocumentError(f"{path}: expected a top-level object with an '{OPTIONS_KEY}' array")
    table = table_from_mapping(payload, context=str(path))
    LOGGER.debug("loaded %d descriptors from %s (valid=%s)", len(table), path, table.valid)
    return table


__all__ = [
    "OptionEntryModel",
    "TableDocumentModel",
    "load_table",
    "table_from_mapping",
]
