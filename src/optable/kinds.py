# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Value-kind enumeration and the promotion rules applied to option bundles."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntFlag
from types import MappingProxyType
from typing import Final

from .errors import UnknownValueKindError


class ValueKind(IntFlag):
    """Shape of the value an option collects from the argument vector."""

    UNEXISTED = 0
    STRING = 1 << 0
    FLAG = 1 << 1
    INTEGER = 1 << 2
    REAL = 1 << 3
    STRING_VECTOR = 1 << 4
    BOOL_VECTOR = 1 << 5
    INTEGER_VECTOR = 1 << 6
    REAL_VECTOR = 1 << 7

    @property
    def label(self) -> str:
        """Return the canonical lower-case alias of the kind."""

        return _CANONICAL_LABELS[self]


SINGLE_KINDS: Final[tuple[ValueKind, ...]] = (
    ValueKind.STRING,
    ValueKind.FLAG,
    ValueKind.INTEGER,
    ValueKind.REAL,
)
VECTOR_KINDS: Final[tuple[ValueKind, ...]] = (
    ValueKind.STRING_VECTOR,
    ValueKind.BOOL_VECTOR,
    ValueKind.INTEGER_VECTOR,
    ValueKind.REAL_VECTOR,
)
DECLARABLE_KINDS: Final[frozenset[ValueKind]] = frozenset(SINGLE_KINDS + VECTOR_KINDS)

# Governing kind for a bundle keyed by (largest vector kind, largest single kind).
# ``None`` stands for "no single kind declared in the bundle".
_PROMOTIONS: Final = MappingProxyType(
    {
        ValueKind.REAL_VECTOR: {
            None: ValueKind.REAL_VECTOR,
            ValueKind.STRING: ValueKind.REAL_VECTOR,
            ValueKind.FLAG: ValueKind.REAL_VECTOR,
            ValueKind.INTEGER: ValueKind.REAL_VECTOR,
            ValueKind.REAL: ValueKind.REAL_VECTOR,
        },
        ValueKind.INTEGER_VECTOR: {
            None: ValueKind.INTEGER_VECTOR,
            ValueKind.STRING: ValueKind.INTEGER_VECTOR,
            ValueKind.FLAG: ValueKind.INTEGER_VECTOR,
            ValueKind.INTEGER: ValueKind.INTEGER_VECTOR,
            ValueKind.REAL: ValueKind.REAL_VECTOR,
        },
        ValueKind.BOOL_VECTOR: {
            None: ValueKind.BOOL_VECTOR,
            ValueKind.STRING: ValueKind.BOOL_VECTOR,
            ValueKind.FLAG: ValueKind.BOOL_VECTOR,
            ValueKind.INTEGER: ValueKind.INTEGER_VECTOR,
            ValueKind.REAL: ValueKind.REAL_VECTOR,
        },
        ValueKind.STRING_VECTOR: {
            None: ValueKind.STRING_VECTOR,
            ValueKind.STRING: ValueKind.STRING_VECTOR,
            ValueKind.FLAG: ValueKind.STRING_VECTOR,
            ValueKind.INTEGER: ValueKind.INTEGER_VECTOR,
            ValueKind.REAL: ValueKind.REAL_VECTOR,
        },
    }
)

_CANONICAL_LABELS: Final = MappingProxyType(
    {
        ValueKind.UNEXISTED: "unexisted",
        ValueKind.STRING: "string",
        ValueKind.FLAG: "flag",
        ValueKind.INTEGER: "integer",
        ValueKind.REAL: "real",
        ValueKind.STRING_VECTOR: "list[string]",
        ValueKind.BOOL_VECTOR: "list[bool]",
        ValueKind.INTEGER_VECTOR: "list[integer]",
        ValueKind.REAL_VECTOR: "list[real]",
    }
)

KIND_ALIASES: Final[MappingProxyType[str, ValueKind]] = MappingProxyType(
    {
        "string": ValueKind.STRING,
        "str": ValueKind.STRING,
        "flag": ValueKind.FLAG,
        "none": ValueKind.FLAG,
        "bool": ValueKind.FLAG,
        "boolean": ValueKind.FLAG,
        "integer": ValueKind.INTEGER,
        "int": ValueKind.INTEGER,
        "real": ValueKind.REAL,
        "float": ValueKind.REAL,
        "number": ValueKind.REAL,
        "list[string]": ValueKind.STRING_VECTOR,
        "list[str]": ValueKind.STRING_VECTOR,
        "string_vector": ValueKind.STRING_VECTOR,
        "list[bool]": ValueKind.BOOL_VECTOR,
        "list[boolean]": ValueKind.BOOL_VECTOR,
        "bool_vector": ValueKind.BOOL_VECTOR,
        "list[integer]": ValueKind.INTEGER_VECTOR,
        "list[int]": ValueKind.INTEGER_VECTOR,
        "integer_vector": ValueKind.INTEGER_VECTOR,
        "list[real]": ValueKind.REAL_VECTOR,
        "list[float]": ValueKind.REAL_VECTOR,
        "real_vector": ValueKind.REAL_VECTOR,
    }
)


def is_single(kind: ValueKind) -> bool:
    """Return ``True`` when ``kind`` reads at most one token."""

    return kind in SINGLE_KINDS


def is_vector(kind: ValueKind) -> bool:
    """Return ``True`` when ``kind`` reads a run of tokens."""

    return kind in VECTOR_KINDS


def promote(kinds: Iterable[ValueKind]) -> ValueKind:
    """Return the governing kind for a bundle declaring ``kinds``.

    A bundle made only of flags reads no value. Otherwise the largest vector
    kind and the largest single kind are combined through the promotion table;
    without any vector kind the largest single kind governs.

    Args:
        kinds: Declared kinds of every option in the bundle.

    Returns:
        ValueKind: Concrete kind used for the bundle's shared read, or
        ``ValueKind.UNEXISTED`` when ``kinds`` is empty.
    """

    declared = tuple(kinds)
    if declared and all(kind == ValueKind.FLAG for kind in declared):
        return ValueKind.FLAG

    largest_single: ValueKind | None = None
    largest_vector: ValueKind | None = None
    for kind in declared:
        if is_single(kind):
            if largest_single is None or kind > largest_single:
                largest_single = kind
        elif is_vector(kind):
            if largest_vector is None or kind > largest_vector:
                largest_vector = kind

    if largest_vector is not None:
        return _PROMOTIONS[largest_vector][largest_single]
    if largest_single is not None:
        return largest_single
    return ValueKind.UNEXISTED


def normalize_value_kind(value: str | ValueKind, *, context: str = "kind") -> ValueKind:
    """Return the :class:`ValueKind` named by ``value``.

    Args:
        value: Kind member or one of the textual aliases in :data:`KIND_ALIASES`.
        context: Human-readable context used in error messages.

    Returns:
        ValueKind: Declarable kind matching ``value``.

    Raises:
        UnknownValueKindError: If ``value`` does not describe a declarable kind.
    """

    if isinstance(value, ValueKind):
        if value not in DECLARABLE_KINDS:
            raise UnknownValueKindError(f"{context}: unsupported value kind {int(value)}")
        return value
    raw = value.strip().lower()
    if raw not in KIND_ALIASES:
        raise UnknownValueKindError(f"{context}: unknown value kind '{value}'")
    return KIND_ALIASES[raw]


__all__ = [
    "DECLARABLE_KINDS",
    "KIND_ALIASES",
    "SINGLE_KINDS",
    "VECTOR_KINDS",
    "ValueKind",
    "is_single",
    "is_vector",
    "normalize_value_kind",
    "promote",
]
