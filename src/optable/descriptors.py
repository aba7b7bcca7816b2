# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Declared option grammar: descriptors and the validated descriptor table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final

from .errors import DescriptorTableError
from .kinds import DECLARABLE_KINDS, ValueKind

LOGGER = logging.getLogger(__name__)

NO_ALIAS: Final[str] = ""
INLINE_VALUE_SEPARATOR: Final[str] = "="
# Short identifiers the tokenizer reads as a prefix or a value separator.
UNREACHABLE_ALIASES: Final[frozenset[str]] = frozenset({"-", INLINE_VALUE_SEPARATOR})


@dataclass(frozen=True, slots=True)
class OptionDescriptor:
    """Declared grammar entry for one logical option.

    Attributes:
        alias: Single-character short form, or :data:`NO_ALIAS`.
        name: Long form of at least two characters, or ``""``.
        kind: Value kind the option collects.
    """

    alias: str
    name: str
    kind: ValueKind

    @property
    def label(self) -> str:
        """Return a display label such as ``-t/--test``."""

        parts = []
        if self.alias != NO_ALIAS:
            parts.append(f"-{self.alias}")
        if self.name:
            parts.append(f"--{self.name}")
        return "/".join(parts) or "<unnamed>"

    def identifiers(self) -> tuple[str, ...]:
        """Return every identifier that resolves to this descriptor."""

        return tuple(value for value in (self.alias, self.name) if value)


@dataclass(slots=True)
class OptionDescriptorTable:
    """Insertion-ordered descriptors plus the outcome of their validation.

    The table is re-validated after every insertion. Validation reports every
    violation it finds, one newline-terminated line each, and never raises.
    """

    _descriptors: list[OptionDescriptor] = field(default_factory=list)
    _valid: bool = field(default=True, init=False)
    _error: str = field(default="", init=False)

    def __post_init__(self) -> None:
        """Validate the descriptors supplied at construction."""

        self.validate()

    @classmethod
    def of(cls, *descriptors: OptionDescriptor) -> OptionDescriptorTable:
        """Return a validated table holding ``descriptors`` in order."""

        return cls(list(descriptors))

    @property
    def valid(self) -> bool:
        """Return ``True`` when the last validation found no violation."""

        return self._valid

    @property
    def error(self) -> str:
        """Return the newline-terminated violation report, ``""`` when valid."""

        return self._error

    @property
    def descriptors(self) -> tuple[OptionDescriptor, ...]:
        """Return a snapshot of the descriptors in insertion order."""

        return tuple(self._descriptors)

    def insert(self, descriptor: OptionDescriptor) -> OptionDescriptorTable:
        """Append ``descriptor`` and re-validate; returns ``self`` for chaining."""

        self._descriptors.append(descriptor)
        self.validate()
        return self

    def extend(self, descriptors: Iterable[OptionDescriptor]) -> OptionDescriptorTable:
        """Append every descriptor in ``descriptors`` and re-validate once."""

        self._descriptors.extend(descriptors)
        self.validate()
        return self

    def __lshift__(self, descriptor: OptionDescriptor) -> OptionDescriptorTable:
        """Insert ``descriptor``, allowing ``table << a << b``."""

        return self.insert(descriptor)

    def validate(self) -> bool:
        """Recompute validity and error text from the current descriptors.

        Returns:
            bool: ``True`` when no violation was found.
        """

        problems: list[str] = []
        seen_aliases: set[str] = set()
        seen_names: set[str] = set()
        for descriptor in self._descriptors:
            if descriptor.alias == NO_ALIAS and not descriptor.name:
                problems.append("Option descriptor declares neither an alias nor a name.")
            if len(descriptor.alias) > 1:
                problems.append(f"Option alias must be a single character: {descriptor.alias}.")
            if descriptor.alias in UNREACHABLE_ALIASES:
                problems.append(f"Option alias cannot be matched on the command line: {descriptor.alias}.")
            if INLINE_VALUE_SEPARATOR in descriptor.name:
                problems.append(f"Option name cannot contain '{INLINE_VALUE_SEPARATOR}': {descriptor.name}.")
            if len(descriptor.name) == 1:
                problems.append(f"Option name cannot be one character long: {descriptor.name}.")
            if descriptor.kind not in DECLARABLE_KINDS:
                problems.append(
                    f"Option {descriptor.label} declares an unsupported value kind: {int(descriptor.kind)}."
                )
            if descriptor.alias != NO_ALIAS:
                if descriptor.alias in seen_aliases:
                    problems.append(f"Multiple option descriptors with the same alias: {descriptor.alias}.")
                seen_aliases.add(descriptor.alias)
            if descriptor.name:
                if descriptor.name in seen_names:
                    problems.append(f"Multiple option descriptors with the same name: {descriptor.name}.")
                seen_names.add(descriptor.name)

        for problem in problems:
            LOGGER.debug("descriptor table violation: %s", problem)
        self._valid = not problems
        self._error = "".join(f"{problem}\n" for problem in problems)
        return self._valid

    def ensure_valid(self) -> OptionDescriptorTable:
        """Return ``self`` when valid.

        Raises:
            DescriptorTableError: If validation reported any violation.
        """

        if not self._valid:
            raise DescriptorTableError(self._error)
        return self

    def lookup(self, identifier: str) -> OptionDescriptor | None:
        """Return the descriptor matching ``identifier`` exactly.

        One-character identifiers match aliases; longer identifiers match names.
        Empty or unknown identifiers return ``None``.
        """

        if not identifier:
            return None
        if len(identifier) == 1:
            return next((item for item in self._descriptors if item.alias == identifier), None)
        return next((item for item in self._descriptors if item.name == identifier), None)

    def __getitem__(self, identifier: str) -> OptionDescriptor | None:
        """Return :meth:`lookup` of ``identifier``."""

        return self.lookup(identifier)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.lookup(identifier) is not None

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


__all__ = [
    "INLINE_VALUE_SEPARATOR",
    "NO_ALIAS",
    "UNREACHABLE_ALIASES",
    "OptionDescriptor",
    "OptionDescriptorTable",
]
