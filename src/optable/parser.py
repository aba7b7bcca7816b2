# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parse driver and the result store publishing resolved options."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Final

from .cursor import ArgumentCursor
from .descriptors import NO_ALIAS, OptionDescriptorTable
from .errors import ArgumentParseError
from .kinds import ValueKind
from .tokenizer import GrammarError, read_bundle, resolve_bundle
from .values import UNEXISTED_VALUE, OptionValue, read_value

LOGGER = logging.getLogger(__name__)

PROGRAM_NAME_INDEX: Final[int] = 0


@dataclass(frozen=True, slots=True)
class Option:
    """Binding of one declared option to the value parsed for its bundle.

    Every projection is forwarded to :attr:`value`; options parsed from the
    same bundle share one :class:`OptionValue` instance.
    """

    alias: str
    name: str
    value: OptionValue

    @property
    def kind(self) -> ValueKind:
        """Return the governing kind of the bundle this option was parsed in."""

        return self.value.kind

    @property
    def exists(self) -> bool:
        """Return ``True`` unless this is the absent sentinel."""

        return self.value.kind is not ValueKind.UNEXISTED

    def as_string(self) -> str:
        """Return :meth:`OptionValue.as_string` of the shared value."""

        return self.value.as_string()

    def as_bool(self) -> bool:
        """Return :meth:`OptionValue.as_bool` of the shared value."""

        return self.value.as_bool()

    def as_integer(self) -> int:
        """Return :meth:`OptionValue.as_integer` of the shared value."""

        return self.value.as_integer()

    def as_real(self) -> float:
        """Return :meth:`OptionValue.as_real` of the shared value."""

        return self.value.as_real()

    def as_string_vector(self) -> list[str]:
        """Return :meth:`OptionValue.as_string_vector` of the shared value."""

        return self.value.as_string_vector()

    def as_bool_vector(self) -> list[bool]:
        """Return :meth:`OptionValue.as_bool_vector` of the shared value."""

        return self.value.as_bool_vector()

    def as_integer_vector(self) -> list[int]:
        """Return :meth:`OptionValue.as_integer_vector` of the shared value."""

        return self.value.as_integer_vector()

    def as_real_vector(self) -> list[float]:
        """Return :meth:`OptionValue.as_real_vector` of the shared value."""

        return self.value.as_real_vector()

    def __bool__(self) -> bool:
        """Return :meth:`as_bool`; the absent sentinel is always ``False``."""

        return self.value.as_bool()


ABSENT_OPTION: Final[Option] = Option(alias=NO_ALIAS, name="", value=UNEXISTED_VALUE)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Bindings and values produced by one parse pass.

    The result is immutable once :func:`parse` returns it. Lookups never fail:
    an identifier that was not parsed resolves to :data:`ABSENT_OPTION`, whose
    kind is ``UNEXISTED`` and whose truth is ``False``.

    Attributes:
        options: Bindings in parse order, one per descriptor of each bundle.
        values: One shared value per committed bundle, in parse order.
        valid: ``True`` when no problem was recorded.
        error: Newline-terminated report lines, ``""`` when valid.
    """

    options: tuple[Option, ...] = ()
    values: tuple[OptionValue, ...] = ()
    valid: bool = True
    error: str = ""

    def lookup(self, identifier: str) -> Option:
        """Return the option bound to ``identifier`` or :data:`ABSENT_OPTION`.

        One-character identifiers match aliases; longer identifiers match names.
        """

        if not identifier:
            return ABSENT_OPTION
        if len(identifier) == 1:
            return next((option for option in self.options if option.alias == identifier), ABSENT_OPTION)
        return next((option for option in self.options if option.name == identifier), ABSENT_OPTION)

    def __getitem__(self, identifier: str) -> Option:
        """Return :meth:`lookup` of ``identifier``."""

        return self.lookup(identifier)

    def __contains__(self, identifier: object) -> bool:
        """Return ``True`` when ``identifier`` was bound during the parse."""

        return isinstance(identifier, str) and self.lookup(identifier).exists

    def __iter__(self) -> Iterator[Option]:
        """Iterate over the bindings in parse order."""

        return iter(self.options)

    def __len__(self) -> int:
        """Return the number of bindings."""

        return len(self.options)

    def raise_for_error(self) -> ParseResult:
        """Return ``self`` when valid.

        Raises:
            ArgumentParseError: If the parse pass recorded any problem.
        """

        if not self.valid:
            raise ArgumentParseError(self.error)
        return self


@dataclass(slots=True)
class _ResultBuilder:
    """Mutable accumulator used while a single parse pass runs."""

    options: list[Option] = field(default_factory=list)
    values: list[OptionValue] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    def fail(self, line: str) -> None:
        """Record one report line."""

        self.lines.append(line)

    def bind(self, aliases_and_names: Sequence[tuple[str, str]], value: OptionValue) -> None:
        """Publish ``value`` under every ``(alias, name)`` pair of one bundle."""

        self.values.append(value)
        for alias, name in aliases_and_names:
            self.options.append(Option(alias=alias, name=name, value=value))

    def build(self) -> ParseResult:
        """Return the frozen result of the pass."""

        return ParseResult(
            options=tuple(self.options),
            values=tuple(self.values),
            valid=not self.lines,
            error="".join(f"{line}\n" for line in self.lines),
        )


def parse(table: OptionDescriptorTable, argv: Sequence[str]) -> ParseResult:
    """Parse ``argv`` against ``table``.

    ``argv[0]`` is the program name and is skipped. Parsing stops at the first
    grammar or value error; bundles committed before the failure remain
    available in the result.

    Args:
        table: Descriptor table; nothing is parsed when it is invalid.
        argv: Full argument vector including the program name.

    Returns:
        ParseResult: Bindings, values, validity and the error report.
    """

    builder = _ResultBuilder()
    if not table.valid:
        LOGGER.debug("refusing to parse with an invalid descriptor table")
        for line in table.error.splitlines():
            builder.fail(line)
        return builder.build()

    cursor = ArgumentCursor.over(argv, start=PROGRAM_NAME_INDEX + 1)
    while not cursor.at_end:
        try:
            identifiers = read_bundle(cursor)
            bundle = resolve_bundle(identifiers, table)
        except GrammarError as exc:
            LOGGER.debug("grammar error at argv[%d]: %s", cursor.index, exc)
            builder.fail(str(exc))
            break

        value = read_value(bundle.kind, cursor)
        labels = ", ".join(descriptor.label for descriptor in bundle.descriptors)
        if value is None:
            LOGGER.debug("failed to read %s value for %s", bundle.kind.label, labels)
            builder.fail(f"Failed to read argument for {labels}.")
            break

        LOGGER.debug("bound %s to %s value %r", labels, bundle.kind.label, value.payload)
        builder.bind([(descriptor.alias, descriptor.name) for descriptor in bundle.descriptors], value)
    return builder.build()


@dataclass(frozen=True, slots=True)
class OptionParser:
    """Descriptor table bound for repeated parsing."""

    table: OptionDescriptorTable

    def parse(self, argv: Sequence[str]) -> ParseResult:
        """Return :func:`parse` of ``argv`` against the bound table."""

        return parse(self.table, argv)

    def parse_strict(self, argv: Sequence[str]) -> ParseResult:
        """Parse ``argv`` and raise on any table or argument problem.

        Raises:
            DescriptorTableError: If the bound table is invalid.
            ArgumentParseError: If ``argv`` does not satisfy the grammar.
        """

        self.table.ensure_valid()
        return parse(self.table, argv).raise_for_error()


__all__ = ["ABSENT_OPTION", "Option", "OptionParser", "ParseResult", "parse"]
