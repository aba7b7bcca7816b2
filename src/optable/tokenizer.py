# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option-name extraction and bundle grammar resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .cursor import ArgumentCursor
from .descriptors import INLINE_VALUE_SEPARATOR, OptionDescriptor, OptionDescriptorTable
from .kinds import ValueKind, promote

OPTION_PREFIX: Final[str] = "-"
LONG_PREFIX: Final[str] = "--"


class GrammarError(Exception):
    """Internal signal for a bundle that violates the option grammar.

    Raised by the tokenizer and caught by the parse driver, which records
    ``str(error)`` as one line of the parse report.
    """


@dataclass(frozen=True, slots=True)
class ResolvedBundle:
    """Descriptors named by one bundle and the kind governing its shared read."""

    identifiers: tuple[str, ...]
    descriptors: tuple[OptionDescriptor, ...]
    kind: ValueKind


def read_bundle(cursor: ArgumentCursor) -> tuple[str, ...]:
    """Extract the option identifiers named at ``cursor``.

    ``--name`` yields one identifier; ``-abc`` yields ``("a", "b", "c")``.
    When the entry carries ``=value`` the cursor stops at ``value`` inside the
    same entry, otherwise it moves to the next entry.

    Args:
        cursor: Read position at the start of an option entry.

    Returns:
        tuple[str, ...]: Identifiers in the order they appear.

    Raises:
        GrammarError: If the entry is not an option, names nothing, or repeats
            a short identifier.
    """

    token = cursor.current
    if not token.startswith(OPTION_PREFIX):
        raise GrammarError(f"Error: {token}. Option expected.")

    if token.startswith(LONG_PREFIX):
        body = token[len(LONG_PREFIX) :]
        name, _, _ = body.partition(INLINE_VALUE_SEPARATOR)
        if not name:
            raise GrammarError(f"Error: {cursor.entry}. Zero length option.")
        identifiers: tuple[str, ...] = (name,)
        prefix_length = len(LONG_PREFIX) + len(name)
    else:
        body = token[len(OPTION_PREFIX) :]
        cluster, _, _ = body.partition(INLINE_VALUE_SEPARATOR)
        if not cluster:
            raise GrammarError(f"Error: {cursor.entry}. Zero length option.")
        seen: list[str] = []
        for char in cluster:
            if char in seen:
                raise GrammarError(f"Error: {char}. Same option multiple times.")
            seen.append(char)
        identifiers = tuple(seen)
        prefix_length = len(OPTION_PREFIX) + len(cluster)

    if token[prefix_length:].startswith(INLINE_VALUE_SEPARATOR):
        cursor.skip(prefix_length + len(INLINE_VALUE_SEPARATOR))
    else:
        cursor.advance()
    return identifiers


def resolve_bundle_kind(kinds: tuple[ValueKind, ...]) -> ValueKind:
    """Return the kind governing a bundle whose options declare ``kinds``."""

    return promote(kinds)


def resolve_bundle(identifiers: tuple[str, ...], table: OptionDescriptorTable) -> ResolvedBundle:
    """Look up every identifier of a bundle and compute its governing kind.

    Args:
        identifiers: Identifiers returned by :func:`read_bundle`.
        table: Validated descriptor table.

    Returns:
        ResolvedBundle: Descriptors in identifier order and the governing kind.

    Raises:
        GrammarError: If an identifier does not resolve to any descriptor.
    """

    descriptors: list[OptionDescriptor] = []
    for identifier in identifiers:
        descriptor = table.lookup(identifier)
        if descriptor is None:
            raise GrammarError(f"Undefined option: {identifier}")
        descriptors.append(descriptor)
    kind = resolve_bundle_kind(tuple(descriptor.kind for descriptor in descriptors))
    return ResolvedBundle(identifiers=identifiers, descriptors=tuple(descriptors), kind=kind)


__all__ = [
    "GrammarError",
    "ResolvedBundle",
    "read_bundle",
    "resolve_bundle",
    "resolve_bundle_kind",
]
