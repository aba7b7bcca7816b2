# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Explicit read position over an argument vector."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple


class CursorSnapshot(NamedTuple):
    """Saved position used to roll a cursor back after a failed read."""

    index: int
    offset: int


@dataclass(slots=True)
class ArgumentCursor:
    """Track the entry and the character offset the parser reads next.

    ``offset`` is non-zero only after an inline ``name=value`` split, where the
    value starts part-way through the current entry.
    """

    argv: tuple[str, ...]
    index: int = 0
    offset: int = 0

    @classmethod
    def over(cls, argv: Sequence[str], *, start: int = 0) -> ArgumentCursor:
        """Return a cursor over ``argv`` positioned at entry ``start``."""

        return cls(argv=tuple(argv), index=start)

    @property
    def at_end(self) -> bool:
        """Return ``True`` once every entry has been consumed."""

        return self.index >= len(self.argv)

    @property
    def current(self) -> str:
        """Return the unconsumed text of the current entry, or ``""`` at the end."""

        if self.at_end:
            return ""
        return self.argv[self.index][self.offset :]

    @property
    def entry(self) -> str:
        """Return the whole current entry including any consumed prefix."""

        if self.at_end:
            return ""
        return self.argv[self.index]

    def advance(self) -> None:
        """Move to the start of the next entry."""

        self.index += 1
        self.offset = 0

    def skip(self, count: int) -> None:
        """Mark ``count`` more characters of the current entry as consumed."""

        self.offset += count

    def snapshot(self) -> CursorSnapshot:
        """Return the current position."""

        return CursorSnapshot(self.index, self.offset)

    def restore(self, snapshot: CursorSnapshot) -> None:
        """Return to a position previously captured with :meth:`snapshot`."""

        self.index, self.offset = snapshot


__all__ = ["ArgumentCursor", "CursorSnapshot"]
