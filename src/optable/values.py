# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed option values: token consumption, literal parsing and projections.

An :class:`OptionValue` is a tagged union keyed by :class:`~optable.kinds.ValueKind`.
Every value answers every projection; projections without a natural meaning
return a fixed default (``""``, ``0``, ``0.0``, ``[]``) instead of failing, so
callers must not infer the declared kind of an option from a projection.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, TypeAlias, TypeVar, cast

from .cursor import ArgumentCursor
from .kinds import ValueKind

Scalar: TypeAlias = bool | int | float | str
Payload: TypeAlias = None | Scalar | tuple[bool, ...] | tuple[int, ...] | tuple[float, ...] | tuple[str, ...]

_T = TypeVar("_T")

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_REAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
)
_BOOL_LITERALS: Final[dict[str, bool]] = {
    "true": True,
    "True": True,
    "false": False,
    "False": False,
}
_FLAG_LITERALS: Final[dict[str, bool]] = {"true": True, "false": False}


def parse_integer(text: str) -> int | None:
    """Return ``text`` parsed as a base-10 integer, or ``None``.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and trailing characters all fail.
    """

    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def parse_real(text: str) -> float | None:
    """Return ``text`` parsed as a decimal floating-point literal, or ``None``.

    Only an optional sign, digits with an optional fraction and an optional
    decimal exponent are accepted. Hexadecimal floats (``0x1p3``), ``inf`` and
    ``nan`` are rejected even though C ``strtod`` reads them, as are literals
    whose magnitude overflows to infinity.

    Args:
        text: Whole token to parse; surrounding whitespace is not stripped.

    Returns:
        float | None: Parsed value, or ``None`` when ``text`` is not a literal.
    """

    if _REAL_PATTERN.fullmatch(text) is None:
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def parse_bool_literal(text: str) -> bool | None:
    """Return the boolean spelled by ``text`` (``true``/``True``/``false``/``False``)."""

    return _BOOL_LITERALS.get(text)


def parse_string(text: str) -> str | None:
    """Return ``text`` unless it is empty."""

    return text or None


def format_bool(value: bool) -> str:
    """Return the lower-case literal for ``value``."""

    return "true" if value else "false"


def format_real(value: float) -> str:
    """Return the shortest text that parses back to exactly ``value``."""

    return repr(value)


@dataclass(frozen=True, slots=True)
class OptionValue:
    """Immutable value shared by every option identifier of one bundle."""

    kind: ValueKind
    payload: Payload = None

    # -- constructors ---------------------------------------------------

    @classmethod
    def flag(cls, value: bool = True) -> OptionValue:
        """Return a flag value; a bare flag on the command line is ``True``."""

        return cls(ValueKind.FLAG, bool(value))

    @classmethod
    def integer(cls, value: int) -> OptionValue:
        """Return an integer value."""

        return cls(ValueKind.INTEGER, int(value))

    @classmethod
    def real(cls, value: float) -> OptionValue:
        """Return a real value."""

        return cls(ValueKind.REAL, float(value))

    @classmethod
    def string(cls, value: str) -> OptionValue:
        """Return a string value."""

        return cls(ValueKind.STRING, str(value))

    @classmethod
    def vector(cls, kind: ValueKind, items: tuple[Scalar, ...]) -> OptionValue:
        """Return a vector value of ``kind`` holding ``items``."""

        return cls(kind, tuple(items))

    # -- scalar projections ---------------------------------------------

    def as_string(self) -> str:
        """Return the value as text; vectors answer with their first element."""

        match self.kind:
            case ValueKind.FLAG:
                return format_bool(cast(bool, self.payload))
            case ValueKind.INTEGER:
                return str(cast(int, self.payload))
            case ValueKind.REAL:
                return format_real(cast(float, self.payload))
            case ValueKind.STRING:
                return cast(str, self.payload)
            case ValueKind.BOOL_VECTOR | ValueKind.INTEGER_VECTOR | ValueKind.REAL_VECTOR | ValueKind.STRING_VECTOR:
                strings = self.as_string_vector()
                return strings[0] if strings else ""
            case _:
                return ""

    def as_bool(self) -> bool:
        """Return the truth of the value; strings are always ``True``."""

        match self.kind:
            case ValueKind.FLAG:
                return cast(bool, self.payload)
            case ValueKind.INTEGER | ValueKind.REAL:
                return self.payload != 0
            case ValueKind.STRING:
                return True
            case ValueKind.BOOL_VECTOR | ValueKind.INTEGER_VECTOR | ValueKind.REAL_VECTOR | ValueKind.STRING_VECTOR:
                flags = self.as_bool_vector()
                return flags[0] if flags else False
            case _:
                return False

    def as_integer(self) -> int:
        """Return the value as an integer; reals truncate toward zero."""

        match self.kind:
            case ValueKind.FLAG:
                return int(cast(bool, self.payload))
            case ValueKind.INTEGER:
                return cast(int, self.payload)
            case ValueKind.REAL:
                return _truncate(cast(float, self.payload))
            case ValueKind.BOOL_VECTOR | ValueKind.INTEGER_VECTOR | ValueKind.REAL_VECTOR:
                integers = self.as_integer_vector()
                return integers[0] if integers else 0
            case _:
                return 0

    def as_real(self) -> float:
        """Return the value as a float."""

        match self.kind:
            case ValueKind.FLAG:
                return float(cast(bool, self.payload))
            case ValueKind.INTEGER:
                return float(cast(int, self.payload))
            case ValueKind.REAL:
                return cast(float, self.payload)
            case ValueKind.BOOL_VECTOR | ValueKind.INTEGER_VECTOR | ValueKind.REAL_VECTOR:
                reals = self.as_real_vector()
                return reals[0] if reals else 0.0
            case _:
                return 0.0

    # -- vector projections ---------------------------------------------

    def as_string_vector(self) -> list[str]:
        """Return every element as text; single kinds yield one element.

        Returns:
            list[str]: New list, empty only for unexisted values.
        """

        match self.kind:
            case ValueKind.FLAG | ValueKind.INTEGER | ValueKind.REAL | ValueKind.STRING:
                return [self.as_string()]
            case ValueKind.BOOL_VECTOR:
                return [format_bool(item) for item in self._items()]
            case ValueKind.INTEGER_VECTOR:
                return [str(item) for item in self._items()]
            case ValueKind.REAL_VECTOR:
                return [format_real(item) for item in self._items()]
            case ValueKind.STRING_VECTOR:
                return list(self._items())
            case _:
                return []

    def as_bool_vector(self) -> list[bool]:
        """Return the truth of every element; strings are always ``True``."""

        match self.kind:
            case ValueKind.FLAG | ValueKind.INTEGER | ValueKind.REAL | ValueKind.STRING:
                return [self.as_bool()]
            case ValueKind.BOOL_VECTOR:
                return list(self._items())
            case ValueKind.INTEGER_VECTOR | ValueKind.REAL_VECTOR:
                return [item != 0 for item in self._items()]
            case ValueKind.STRING_VECTOR:
                return [True for _ in self._items()]
            case _:
                return []

    def as_integer_vector(self) -> list[int]:
        """Return every element as an integer.

        Single kinds answer with a one-element list of :meth:`as_integer`, so a
        string yields ``[0]``. String vectors have no numeric reading and yield
        ``[]``.
        """

        match self.kind:
            case ValueKind.FLAG | ValueKind.INTEGER | ValueKind.REAL | ValueKind.STRING:
                return [self.as_integer()]
            case ValueKind.BOOL_VECTOR:
                return [int(item) for item in self._items()]
            case ValueKind.INTEGER_VECTOR:
                return list(self._items())
            case ValueKind.REAL_VECTOR:
                return [_truncate(item) for item in self._items()]
            case _:
                return []

    def as_real_vector(self) -> list[float]:
        """Return every element as a float, following :meth:`as_integer_vector`."""

        match self.kind:
            case ValueKind.FLAG | ValueKind.INTEGER | ValueKind.REAL | ValueKind.STRING:
                return [self.as_real()]
            case ValueKind.BOOL_VECTOR | ValueKind.INTEGER_VECTOR:
                return [float(item) for item in self._items()]
            case ValueKind.REAL_VECTOR:
                return list(self._items())
            case _:
                return []

    def __bool__(self) -> bool:
        """Return :meth:`as_bool`."""

        return self.as_bool()

    def __len__(self) -> int:
        """Return the element count: vector length, 1 for scalars, 0 when unexisted."""

        if isinstance(self.payload, tuple):
            return len(self.payload)
        return 0 if self.kind is ValueKind.UNEXISTED else 1

    def to_json(self) -> Payload | list[Scalar]:
        """Return a JSON-compatible rendering of the payload."""

        if isinstance(self.payload, tuple):
            return list(self.payload)
        return self.payload

    def _items(self) -> tuple[Any, ...]:
        """Return the vector payload, or ``()`` for scalar values."""

        if isinstance(self.payload, tuple):
            return self.payload
        return ()


UNEXISTED_VALUE: Final[OptionValue] = OptionValue(ValueKind.UNEXISTED)


def _truncate(value: float) -> int:
    """Return ``value`` truncated toward zero, mapping NaN to ``0``."""

    if math.isnan(value):
        return 0
    return math.trunc(value)


# -- token consumption ------------------------------------------------------


def read_value(kind: ValueKind, cursor: ArgumentCursor) -> OptionValue | None:
    """Consume the tokens ``kind`` needs from ``cursor`` and build the value.

    Args:
        kind: Governing kind of the bundle being read.
        cursor: Read position; advanced past the consumed tokens on success and
            left where it was on failure.

    Returns:
        OptionValue | None: The parsed value, or ``None`` when the tokens at the
        cursor do not satisfy ``kind``.
    """

    match kind:
        case ValueKind.FLAG:
            return _read_flag(cursor)
        case ValueKind.INTEGER:
            return _read_single(cursor, parse_integer, OptionValue.integer)
        case ValueKind.REAL:
            return _read_single(cursor, parse_real, OptionValue.real)
        case ValueKind.STRING:
            return _read_single(cursor, parse_string, OptionValue.string)
        case ValueKind.BOOL_VECTOR:
            return _read_run(cursor, kind, parse_bool_literal)
        case ValueKind.INTEGER_VECTOR:
            return _read_run(cursor, kind, parse_integer)
        case ValueKind.REAL_VECTOR:
            return _read_run(cursor, kind, parse_real)
        case ValueKind.STRING_VECTOR:
            return _read_run(cursor, kind, parse_string)
        case _:
            return None


def ends_run(token: str) -> bool:
    """Return ``True`` when ``token`` terminates a vector read."""

    return not token or token.startswith("-")


def _read_flag(cursor: ArgumentCursor) -> OptionValue:
    """Return a flag, consuming the next token only when it is ``true`` or ``false``."""

    literal = _FLAG_LITERALS.get(cursor.current) if not cursor.at_end else None
    if literal is None:
        return OptionValue.flag(True)
    cursor.advance()
    return OptionValue.flag(literal)


def _read_single(
    cursor: ArgumentCursor,
    parser: Callable[[str], _T | None],
    build: Callable[[_T], OptionValue],
) -> OptionValue | None:
    """Read one token with ``parser``; the cursor only moves on success."""

    if cursor.at_end:
        return None
    parsed = parser(cursor.current)
    if parsed is None:
        return None
    cursor.advance()
    return build(parsed)


def _read_run(
    cursor: ArgumentCursor,
    kind: ValueKind,
    parser: Callable[[str], Scalar | None],
) -> OptionValue | None:
    """Read tokens until the run ends, rolling back when any token fails.

    Args:
        cursor: Read position at the first candidate token.
        kind: Vector kind of the resulting value.
        parser: Literal parser applied to each token.

    Returns:
        OptionValue | None: Vector of at least one element, or ``None``.
    """

    start = cursor.snapshot()
    items: list[Scalar] = []
    while not cursor.at_end and not ends_run(cursor.current):
        parsed = parser(cursor.current)
        if parsed is None:
            cursor.restore(start)
            return None
        items.append(parsed)
        cursor.advance()
    if not items:
        cursor.restore(start)
        return None
    return OptionValue.vector(kind, tuple(items))


__all__ = [
    "OptionValue",
    "Payload",
    "Scalar",
    "UNEXISTED_VALUE",
    "ends_run",
    "format_bool",
    "format_real",
    "parse_bool_literal",
    "parse_integer",
    "parse_real",
    "parse_string",
    "read_value",
]
