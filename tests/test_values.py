# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for literal parsing, token consumption and value projections."""

from __future__ import annotations

import pytest

from optable.cursor import ArgumentCursor
from optable.kinds import ValueKind
from optable.values import (
    UNEXISTED_VALUE,
    OptionValue,
    parse_integer,
    parse_real,
    read_value,
)


def _cursor(*tokens: str) -> ArgumentCursor:
    return ArgumentCursor.over(tokens)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("100", 100), ("+7", 7), ("-42", -42), ("007", 7)],
)
def test_parse_integer_accepts_base10(text: str, expected: int) -> None:
    assert parse_integer(text) == expected


@pytest.mark.parametrize("text", ["", "-", "+", "1.5", "12a", " 12", "1_000", "0x10", "--1"])
def test_parse_integer_rejects_partial_literals(text: str) -> None:
    assert parse_integer(text) is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [("100.25", 100.25), ("-0.5", -0.5), (".5", 0.5), ("3.", 3.0), ("1e3", 1000.0), ("12", 12.0)],
)
def test_parse_real_accepts_float_literals(text: str, expected: float) -> None:
    assert parse_real(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", ".", "1.2.3", "12.375641876a", "1e", "1e999", "inf", "nan", "NaN", "0x1p3", " 1.0"],
)
def test_parse_real_rejects_invalid_literals(text: str) -> None:
    assert parse_real(text) is None


def test_integer_projections_round_trip() -> None:
    cursor = _cursor("100")
    value = read_value(ValueKind.INTEGER, cursor)

    assert value is not None
    assert cursor.at_end
    assert value.as_integer() == 100
    assert value.as_real() == 100.0
    assert value.as_string() == "100"
    assert value.as_bool() is True
    assert value.as_integer_vector() == [100]
    assert value.as_string_vector() == ["100"]


def test_zero_integer_is_false() -> None:
    value = read_value(ValueKind.INTEGER, _cursor("0"))
    assert value is not None
    assert not value


def test_real_projections() -> None:
    value = read_value(ValueKind.REAL, _cursor("100.25"))

    assert value is not None
    assert value.as_real() == 100.25
    assert value.as_integer() == 100
    assert value.as_string() == "100.25"
    assert parse_real(value.as_string()) == 100.25
    assert value.as_real_vector() == [100.25]


def test_negative_real_truncates_toward_zero() -> None:
    value = read_value(ValueKind.REAL, _cursor("-2.75"))
    assert value is not None
    assert value.as_integer() == -2


def test_string_requires_non_empty_token() -> None:
    assert read_value(ValueKind.STRING, _cursor("")) is None
    value = read_value(ValueKind.STRING, _cursor("100.25"))
    assert value is not None
    assert value.as_string() == "100.25"
    assert value.as_bool() is True
    assert value.as_integer() == 0
    assert value.as_real() == 0.0


def test_string_answers_every_vector_projection_with_one_element() -> None:
    value = OptionValue.string("hello")

    assert value.as_string_vector() == ["hello"]
    assert value.as_bool_vector() == [True]
    assert value.as_integer_vector() == [0]
    assert value.as_real_vector() == [0.0]


@pytest.mark.parametrize("kind", [ValueKind.INTEGER, ValueKind.REAL, ValueKind.STRING])
def test_single_read_at_end_of_input_fails(kind: ValueKind) -> None:
    assert read_value(kind, _cursor()) is None


def test_single_read_failure_keeps_cursor() -> None:
    cursor = _cursor("abc")
    assert read_value(ValueKind.INTEGER, cursor) is None
    assert cursor.index == 0
    assert cursor.current == "abc"


@pytest.mark.parametrize(
    ("tokens", "expected", "consumed"),
    [
        ((), True, 0),
        (("false",), False, 1),
        (("true",), True, 1),
        (("False",), True, 0),
        (("-e",), True, 0),
        (("other",), True, 0),
    ],
)
def test_flag_optionally_consumes_literal(tokens: tuple[str, ...], expected: bool, consumed: int) -> None:
    cursor = _cursor(*tokens)
    value = read_value(ValueKind.FLAG, cursor)

    assert value is not None
    assert value.as_bool() is expected
    assert value.as_string() == ("true" if expected else "false")
    assert cursor.index == consumed


def test_vector_read_stops_before_option_token() -> None:
    cursor = _cursor("12", "13", "-e")
    value = read_value(ValueKind.INTEGER_VECTOR, cursor)

    assert value is not None
    assert value.as_integer_vector() == [12, 13]
    assert cursor.current == "-e"


def test_vector_read_stops_at_empty_token() -> None:
    cursor = _cursor("a", "", "b")
    value = read_value(ValueKind.STRING_VECTOR, cursor)

    assert value is not None
    assert value.as_string_vector() == ["a"]
    assert cursor.index == 1


def test_vector_read_rolls_back_on_bad_token() -> None:
    cursor = _cursor("12", "x", "13")
    assert read_value(ValueKind.INTEGER_VECTOR, cursor) is None
    assert cursor.index == 0


def test_vector_read_requires_one_token() -> None:
    cursor = _cursor("-x")
    assert read_value(ValueKind.STRING_VECTOR, cursor) is None
    assert cursor.index == 0
    assert read_value(ValueKind.REAL_VECTOR, _cursor()) is None


def test_bool_vector_accepts_capitalised_literals() -> None:
    value = read_value(ValueKind.BOOL_VECTOR, _cursor("false", "True", "False"))

    assert value is not None
    assert value.as_bool_vector() == [False, True, False]
    assert value.as_bool() is False
    assert value.as_string_vector() == ["false", "true", "false"]
    assert value.as_integer_vector() == [0, 1, 0]


def test_bool_vector_rejects_other_words() -> None:
    cursor = _cursor("true", "yes")
    assert read_value(ValueKind.BOOL_VECTOR, cursor) is None
    assert cursor.index == 0


def test_vector_read_continues_from_inline_value() -> None:
    cursor = ArgumentCursor(argv=("--list=1.5", "2.5"), index=0, offset=len("--list="))
    value = read_value(ValueKind.REAL_VECTOR, cursor)

    assert value is not None
    assert value.as_real_vector() == [1.5, 2.5]
    assert value.as_real() == 1.5
    assert value.as_integer_vector() == [1, 2]


def test_string_vector_projections() -> None:
    value = OptionValue.vector(ValueKind.STRING_VECTOR, ("demotest", "other"))

    assert value.as_string() == "demotest"
    assert value.as_bool() is True
    assert value.as_bool_vector() == [True, True]
    assert value.as_real_vector() == []
    assert len(value) == 2


def test_unexisted_value_defaults() -> None:
    assert UNEXISTED_VALUE.as_bool() is False
    assert UNEXISTED_VALUE.as_string() == ""
    assert UNEXISTED_VALUE.as_integer() == 0
    assert UNEXISTED_VALUE.as_real() == 0.0
    assert UNEXISTED_VALUE.as_string_vector() == []
    assert len(UNEXISTED_VALUE) == 0


def test_values_are_immutable() -> None:
    value = OptionValue.integer(3)
    with pytest.raises(AttributeError):
        value.payload = 4  # type: ignore[misc]
