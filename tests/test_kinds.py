# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for value-kind classification and bundle promotion."""

from __future__ import annotations

import pytest

from optable.errors import UnknownValueKindError
from optable.kinds import (
    ValueKind,
    is_single,
    is_vector,
    normalize_value_kind,
    promote,
)

K = ValueKind


def test_single_and_vector_classification() -> None:
    assert all(is_single(kind) for kind in (K.STRING, K.FLAG, K.INTEGER, K.REAL))
    assert not any(is_single(kind) for kind in (K.UNEXISTED, K.STRING_VECTOR, K.REAL_VECTOR))
    assert all(is_vector(kind) for kind in (K.STRING_VECTOR, K.BOOL_VECTOR, K.INTEGER_VECTOR, K.REAL_VECTOR))
    assert not is_vector(K.INTEGER)


@pytest.mark.parametrize(
    ("kinds", "expected"),
    [
        ((K.FLAG,), K.FLAG),
        ((K.FLAG, K.FLAG, K.FLAG), K.FLAG),
        ((K.INTEGER,), K.INTEGER),
        ((K.STRING, K.INTEGER), K.INTEGER),
        ((K.INTEGER, K.REAL), K.REAL),
        ((K.STRING, K.FLAG), K.FLAG),
        ((K.REAL_VECTOR, K.STRING), K.REAL_VECTOR),
        ((K.REAL_VECTOR, K.STRING_VECTOR, K.INTEGER_VECTOR), K.REAL_VECTOR),
        ((K.INTEGER_VECTOR,), K.INTEGER_VECTOR),
        ((K.INTEGER_VECTOR, K.INTEGER), K.INTEGER_VECTOR),
        ((K.INTEGER_VECTOR, K.REAL), K.REAL_VECTOR),
        ((K.BOOL_VECTOR, K.FLAG), K.BOOL_VECTOR),
        ((K.BOOL_VECTOR, K.STRING), K.BOOL_VECTOR),
        ((K.BOOL_VECTOR, K.INTEGER), K.INTEGER_VECTOR),
        ((K.BOOL_VECTOR, K.REAL), K.REAL_VECTOR),
        ((K.BOOL_VECTOR, K.STRING_VECTOR), K.BOOL_VECTOR),
        ((K.STRING_VECTOR, K.STRING, K.FLAG, K.FLAG), K.STRING_VECTOR),
        ((K.STRING_VECTOR, K.INTEGER), K.INTEGER_VECTOR),
        ((K.STRING_VECTOR, K.REAL, K.INTEGER), K.REAL_VECTOR),
        ((), K.UNEXISTED),
    ],
)
def test_promotion_table(kinds: tuple[ValueKind, ...], expected: ValueKind) -> None:
    assert promote(kinds) is expected


def test_promotion_ignores_bundle_order() -> None:
    assert promote((K.INTEGER, K.STRING_VECTOR)) is promote((K.STRING_VECTOR, K.INTEGER))


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("int", K.INTEGER),
        (" Float ", K.REAL),
        ("bool", K.FLAG),
        ("list[str]", K.STRING_VECTOR),
        ("list[bool]", K.BOOL_VECTOR),
        ("integer_vector", K.INTEGER_VECTOR),
        (K.REAL_VECTOR, K.REAL_VECTOR),
    ],
)
def test_normalize_value_kind(alias: str | ValueKind, expected: ValueKind) -> None:
    assert normalize_value_kind(alias) is expected


def test_normalize_value_kind_rejects_unknown_names() -> None:
    with pytest.raises(UnknownValueKindError, match="unknown value kind 'complex'"):
        normalize_value_kind("complex", context="options[0].kind")
    with pytest.raises(UnknownValueKindError):
        normalize_value_kind(K.UNEXISTED)


def test_labels_are_canonical_aliases() -> None:
    for kind in (K.STRING, K.FLAG, K.INTEGER, K.REAL, K.STRING_VECTOR, K.REAL_VECTOR):
        assert normalize_value_kind(kind.label) is kind
    assert K.UNEXISTED.label == "unexisted"
