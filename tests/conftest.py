# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from optable import OptionDescriptor, OptionDescriptorTable, ValueKind

TableFactory = Callable[..., OptionDescriptorTable]


@pytest.fixture
def make_table() -> TableFactory:
    """Return a factory building tables from ``(alias, name, kind)`` triples."""

    def _factory(*entries: tuple[str, str, ValueKind]) -> OptionDescriptorTable:
        table = OptionDescriptorTable()
        for alias, name, kind in entries:
            table.insert(OptionDescriptor(alias=alias, name=name, kind=kind))
        return table

    return _factory


@pytest.fixture
def program() -> str:
    """Return the program name placed at ``argv[0]``."""

    return "Program Name"
