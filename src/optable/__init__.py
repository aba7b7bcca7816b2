# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Declarative command-line option parsing with typed value accessors."""

from __future__ import annotations

from typing import Final

from .descriptors import NO_ALIAS, OptionDescriptor, OptionDescriptorTable
from .errors import (
    ArgumentParseError,
    DescriptorTableError,
    OptableError,
    TableDocumentError,
    UnknownValueKindError,
)
from .kinds import ValueKind, normalize_value_kind, promote
from .loader import load_table, table_from_mapping
from .parser import ABSENT_OPTION, Option, OptionParser, ParseResult, parse
from .values import OptionValue

__version__: Final[str] = "0.1.0"

__all__: Final[tuple[str, ...]] = (
    "ABSENT_OPTION",
    "ArgumentParseError",
    "DescriptorTableError",
    "NO_ALIAS",
    "OptableError",
    "Option",
    "OptionDescriptor",
    "OptionDescriptorTable",
    "OptionParser",
    "OptionValue",
    "ParseResult",
    "TableDocumentError",
    "UnknownValueKindError",
    "ValueKind",
    "load_table",
    "normalize_value_kind",
    "parse",
    "promote",
    "table_from_mapping",
)
