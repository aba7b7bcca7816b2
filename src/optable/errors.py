# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by the opt-in strict helpers and the table loader."""

from __future__ import annotations


class OptableError(RuntimeError):
    """Base class for every error raised by :mod:`optable`."""


class _ReportedError(OptableError):
    """Error carrying the newline-terminated report accumulated by a component."""

    def __init__(self, report: str) -> None:
        """Create the error from the accumulated ``report`` text."""

        self.report = report
        self.lines: tuple[str, ...] = tuple(line for line in report.splitlines() if line)
        super().__init__("; ".join(self.lines) or "unknown error")


class DescriptorTableError(_ReportedError):
    """Raised when an option descriptor table fails validation."""


class ArgumentParseError(_ReportedError):
    """Raised when an argument vector does not satisfy the declared grammar."""


class TableDocumentError(OptableError):
    """Raised when a descriptor table document cannot be read or is malformed."""


class UnknownValueKindError(TableDocumentError, ValueError):
    """Raised when a textual value kind does not name a declarable kind."""


__all__ = (
    "ArgumentParseError",
    "DescriptorTableError",
    "OptableError",
    "TableDocumentError",
    "UnknownValueKindError",
)
