# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for checking descriptor tables and trial-parsing arguments."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

import typer
from rich.markup import escape
from rich.table import Table

from . import console
from .descriptors import OptionDescriptorTable
from .errors import TableDocumentError
from .kinds import DECLARABLE_KINDS, KIND_ALIASES
from .loader import load_table
from .parser import ParseResult, parse

PROGRAM_NAME: Final[str] = "optable"

app = typer.Typer(
    name=PROGRAM_NAME,
    help="Validate option descriptor tables and parse argument vectors against them.",
    no_args_is_help=True,
    add_completion=False,
)

_TABLE_ARGUMENT = typer.Argument(
    ...,
    metavar="TABLE",
    help="Descriptor table document (.toml or .json).",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug logging."),
) -> None:
    """Configure logging for every sub-command."""

    console.configure_logging(verbose=verbose)


def _load_or_exit(path: Path) -> OptionDescriptorTable:
    """Return the table at ``path`` or exit with code 2 after reporting why.

    Raises:
        typer.Exit: If the document is missing or malformed.
    """

    try:
        return load_table(path)
    except FileNotFoundError:
        console.fail(f"Table not found: {path}")
        raise typer.Exit(code=2) from None
    except TableDocumentError as exc:
        console.fail(str(exc))
        raise typer.Exit(code=2) from None


def _report_lines(report: str) -> None:
    """Print each line of ``report`` as a failure."""

    for line in report.splitlines():
        console.fail(line)


@app.command("check")
def check_table(table_path: Path = _TABLE_ARGUMENT) -> None:
    """Validate a descriptor table and list its options."""

    table = _load_or_exit(table_path)
    grid = Table(title=escape(str(table_path)))
    grid.add_column("alias")
    grid.add_column("name")
    grid.add_column("kind")
    for descriptor in table:
        grid.add_row(
            f"-{descriptor.alias}" if descriptor.alias else "",
            f"--{descriptor.name}" if descriptor.name else "",
            escape(descriptor.kind.label) if descriptor.kind in DECLARABLE_KINDS else str(int(descriptor.kind)),
        )
    console.get_console(color=console.detect_tty()).print(grid)

    if not table.valid:
        _report_lines(table.error)
        raise typer.Exit(code=1)
    console.ok(f"{len(table)} option descriptors are valid")


def _render_json(result: ParseResult) -> str:
    """Return ``result`` serialised as indented JSON."""

    payload = {
        "valid": result.valid,
        "errors": result.error.splitlines(),
        "options": [
            {
                "alias": option.alias or None,
                "name": option.name or None,
                "kind": option.kind.label,
                "value": option.value.to_json(),
            }
            for option in result
        ],
    }
    return json.dumps(payload, indent=2)


@app.command(
    "parse",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def parse_arguments(
    table_path: Path = _TABLE_ARGUMENT,
    arguments: list[str] | None = typer.Argument(
        None,
        metavar="[-- ARGS...]",
        help="Argument vector to parse; place it after '--'.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the parse result as JSON."),
) -> None:
    """Parse an argument vector against a descriptor table."""

    table = _load_or_exit(table_path)
    result = parse(table, [PROGRAM_NAME, *(arguments or [])])

    if as_json:
        typer.echo(_render_json(result))
    else:
        grid = Table(title="Parsed options")
        grid.add_column("alias")
        grid.add_column("name")
        grid.add_column("kind")
        grid.add_column("value")
        for option in result:
            grid.add_row(
                option.alias,
                option.name,
                escape(option.kind.label),
                escape(" ".join(option.as_string_vector())),
            )
        console.get_console(color=console.detect_tty()).print(grid)
        if result.valid:
            console.ok(f"Parsed {len(result.values)} option bundle(s)")
        else:
            _report_lines(result.error)

    if not result.valid:
        raise typer.Exit(code=1)


@app.command("kinds")
def list_kinds() -> None:
    """List value kinds and the aliases accepted in table documents."""

    grid = Table(title="Value kinds")
    grid.add_column("kind")
    grid.add_column("bit")
    grid.add_column("aliases")
    for kind in sorted(DECLARABLE_KINDS):
        aliases = sorted(alias for alias, target in KIND_ALIASES.items() if target is kind)
        grid.add_row(escape(kind.label), str(int(kind)), escape(", ".join(aliases)))
    console.get_console(color=console.detect_tty()).print(grid)


__all__ = ["app"]
