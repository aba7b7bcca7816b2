# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console helpers for user-facing CLI output."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


def detect_tty() -> bool:
    """Return whether stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when stdout is a TTY, ``False`` otherwise or when the
        stream cannot be queried.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=4)
def get_console(*, color: bool, stderr: bool = False) -> Console:
    """Return a cached Rich console configured for ``color``.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        stderr: ``True`` to write to standard error instead of standard output.

    Returns:
        Console: Console matching the requested preferences.
    """

    tty = detect_tty()
    color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
        "auto" if color and tty else None
    )
    return Console(
        color_system=color_system,
        no_color=not (color and tty),
        stderr=stderr,
        soft_wrap=True,
    )


def _print_line(msg: str, *, style: str | None, use_color: bool | None) -> None:
    """Render ``msg`` as one unwrapped line on the shared console.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"✅ {msg}", style="green", use_color=use_color)


def fail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"❌ {msg}", style="red", use_color=use_color)


def configure_logging(*, verbose: bool) -> None:
    """Route :mod:`optable` log records through a Rich handler.

    Args:
        verbose: ``True`` to emit DEBUG records, otherwise only warnings.
    """

    logger = logging.getLogger("optable")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=get_console(color=detect_tty(), stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)


__all__ = ["configure_logging", "detect_tty", "fail", "get_console", "ok"]
