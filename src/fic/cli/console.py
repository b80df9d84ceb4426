"""Stderr reporting for fic failures.

Three kinds of message end up here:

* usage and engine errors, as ``Error: <message>`` plus an optional
  ``Hint: <hint>`` line;
* ``Aborted by user.`` on Ctrl+C;
* a one-line summary of an unexpected exception.

Rich renders the label in colour when it is installed.  Without Rich the
same text is written to stderr as is, so ``--help`` and usage errors
never depend on it.  Only the label is styled; user-supplied text
(tokens, paths) is never parsed as markup.
"""

from __future__ import annotations

import sys
from typing import Any

from fic.exceptions import FicError


def _rich_stderr() -> Any | None:
    """Return a Rich stderr console, or ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console(stderr=True, soft_wrap=True)


def _emit(style: str, label: str, text: str) -> None:
    """Write ``label text`` with *label* styled as *style*."""
    rich_console = _rich_stderr()
    if rich_console is None:
        print(f"{label} {text}".rstrip(), file=sys.stderr)
        return

    from rich.text import Text

    line = Text(label, style=style)
    if text:
        line.append(" ")
        line.append(text)
    rich_console.print(line)


def report_error(exc: FicError) -> None:
    """Print *exc* and its hint, if any."""
    _emit("bold red", "Error:", str(exc))
    if exc.hint:
        _emit("yellow", "Hint:", exc.hint)


def report_interrupt() -> None:
    _emit("yellow", "\nAborted by user.", "")


def report_unexpected(exc: BaseException) -> None:
    """Summarise an exception that escaped every known error path."""
    _emit(
        "bold red",
        "Unexpected error.",
        f"Please report this issue.\n  {type(exc).__name__}: {exc}",
    )
