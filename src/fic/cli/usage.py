"""Usage text rendered from the option and command catalogs.

Usage always goes to stdout as plain text so it stays readable when
piped and works without Rich.
"""

from __future__ import annotations

from fic.core.catalog import Command, Metric, Option

PROG: str = "fic"


def _option_label(option: Option) -> str:
    label = ", ".join(option.tokens)
    if option.takes_argument:
        label += f" <{option.key.lower()}>"
    return label


def render_usage(prog: str = PROG) -> str:
    """Return the full help text."""
    lines = [
        f"usage: {prog} <{Command.__name__.lower()}> "
        f"[{Option.__name__.lower()}s] {Option.INPUT.token} <input-file>",
        "",
        "Commands:",
    ]
    width = max(len(cmd.token) for cmd in Command)
    for cmd in Command:
        lines.append(f"  {cmd.token:<{width}}  {cmd.description}")

    lines += ["", "Options:"]
    labels = {option: _option_label(option) for option in Option}
    width = max(len(label) for label in labels.values())
    for option, label in labels.items():
        text = option.description
        if option.takes_argument and option.default is not None:
            text += f" (default: {option.default})"
        lines.append(f"  {label:<{width}}  {text}")

    lines += ["", "Metrics: " + ", ".join(metric.name for metric in Metric)]
    return "\n".join(lines) + "\n"


def print_usage(prog: str = PROG) -> None:
    """Write the help text to stdout."""
    print(render_usage(prog), end="")
