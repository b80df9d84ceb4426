"""Regression tests for the optional Rich dependency.

The command line must keep working — help, version, usage errors and
dispatch — when Rich is not importable, falling back to plain stderr
output.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fic.cli import exit_codes
from fic.cli.app import main


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--help"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out.startswith("usage: fic")


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert main(["--version"]) == exit_codes.SUCCESS


def test_usage_error_is_plain_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    code = main(["compress", "--bogus"])
    captured = capsys.readouterr()

    assert code == exit_codes.UNKNOWN_ARG
    assert "usage: fic" in captured.out
    assert "Error: unknown argument: --bogus" in captured.err


def test_dispatch_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    input_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    engine = MagicMock()

    code = main(
        ["compress", "-i", str(input_file), "-v"],
        engine_factory=MagicMock(return_value=engine),
    )

    assert code == exit_codes.SUCCESS
    engine.compress.assert_called_once_with()
    # Plain formatter, whatever handler an earlier run used.
    assert "| INFO     | fic | :: Initializing compress process.." in capsys.readouterr().err
