"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and distinct.
"""

from __future__ import annotations

import pytest

from fic import __version__
from fic.cli import exit_codes
from fic.exceptions import (
    ArgCountError,
    EngineError,
    EnvironmentError,
    ErrorKind,
    FicError,
    FileReadError,
    InvalidValueError,
    MissingArgError,
    RequiredArgNotFoundError,
    UnknownArgError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

USAGE_ERRORS = [
    (ArgCountError, ErrorKind.ARG_COUNT),
    (MissingArgError, ErrorKind.MISSING_ARG),
    (UnknownArgError, ErrorKind.UNKNOWN_ARG),
    (RequiredArgNotFoundError, ErrorKind.REQUIRED_ARG_NOT_FOUND),
    (FileReadError, ErrorKind.FILE_READ),
    (InvalidValueError, ErrorKind.INVALID_VALUE),
]


class TestExceptions:
    @pytest.mark.parametrize(("exc_class", "kind"), USAGE_ERRORS)
    def test_usage_errors_bind_their_kind(
        self, exc_class: type[UsageError], kind: ErrorKind
    ) -> None:
        assert issubclass(exc_class, UsageError)
        assert exc_class.kind is kind

    @pytest.mark.parametrize("exc_class", [UsageError, EngineError, EnvironmentError])
    def test_all_exceptions_inherit_from_base(self, exc_class: type[FicError]) -> None:
        assert issubclass(exc_class, FicError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(FicError, Exception)

    def test_hint_is_stored(self) -> None:
        err = FicError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = FicError("boom")
        assert err.hint is None

    def test_message_rendered_from_template(self) -> None:
        err = InvalidValueError("-q", "1.5")
        assert str(err) == "invalid value for -q: 1.5"
        assert err.params == ("-q", "1.5")
        assert err.exit_code == ErrorKind.INVALID_VALUE.exit_code

    def test_usage_error_accepts_hint(self) -> None:
        err = UnknownArgError("--bogus", hint="see --help")
        assert str(err) == "unknown argument: --bogus"
        assert err.hint == "see --help"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_kind_codes_are_mirrored(self) -> None:
        assert exit_codes.ARG_COUNT == 1
        assert exit_codes.MISSING_ARG == 2
        assert exit_codes.UNKNOWN_ARG == 3
        assert exit_codes.REQUIRED_ARG_NOT_FOUND == 4
        assert exit_codes.FILE_READ == 5
        assert exit_codes.INVALID_VALUE == 6

    def test_all_codes_are_distinct(self) -> None:
        codes = [
            exit_codes.SUCCESS,
            exit_codes.GENERAL_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.KEYBOARD_INTERRUPT,
            *(kind.exit_code for kind in ErrorKind),
        ]
        assert len(codes) == len(set(codes))

    def test_error_codes_are_small_positive(self) -> None:
        assert all(0 < kind.exit_code < 126 for kind in ErrorKind)
