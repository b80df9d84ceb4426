"""Error catalog and exception hierarchy for fic.

Every failure the command line can report is a member of
:class:`ErrorKind`, which carries the message template and the process
exit code for that failure.  The matching exception classes below are
what the parser and the validator actually raise.

Hierarchy
---------
FicError
├── UsageError
│   ├── ArgCountError
│   ├── MissingArgError
│   ├── UnknownArgError
│   ├── RequiredArgNotFoundError
│   ├── FileReadError
│   └── InvalidValueError
├── EngineError
└── EnvironmentError
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Error catalog
# ---------------------------------------------------------------------------

class ErrorKind(Enum):
    """Closed set of command-line failures.

    Each member is ``(exit_code, template)``.  Exit codes are unique per
    kind and stable across releases.
    """

    ARG_COUNT = (1, "expected at least one argument, got {0}")
    MISSING_ARG = (2, "option {0} requires an argument")
    UNKNOWN_ARG = (3, "unknown argument: {0}")
    REQUIRED_ARG_NOT_FOUND = (4, "required argument not found: {0}")
    FILE_READ = (5, "cannot read file: {0}")
    INVALID_VALUE = (6, "invalid value for {0}: {1}")

    def __init__(self, exit_code: int, template: str) -> None:
        self.exit_code: int = exit_code
        self.template: str = template

    def describe(self, *params: object) -> str:
        """Render the message template with *params*."""
        return self.template.format(*params)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class FicError(Exception):
    """Base exception for all fic errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line usage ----------------------------------------------------

class UsageError(FicError):
    """A defect in the command line, reported together with the usage text.

    Subclasses bind :attr:`kind`; the message is rendered from the kind's
    template and *params*.
    """

    kind: ErrorKind

    def __init__(self, *params: object, hint: str | None = None) -> None:
        super().__init__(self.kind.describe(*params), hint=hint)
        self.params: tuple[object, ...] = params

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code


class ArgCountError(UsageError):
    """Raised when the command line is empty."""

    kind = ErrorKind.ARG_COUNT


class MissingArgError(UsageError):
    """Raised when a value-taking option is not followed by a value."""

    kind = ErrorKind.MISSING_ARG


class UnknownArgError(UsageError):
    """Raised for a token that is neither a command nor an option."""

    kind = ErrorKind.UNKNOWN_ARG


class RequiredArgNotFoundError(UsageError):
    """Raised when a mandatory setting was never supplied."""

    kind = ErrorKind.REQUIRED_ARG_NOT_FOUND


class FileReadError(UsageError):
    """Raised when the input path is not an existing, readable file."""

    kind = ErrorKind.FILE_READ


class InvalidValueError(UsageError):
    """Raised when an option value fails to parse or is out of range."""

    kind = ErrorKind.INVALID_VALUE


# --- Engine ----------------------------------------------------------------

class EngineError(FicError):
    """Raised by an engine when compression or decompression fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(FicError):
    """Raised when a required runtime dependency is not available."""
