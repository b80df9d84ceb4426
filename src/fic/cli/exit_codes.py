"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
usage-error codes mirror :class:`~fic.exceptions.ErrorKind`.
"""

from __future__ import annotations

from fic.exceptions import ErrorKind

SUCCESS: int = 0
"""Clean exit — command completed, or help/version was shown."""

ARG_COUNT: int = ErrorKind.ARG_COUNT.exit_code
"""No arguments were given."""

MISSING_ARG: int = ErrorKind.MISSING_ARG.exit_code
"""An option that takes a value was not followed by one."""

UNKNOWN_ARG: int = ErrorKind.UNKNOWN_ARG.exit_code
"""A token was neither a command nor an option."""

REQUIRED_ARG_NOT_FOUND: int = ErrorKind.REQUIRED_ARG_NOT_FOUND.exit_code
"""The command or the input file was not given."""

FILE_READ: int = ErrorKind.FILE_READ.exit_code
"""The input file does not exist or cannot be read."""

INVALID_VALUE: int = ErrorKind.INVALID_VALUE.exit_code
"""An option value could not be parsed or is out of range."""

GENERAL_ERROR: int = 7
"""Any other FicError (engine failure, missing backend) was caught."""

UNEXPECTED_ERROR: int = 70
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
