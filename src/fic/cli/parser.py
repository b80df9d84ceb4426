"""Command-line parser — fills a :class:`ConfigStore` from raw tokens.

The grammar is a flat token walk with one token of lookahead:

* ``compress`` / ``decompress`` select the command; when both appear
  the last one wins.
* Options that take a value consume the next token, which must be
  non-empty and must not start with ``-``.
* ``-v`` / ``-d`` store ``"true"``.
* ``-h`` and ``-V`` stop parsing immediately.

The first defect raises; nothing is validated here beyond token shape.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from fic.core.catalog import COMMAND_KEY, Command, Option
from fic.core.store import TRUE, ConfigStore
from fic.exceptions import ArgCountError, MissingArgError, UnknownArgError


class HelpRequested(Exception):
    """Raised when ``-h``/``--help`` is seen; not an error."""


class VersionRequested(Exception):
    """Raised when ``-V``/``--version`` is seen; not an error."""


class CommandLineParser:
    """Stateless token walker.  Each :meth:`parse` call gets a fresh store."""

    def parse(self, tokens: Sequence[str]) -> ConfigStore:
        """Parse *tokens* (without the program name) into a new store.

        Raises
        ------
        HelpRequested, VersionRequested
            When the corresponding option is seen.
        ArgCountError
            When *tokens* is empty.
        MissingArgError
            When a value-taking option has no usable value after it.
        UnknownArgError
            For the first unrecognised token.
        """
        if not tokens:
            raise ArgCountError(len(tokens))

        store = ConfigStore()
        stream = iter(tokens)
        for token in stream:
            command = Command.from_token(token)
            if command is not None:
                store.set(COMMAND_KEY, command.key)
                continue

            option = Option.from_token(token)
            if option is None:
                raise UnknownArgError(token)

            if option is Option.HELP:
                raise HelpRequested()
            if option is Option.VERSION:
                raise VersionRequested()

            if option.takes_argument:
                store.set(option.key, self._take_value(option, stream))
            else:
                store.set(option.key, TRUE)
        return store

    @staticmethod
    def _take_value(option: Option, stream: Iterator[str]) -> str:
        value = next(stream, None)
        if not value or value.startswith("-"):
            raise MissingArgError(option.token)
        return value
