"""Untyped staging area between the parser and the validator."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from fic.core.catalog import Option

TRUE: str = "true"
FALSE: str = "false"


class ConfigStore(Mapping[str, str]):
    """String-keyed, string-valued configuration map.

    A new store already holds every catalog default.  Entries can be
    overwritten but never removed, so every key present always maps to
    a string.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {
            option.key: option.default
            for option in Option
            if option.default is not None
        }
        for key, value in (initial or {}).items():
            self.set(key, value)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"store values must be str, got {type(value).__name__}")
        self._values[key] = value

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigStore({self._values!r})"
