"""Configuration validator — turns a :class:`ConfigStore` into :class:`Settings`.

Checks run in a fixed order and the first failing check raises; there
is no error accumulation.  The order decides which single error is
reported when several values are wrong at once:

1. debug / verbose resolution (and the optional log file sink)
2. command presence
3. input presence and readability
4. metric
5. fuzz
6. quality
7. domain scale
8. tile size

The store is never modified, so validating the same store twice yields
equal :class:`Settings`.
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path

from fic.core.catalog import COMMAND_KEY, Command, Metric, Option
from fic.core.models import Settings
from fic.core.store import TRUE, ConfigStore
from fic.exceptions import (
    FileReadError,
    InvalidValueError,
    RequiredArgNotFoundError,
)
from fic.utils.log import LOGGER_NAME, attach_log_file, set_verbosity

_VALIDATING = ":: Validating: %s .."


def _is_true(value: str | None) -> bool:
    return value is not None and value.lower() == TRUE


def _to_float(raw: str) -> float:
    """Parse a plain decimal; digit-group underscores are not accepted."""
    if "_" in raw:
        raise ValueError(raw)
    return float(raw)


def _to_int(raw: str) -> int:
    if "_" in raw:
        raise ValueError(raw)
    return int(raw)


def _split_pair(value: str) -> tuple[str, str] | None:
    """Split ``"<w>x<h>"`` into its two halves, or return ``None``."""
    parts = value.lower().split("x")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        return None
    return parts[0], parts[1]


class ConfigValidator:
    """Validate a populated store and build the typed configuration.

    Parameters
    ----------
    logger:
        Logger whose level follows the verbose/debug switches and which
        receives the optional log file sink.  Defaults to the
        application logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger: logging.Logger = logger or logging.getLogger(LOGGER_NAME)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, store: ConfigStore) -> Settings:
        """Return :class:`Settings` for *store*.

        Raises
        ------
        RequiredArgNotFoundError
            When no command or no input file was given.
        FileReadError
            When the input path is not an existing, readable, regular file.
        InvalidValueError
            When metric, fuzz, quality, scale or tile cannot be parsed or
            is out of range.
        """
        debug, verbose, log_path = self._resolve_verbosity(store)
        command = self._check_command(store)
        input_path = self._check_input(store)
        metric = self._check_metric(store)
        fuzz = self._check_fuzz(store)
        quality = self._check_quality(store)
        domain_scale = self._check_scale(store)
        tile_size = self._check_tile(store)

        return Settings(
            command=command,
            input_path=input_path,
            output_path=store[Option.OUTPUT.key],
            metric=metric,
            fuzz=fuzz,
            quality=quality,
            debug=debug,
            verbose=verbose,
            log_path=log_path,
            domain_scale=domain_scale,
            tile_size=tile_size,
        )

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------

    def _resolve_verbosity(self, store: ConfigStore) -> tuple[bool, bool, str | None]:
        debug = _is_true(store.get(Option.DEBUG.key))
        verbose = debug or _is_true(store.get(Option.VERBOSE.key))
        log_path = store.get(Option.LOG.key)

        set_verbosity(self._logger, verbose=verbose, debug=debug)
        # The log file only captures debug sessions.
        if debug and log_path is not None:
            attach_log_file(self._logger, log_path)
        return debug, verbose, log_path

    def _check_command(self, store: ConfigStore) -> Command:
        self._logger.debug(_VALIDATING, COMMAND_KEY)
        command = Command.from_key(store.get(COMMAND_KEY, ""))
        if command is None:
            raise RequiredArgNotFoundError(
                Command.__name__,
                hint="Choose one of: "
                + ", ".join(cmd.token for cmd in Command),
            )
        return command

    def _check_input(self, store: ConfigStore) -> Path:
        self._logger.debug(_VALIDATING, Option.INPUT.key)
        raw = store.get(Option.INPUT.key)
        if raw is None:
            raise RequiredArgNotFoundError(Option.INPUT.token)

        path = Path(raw)
        if not (path.is_file() and os.access(path, os.R_OK)):
            raise FileReadError(raw)
        return path

    def _check_metric(self, store: ConfigStore) -> Metric:
        self._logger.debug(_VALIDATING, Option.METRIC.key)
        raw = store[Option.METRIC.key]
        metric = Metric.from_name(raw)
        if metric is None:
            raise InvalidValueError(
                Option.METRIC.token,
                raw,
                hint="Valid metrics: " + ", ".join(m.name for m in Metric),
            )
        return metric

    def _check_fuzz(self, store: ConfigStore) -> float:
        self._logger.debug(_VALIDATING, Option.FUZZ.key)
        raw = store[Option.FUZZ.key]
        try:
            fuzz = _to_float(raw)
        except ValueError:
            raise InvalidValueError(Option.FUZZ.token, raw) from None
        if not math.isfinite(fuzz) or fuzz < 0:
            raise InvalidValueError(Option.FUZZ.token, raw)
        return fuzz

    def _check_quality(self, store: ConfigStore) -> float:
        self._logger.debug(_VALIDATING, Option.QUALITY.key)
        raw = store[Option.QUALITY.key]
        try:
            quality = _to_float(raw)
        except ValueError:
            raise InvalidValueError(Option.QUALITY.token, raw) from None
        # NaN fails both comparisons.
        if not 0.0 <= quality <= 1.0:
            raise InvalidValueError(
                Option.QUALITY.token,
                raw,
                hint="Quality must be between 0 and 1.",
            )
        return quality

    def _check_scale(self, store: ConfigStore) -> tuple[float, float]:
        self._logger.debug(_VALIDATING, Option.SCALE.key)
        raw = store[Option.SCALE.key]
        pair = _split_pair(raw)
        try:
            if pair is None:
                raise ValueError(raw)
            width, height = _to_float(pair[0]), _to_float(pair[1])
        except ValueError:
            raise InvalidValueError(Option.SCALE.token, raw) from None
        if not (0.0 < width <= 1.0 and 0.0 < height <= 1.0):
            raise InvalidValueError(Option.SCALE.token, raw)
        return width, height

    def _check_tile(self, store: ConfigStore) -> tuple[int, int]:
        self._logger.debug(_VALIDATING, Option.TILE.key)
        raw = store[Option.TILE.key]
        pair = _split_pair(raw)
        try:
            if pair is None:
                raise ValueError(raw)
            width, height = _to_int(pair[0]), _to_int(pair[1])
        except ValueError:
            raise InvalidValueError(Option.TILE.token, raw) from None
        if width <= 0 or height <= 0:
            raise InvalidValueError(Option.TILE.token, raw)
        return width, height
