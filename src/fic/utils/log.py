"""Logging helpers.

Each run of the command line gets its own logger from
:func:`build_logger`; the CLI entry point hands it to the validator,
the dispatcher and the engine, and :func:`release_logger` closes its
handlers when the run ends.  Loggers built here are not registered with
:mod:`logging`, so a log file opened for one run never sees records from
the next.

Console records go to stderr through Rich when it is installed and
through a plain stream handler otherwise.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME: str = "fic"

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _console_handler() -> logging.Handler:
    """Return a stderr handler, Rich-rendered when available."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def build_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a fresh, unregistered logger with a console handler.

    The logger starts at WARNING; :func:`set_verbosity` raises it.
    """
    logger = logging.Logger(name, logging.WARNING)
    logger.addHandler(_console_handler())
    return logger


def release_logger(logger: logging.Logger) -> None:
    """Detach and close every handler of *logger*."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def set_verbosity(logger: logging.Logger, *, verbose: bool, debug: bool) -> None:
    """Map the verbose/debug switches onto a logging level."""
    if debug:
        logger.setLevel(logging.DEBUG)
    elif verbose:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)


def attach_log_file(logger: logging.Logger, path: str) -> bool:
    """Also write *logger* records to the file at *path*.

    Attaching the same path twice is a no-op.  When the file cannot be
    opened a warning is logged and ``False`` is returned; the caller
    carries on without the file sink.
    """
    target = os.path.abspath(path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return True

    try:
        file_handler = logging.FileHandler(target, encoding="utf-8")
    except OSError as exc:
        logger.warning("==> cannot write log file: %s (%s)", path, exc.strerror or exc)
        return False

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return True
