"""CLI application entry point and command routing for fic.

:func:`main` runs the pipeline

    tokens → parser → store → validator → settings → dispatcher → engine

and owns the usage-error protocol: usage on stdout, one message on
stderr, and the error kind's exit code.  :func:`cli` is the outer error
boundary for everything else.

Architecture notes
------------------
* No business logic lives here — parsing rules live in
  :mod:`fic.cli.parser`, checks in :mod:`fic.core.validator`.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from fic.cli import exit_codes
from fic.cli.console import report_error, report_interrupt, report_unexpected
from fic.cli.parser import CommandLineParser, HelpRequested, VersionRequested
from fic.cli.usage import PROG, print_usage
from fic.core.dispatcher import CommandDispatcher
from fic.core.protocols import EngineFactory
from fic.core.validator import ConfigValidator
from fic.exceptions import FicError, UsageError
from fic.utils.log import build_logger, release_logger
from fic.version import __version__


# ---------------------------------------------------------------------------
# Engine wiring
# ---------------------------------------------------------------------------

def _pillow_engine_factory(logger: logging.Logger) -> EngineFactory:
    """Return a factory building Pillow engines that log to *logger*.

    Pillow is imported only once a command actually runs.
    """
    from fic.infra.pillow_engine import PillowEngine

    return lambda settings: PillowEngine(settings, logger)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    engine_factory: EngineFactory | None = None,
) -> int:
    """Run the fic CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    engine_factory:
        Builds the engine for the validated settings.  Defaults to the
        Pillow engine.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    FicError
        Engine failures propagate unchanged to :func:`cli`.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    logger = build_logger()
    try:
        return _run(tokens, logger, engine_factory)
    finally:
        release_logger(logger)


def _run(
    tokens: list[str],
    logger: logging.Logger,
    engine_factory: EngineFactory | None,
) -> int:
    try:
        store = CommandLineParser().parse(tokens)
        settings = ConfigValidator(logger).validate(store)
    except HelpRequested:
        print_usage()
        return exit_codes.SUCCESS
    except VersionRequested:
        print(f"{PROG} {__version__}")
        return exit_codes.SUCCESS
    except UsageError as exc:
        print_usage()
        report_error(exc)
        return exc.exit_code

    logger.debug("settings: %s", settings)
    dispatcher = CommandDispatcher(
        engine_factory or _pillow_engine_factory(logger),
        logger,
    )
    dispatcher.dispatch(settings)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FicError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        report_interrupt()
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        report_unexpected(exc)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
