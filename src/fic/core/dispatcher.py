"""Command dispatcher — runs the selected command against an engine.

The engine factory is injected at construction time.  Engine failures
are not caught here; they reach the CLI error boundary unchanged.
"""

from __future__ import annotations

import logging

from fic.core.catalog import Command
from fic.core.models import Settings
from fic.core.protocols import EngineFactory
from fic.utils.log import LOGGER_NAME


class CommandDispatcher:
    """Select compress or decompress and invoke it once.

    Parameters
    ----------
    engine_factory:
        Callable building an :class:`~fic.core.protocols.Engine` from
        the validated settings.
    logger:
        Application logger.
    """

    def __init__(
        self,
        engine_factory: EngineFactory,
        logger: logging.Logger | None = None,
    ) -> None:
        self._engine_factory: EngineFactory = engine_factory
        self._logger: logging.Logger = logger or logging.getLogger(LOGGER_NAME)

    def dispatch(self, settings: Settings) -> None:
        """Build an engine for *settings* and run its command."""
        engine = self._engine_factory(settings)

        if settings.command is Command.COMPRESS:
            self._logger.info(":: Initializing compress process..")
            engine.compress()
        elif settings.command is Command.DECOMPRESS:
            self._logger.info(":: Initializing decompress process..")
            engine.decompress()
