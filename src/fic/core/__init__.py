"""Core / service layer — configuration model, validation and dispatch.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* Filesystem access is limited to the validator's input-file check and
  the optional log file sink.
"""

from fic.core.catalog import COMMAND_KEY, Command, Metric, Option
from fic.core.dispatcher import CommandDispatcher
from fic.core.models import Settings
from fic.core.protocols import Engine, EngineFactory
from fic.core.store import ConfigStore
from fic.core.validator import ConfigValidator

__all__: list[str] = [
    "COMMAND_KEY",
    "Command",
    "CommandDispatcher",
    "ConfigStore",
    "ConfigValidator",
    "Engine",
    "EngineFactory",
    "Metric",
    "Option",
    "Settings",
]
