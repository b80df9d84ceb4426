"""Protocols (interfaces) consumed by the core layer.

These define the contracts that engine backends must satisfy.  Core
code depends ONLY on these protocols — never on concrete
implementations — so the command line can be exercised without a real
compression backend.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from fic.core.models import Settings


class Engine(Protocol):
    """Contract for compression backends.

    An engine is built for one :class:`~fic.core.models.Settings` and
    reads everything it needs from it, so both operations take no
    arguments.  Any object implementing them satisfies this protocol
    structurally (no explicit inheritance required).

    Implementations should map backend-specific exceptions to
    :class:`~fic.exceptions.EngineError`.
    """

    def compress(self) -> None:
        """Compress ``settings.input_path`` into ``settings.output_path``."""
        ...  # pragma: no cover

    def decompress(self) -> None:
        """Decompress ``settings.input_path`` into ``settings.output_path``."""
        ...  # pragma: no cover


EngineFactory = Callable[[Settings], Engine]
"""Builds the engine handle for a validated configuration."""
