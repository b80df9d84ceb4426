"""Domain models for fic.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fic.core.catalog import Command, Metric


@dataclass(frozen=True, slots=True)
class Settings:
    """Typed, checked configuration produced by the validator.

    Only :class:`~fic.core.validator.ConfigValidator` builds these; the
    dispatcher and the engines consume them.
    """

    command: Command
    """The action to run."""

    input_path: Path
    """Existing, readable, regular file."""

    output_path: str
    """Destination of the result (not checked)."""

    metric: Metric
    """Block comparison metric."""

    fuzz: float
    """Finite, non-negative color tolerance."""

    quality: float
    """Target quality in ``[0, 1]``."""

    debug: bool

    verbose: bool
    """Always ``True`` when :attr:`debug` is ``True``."""

    log_path: str | None = None
    """Optional log file destination."""

    domain_scale: tuple[float, float] = (0.5, 0.5)
    """Width and height scale factors of the domain image, each in ``(0, 1]``."""

    tile_size: tuple[int, int] = (8, 8)
    """Width and height of a range tile in pixels."""
