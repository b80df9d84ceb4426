"""Infrastructure layer — image codec integration.

Every raw third-party exception must be caught here and re-raised as a
:class:`~fic.exceptions.FicError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from fic.infra.pillow_engine import PillowEngine

__all__: list[str] = ["PillowEngine"]
